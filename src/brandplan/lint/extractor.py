"""
Class-name extraction from attribute value expressions.

Collects every literal class name that could end up in the rendered
attribute at runtime. Both branches of logical and conditional expressions
are collected since either may be taken. Unrecognized shapes yield nothing:
a missed class name is preferable to a guessed one.
"""

from __future__ import annotations

from brandplan.core.ir.expressions import (
    ArrayLiteral,
    CallExpr,
    ConditionalExpr,
    Expr,
    LogicalExpr,
    StringLiteral,
    TemplateLiteral,
)


def split_class_string(value: str) -> list[str]:
    """Split a class string on whitespace, dropping empty segments."""
    return value.split()


def extract(node: Expr | None) -> list[str]:
    """Extract class names from an expression, in source-derived order.

    Duplicates are kept. Never raises for any expression shape.

    Args:
        node: Attribute value expression, or None for a valueless attribute.

    Returns:
        Class names found in static text.
    """
    if node is None:
        return []

    if isinstance(node, StringLiteral):
        return split_class_string(node.value)

    if isinstance(node, TemplateLiteral):
        # Interpolations are not descended into
        classes: list[str] = []
        for quasi in node.quasis:
            classes.extend(split_class_string(quasi))
        return classes

    if isinstance(node, CallExpr):
        classes = []
        for arg in node.args:
            classes.extend(extract(arg))
        return classes

    if isinstance(node, ArrayLiteral):
        classes = []
        for element in node.elements:
            if element is not None:
                classes.extend(extract(element))
        return classes

    if isinstance(node, LogicalExpr):
        return extract(node.right) + extract(node.left)

    if isinstance(node, ConditionalExpr):
        return extract(node.consequent) + extract(node.alternate)

    return []
