"""
JSX front end for the BrandPlan linter.

Usage:
    from brandplan.lint.jsx import parse_expr, scan_elements

    expr = parse_expr('cn("flex", active && "p-brand-4")')
    elements = scan_elements(source)
"""

from brandplan.lint.jsx.parser import JsParseError, parse_attribute_expression, parse_expr
from brandplan.lint.jsx.scanner import (
    JsxAttribute,
    JsxElement,
    LineIndex,
    class_name_contexts,
    scan_elements,
)

__all__ = [
    "JsParseError",
    "JsxAttribute",
    "JsxElement",
    "LineIndex",
    "class_name_contexts",
    "parse_attribute_expression",
    "parse_expr",
    "scan_elements",
]
