"""
Expression node types for class-name analysis.

A deliberately closed set of JavaScript expression shapes that can carry
class names into a rendered ``className`` attribute:

- String literals: "flex p-brand-4"
- Template literals: `flex ${active ? "a" : "b"}`
- Calls: cn("flex", isActive && "bg-brand-primary")
- Array literals: ["flex", , "gap-brand-2"]
- Logical expressions: isActive && "m-brand-4"
- Conditionals: active ? "m-brand-4" : "m-brand-2"

Everything else (identifiers, numbers, member access, arrow functions,
object literals, ...) is an ``OtherExpr``.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class LogicalOp(StrEnum):
    """Short-circuit operators."""

    AND = "&&"
    OR = "||"
    NULLISH = "??"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class StringLiteral(BaseModel):
    """A quoted string: "flex p-4" or 'flex p-4'."""

    value: str = Field(description="Unescaped string contents")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f'"{self.value}"'


class TemplateLiteral(BaseModel):
    """
    A backtick template literal.

    ``quasis`` holds the raw static text segments; there is always one more
    quasi than there are interpolated ``expressions``.
    """

    quasis: list[str] = Field(description="Raw static text segments")
    expressions: list[Expr] = Field(default_factory=list, description="Interpolations")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        parts = [self.quasis[0]] if self.quasis else []
        for expr, quasi in zip(self.expressions, self.quasis[1:], strict=False):
            parts.append(f"${{{expr}}}{quasi}")
        return "`" + "".join(parts) + "`"


class CallExpr(BaseModel):
    """Function call such as cn(...), clsx(...), twMerge(...)."""

    callee: str = Field(description="Callee source text, e.g. 'cn' or 'utils.cn'")
    args: list[Expr] = Field(default_factory=list, description="Arguments")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        args_str = ", ".join(str(a) for a in self.args)
        return f"{self.callee}({args_str})"


class ArrayLiteral(BaseModel):
    """Array literal; ``None`` elements are holes (``[a, , b]``)."""

    elements: list[Expr | None] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return "[" + ", ".join("" if e is None else str(e) for e in self.elements) + "]"


class LogicalExpr(BaseModel):
    """Short-circuit expression: left && right, left || right, left ?? right."""

    op: LogicalOp
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.left} {self.op.value} {self.right})"


class ConditionalExpr(BaseModel):
    """Ternary: test ? consequent : alternate."""

    test: Expr
    consequent: Expr
    alternate: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.test} ? {self.consequent} : {self.alternate})"


class OtherExpr(BaseModel):
    """
    Any expression shape the analyzer does not look into.

    ``kind`` is a short label (identifier, number, member, arrow, object,
    unparsed, ...) and ``source`` the original text when available.
    """

    kind: str = Field(default="unknown")
    source: str = Field(default="")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.source or f"<{self.kind}>"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = (
    StringLiteral
    | TemplateLiteral
    | CallExpr
    | ArrayLiteral
    | LogicalExpr
    | ConditionalExpr
    | OtherExpr
)

# Rebuild models for recursive forward references
TemplateLiteral.model_rebuild()
CallExpr.model_rebuild()
ArrayLiteral.model_rebuild()
LogicalExpr.model_rebuild()
ConditionalExpr.model_rebuild()
