"""
BrandPlan intermediate representation.

- brandplan: token vocabulary models
- expressions: class-name bearing expression shapes
- lint: element contexts, verdicts, diagnostics
"""

from .brandplan import BRAND_PLAN_GROUPS, BrandPlan, ColorPair
from .expressions import (
    ArrayLiteral,
    CallExpr,
    ConditionalExpr,
    Expr,
    LogicalExpr,
    LogicalOp,
    OtherExpr,
    StringLiteral,
    TemplateLiteral,
)
from .lint import (
    Diagnostic,
    ElementContext,
    PolicyVerdict,
    Severity,
    SourceLocation,
    VerdictKind,
)

__all__ = [
    # Tokens
    "BRAND_PLAN_GROUPS",
    "BrandPlan",
    "ColorPair",
    # Expressions
    "ArrayLiteral",
    "CallExpr",
    "ConditionalExpr",
    "Expr",
    "LogicalExpr",
    "LogicalOp",
    "OtherExpr",
    "StringLiteral",
    "TemplateLiteral",
    # Lint
    "Diagnostic",
    "ElementContext",
    "PolicyVerdict",
    "Severity",
    "SourceLocation",
    "VerdictKind",
]
