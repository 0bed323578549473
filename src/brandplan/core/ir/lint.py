"""
Lint IR types: element contexts, policy verdicts, and diagnostics.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .expressions import Expr

# =============================================================================
# Enums
# =============================================================================


class VerdictKind(StrEnum):
    """Outcome of classifying a class name (or an element) under a policy."""

    COMPLIANT = "compliant"
    EXEMPT = "exempt"
    VIOLATION = "violation"


class Severity(StrEnum):
    """Rule severity, ESLint style."""

    OFF = "off"
    WARN = "warn"
    ERROR = "error"


# =============================================================================
# Source model
# =============================================================================


class SourceLocation(BaseModel):
    """1-indexed line/column position in a source file."""

    line: int = 1
    column: int = 1

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class ElementContext(BaseModel):
    """
    A markup element's attribute as handed to the policies.

    ``value`` is ``None`` when the attribute has no value (``<div className />``).
    """

    tag_name: str
    attribute: str = "className"
    location: SourceLocation = Field(default_factory=SourceLocation)
    value: Expr | None = None

    model_config = ConfigDict(frozen=True)


# =============================================================================
# Verdicts
# =============================================================================


class PolicyVerdict(BaseModel):
    """Exactly one verdict per (class name, policy) or (element, policy)."""

    kind: VerdictKind
    reason: str | None = None
    suggestion: str | None = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def compliant(cls) -> PolicyVerdict:
        return cls(kind=VerdictKind.COMPLIANT)

    @classmethod
    def exempt(cls) -> PolicyVerdict:
        return cls(kind=VerdictKind.EXEMPT)

    @classmethod
    def violation(cls, reason: str, suggestion: str | None = None) -> PolicyVerdict:
        return cls(kind=VerdictKind.VIOLATION, reason=reason, suggestion=suggestion)

    @property
    def is_violation(self) -> bool:
        return self.kind == VerdictKind.VIOLATION


# =============================================================================
# Diagnostics
# =============================================================================


class Diagnostic(BaseModel):
    """A reported rule violation."""

    rule_id: str
    message_id: str
    message: str
    data: dict[str, Any] = Field(default_factory=dict)
    file: str = "<input>"
    line: int = 1
    column: int = 1
    severity: Severity = Severity.ERROR

    model_config = ConfigDict(frozen=True)

    def format(self) -> str:
        """Format as ``file:line:col: severity: message [rule]``."""
        return (
            f"{self.file}:{self.line}:{self.column}: "
            f"{self.severity.value}: {self.message} [{self.rule_id}]"
        )
