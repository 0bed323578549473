"""
Error types for BrandPlan token validation, configuration, and linting.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class BrandPlanError(Exception):
    """Base exception for all BrandPlan errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class BrandPlanValidationError(BrandPlanError):
    """
    Raised when a brand plan fails validation.

    Examples:
    - Missing required group (space, radius, color)
    - Unknown top-level key
    - Malformed CSS length or hex color
    - Color entry without its dark/light counterpart

    The ``path`` attribute holds the dotted field path that failed
    (e.g. ``color.brand.primary.dark``), or ``None`` for plan-level errors.
    """

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class ConfigError(BrandPlanError):
    """
    Raised when a project file cannot be read or parsed.

    Examples:
    - brandplan.yaml is missing or not valid YAML
    - brandplan.toml is not valid TOML
    """

    pass


class RuleConfigError(BrandPlanError):
    """
    Raised when lint rule options are rejected at activation time.

    Examples:
    - ignorePaths is not a list of strings
    - Unknown option key for a rule
    """

    def __init__(self, message: str, rule_id: str | None = None):
        self.rule_id = rule_id
        super().__init__(message)


@dataclass
class ErrorContext:
    """
    Source location attached to an error.

    Attributes:
        file: Path to the file where the error occurred
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    file: Path
    line: int
    column: int

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "app/page.tsx:10:5"
        """
        return f"{self.file}:{self.line}:{self.column}"


def make_config_error(
    message: str,
    file: Path | None = None,
    line: int | None = None,
    column: int | None = None,
) -> ConfigError:
    """
    Helper to create a ConfigError with optional context.

    Args:
        message: Error description
        file: Optional source file path
        line: Optional line number
        column: Optional column number

    Returns:
        ConfigError with context if location provided
    """
    if file and line and column:
        return ConfigError(message, ErrorContext(file=file, line=line, column=column))
    return ConfigError(message)
