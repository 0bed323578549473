"""
BrandPlan usage-policy analyzer.

Two rules inspect the class names in ``className`` attributes:

- brand-classnames-only: spacing, color, radius, shadow and border
  utilities must use brand tokens
- brand-margin-policy: brand margins only on landmark elements
"""

from .extractor import extract, split_class_string
from .path_exemption import is_exempt
from .reporter import Reporter, format_human, format_json
from .rules import (
    RECOMMENDED,
    RULES,
    BrandClassnamesOnly,
    BrandMarginPolicy,
    LintRule,
    MarginPolicyOptions,
    RuleOptions,
    get_rule,
)
from .runner import LintResult, apply_overrides, lint_file, lint_paths, lint_source, resolve_rules

__all__ = [
    "extract",
    "split_class_string",
    "is_exempt",
    "Reporter",
    "format_human",
    "format_json",
    "RECOMMENDED",
    "RULES",
    "BrandClassnamesOnly",
    "BrandMarginPolicy",
    "LintRule",
    "MarginPolicyOptions",
    "RuleOptions",
    "get_rule",
    "LintResult",
    "apply_overrides",
    "lint_file",
    "lint_paths",
    "lint_source",
    "resolve_rules",
]
