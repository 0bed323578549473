"""
BrandPlan lint rules.

- brand-classnames-only: brand-critical utilities must use brand tokens
- brand-margin-policy:   brand margin utilities only on landmark elements

A rule is activated once per file with its raw options. Activation
validates the options and returns ``None`` when the file is exempt via
``ignorePaths``; otherwise the host calls ``check_element`` with the
``className`` attributes of each element it visits.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from brandplan.core.errors import RuleConfigError
from brandplan.core.ir.lint import ElementContext, Severity

from . import margin_policy, utility_policy
from .extractor import extract
from .path_exemption import is_exempt
from .reporter import Reporter

logger = logging.getLogger(__name__)


# =============================================================================
# Options
# =============================================================================


class RuleOptions(BaseModel):
    """Options shared by every rule."""

    ignore_paths: list[str] = Field(default_factory=list, alias="ignorePaths")

    model_config = ConfigDict(extra="forbid", frozen=True, strict=True, populate_by_name=True)


class MarginPolicyOptions(RuleOptions):
    """Options for brand-margin-policy."""

    allow_section: bool = Field(default=False, alias="allowSection")


# =============================================================================
# Rule base
# =============================================================================


class LintRule(ABC):
    """Base class for rules; one instance per linted file."""

    rule_id: ClassVar[str]
    description: ClassVar[str]
    messages: ClassVar[dict[str, str]]
    options_model: ClassVar[type[RuleOptions]] = RuleOptions

    def __init__(
        self,
        options: RuleOptions,
        reporter: Reporter,
        severity: Severity = Severity.ERROR,
    ) -> None:
        self.options = options
        self.reporter = reporter
        self.severity = severity

    @classmethod
    def parse_options(cls, raw: Mapping[str, Any] | None) -> RuleOptions:
        """Validate raw options against the rule's schema.

        Raises:
            RuleConfigError: On unknown keys or wrong types.
        """
        try:
            return cls.options_model.model_validate(dict(raw or {}))
        except ValidationError as e:
            raise RuleConfigError(f"Invalid options for {cls.rule_id}: {e}", cls.rule_id) from e

    @classmethod
    def activate(
        cls,
        filename: str | None,
        reporter: Reporter,
        raw_options: Mapping[str, Any] | None = None,
        severity: Severity = Severity.ERROR,
    ) -> LintRule | None:
        """Create the rule for one file, or None if the file is exempt."""
        options = cls.parse_options(raw_options)
        if is_exempt(filename, options.ignore_paths):
            return None
        return cls(options, reporter, severity)

    def report(self, context: ElementContext, message_id: str, data: Mapping[str, Any]) -> None:
        self.reporter.report(
            self.rule_id,
            context,
            message_id,
            self.messages[message_id],
            data,
            self.severity,
        )

    @abstractmethod
    def check_element(self, tag_name: str, attributes: Sequence[ElementContext]) -> None:
        """Check the ``className`` attributes of one element, in source order."""


# =============================================================================
# Rules
# =============================================================================


class BrandClassnamesOnly(LintRule):
    rule_id = "brand-classnames-only"
    description = (
        "Enforce brand-prefixed utilities for design-critical properties "
        "and allow layout utilities only"
    )
    messages = {
        utility_policy.FORBIDDEN_CLASS: (
            'Non-brand utility "{className}" is not allowed. Use brand-prefixed '
            "utilities (e.g., {suggestion}) or layout utilities only."
        ),
    }

    def check_element(self, tag_name: str, attributes: Sequence[ElementContext]) -> None:
        for context in attributes:
            for class_name in extract(context.value):
                verdict = utility_policy.classify(class_name)
                if verdict.is_violation:
                    self.report(
                        context,
                        utility_policy.FORBIDDEN_CLASS,
                        {"className": class_name, "suggestion": verdict.suggestion},
                    )


class BrandMarginPolicy(LintRule):
    rule_id = "brand-margin-policy"
    description = "Enforce margin utilities only on semantic layout elements"
    messages = {
        margin_policy.MARGIN_ON_NON_SEMANTIC_ELEMENT: (
            "BrandPlan margin utilities are only allowed on semantic layout elements "
            "({allowed}). Consider using gap-brand-* or padding instead."
        ),
    }
    options_model = MarginPolicyOptions

    def check_element(self, tag_name: str, attributes: Sequence[ElementContext]) -> None:
        # Only the first className attribute is considered
        if not attributes:
            return
        context = attributes[0]
        if context.value is None:
            return

        assert isinstance(self.options, MarginPolicyOptions)
        allow_section = self.options.allow_section
        verdict = margin_policy.classify(extract(context.value), context, allow_section)
        if verdict.is_violation:
            allowed = ", ".join(margin_policy.allowed_tags(allow_section))
            self.report(context, margin_policy.MARGIN_ON_NON_SEMANTIC_ELEMENT, {"allowed": allowed})


# =============================================================================
# Registry
# =============================================================================

RULES: dict[str, type[LintRule]] = {
    BrandClassnamesOnly.rule_id: BrandClassnamesOnly,
    BrandMarginPolicy.rule_id: BrandMarginPolicy,
}

RECOMMENDED: dict[str, Severity] = {
    BrandClassnamesOnly.rule_id: Severity.ERROR,
    BrandMarginPolicy.rule_id: Severity.ERROR,
}


def get_rule(rule_id: str) -> type[LintRule]:
    """Look up a rule class by id.

    Raises:
        RuleConfigError: If the rule id is unknown.
    """
    try:
        return RULES[rule_id]
    except KeyError:
        known = ", ".join(sorted(RULES))
        raise RuleConfigError(f"Unknown rule '{rule_id}' (known rules: {known})", rule_id) from None
