"""Tests for the brand-classnames-only and brand-margin-policy rules."""

from __future__ import annotations

from typing import Any

import pytest

from brandplan.core.errors import RuleConfigError
from brandplan.core.ir.expressions import StringLiteral
from brandplan.core.ir.lint import Diagnostic, ElementContext, Severity
from brandplan.lint.reporter import Reporter
from brandplan.lint.rules import (
    RECOMMENDED,
    BrandClassnamesOnly,
    BrandMarginPolicy,
    LintRule,
    MarginPolicyOptions,
    RuleOptions,
    get_rule,
)
from brandplan.lint.runner import ActiveRule, lint_source


def run_rule(
    rule: type[LintRule],
    code: str,
    options: dict[str, Any] | None = None,
    filename: str = "<input>",
) -> list[Diagnostic]:
    return lint_source(
        code,
        filename=filename,
        rules=[ActiveRule(rule=rule, severity=Severity.ERROR, options=options or {})],
    )


# =============================================================================
# brand-classnames-only
# =============================================================================


class TestBrandClassnamesOnly:
    @pytest.mark.parametrize(
        "code",
        [
            # Layout utilities
            '<div className="flex" />',
            '<div className="grid" />',
            '<div className="flex items-center justify-between" />',
            '<div className="w-full max-w-md mx-auto" />',
            '<div className="h-screen" />',
            '<div className="relative z-10" />',
            '<div className="hidden md:block" />',
            '<div className="overflow-hidden" />',
            '<div className="cursor-pointer" />',
            '<div className="transition duration-200" />',
            # Brand-prefixed utilities
            '<div className="p-brand-4" />',
            '<div className="px-brand-2 py-brand-1" />',
            '<div className="m-brand-4" />',
            '<div className="gap-brand-2" />',
            '<div className="rounded-brand-md" />',
            '<div className="bg-brand-surface-0" />',
            '<div className="text-brand-text-primary" />',
            '<div className="border-brand-surface-1" />',
            '<div className="ring-brand-brand-primary" />',
            '<div className="shadow-brand-sm" />',
            # Mixed layout and brand
            '<div className="flex gap-brand-2 p-brand-4 rounded-brand-md bg-brand-surface-0" />',
            '<div className="w-full max-w-2xl mx-auto p-brand-6" />',
            # Template literal with brand utilities
            '<div className={`flex ${isActive ? "bg-brand-brand-primary" : "bg-brand-surface-0"}`} />',
            # Text sizes
            '<div className="text-xs" />',
            '<div className="text-sm" />',
            '<div className="text-base" />',
            '<div className="text-lg" />',
            '<div className="text-xl" />',
            '<div className="text-2xl" />',
            '<div className="text-3xl" />',
            '<div className="text-4xl" />',
            '<div className="text-brand-md" />',
            # No className
            "<div />",
            "<div className />",
        ],
    )
    def test_valid(self, code: str):
        assert run_rule(BrandClassnamesOnly, code) == []

    @pytest.mark.parametrize(
        ("code", "count"),
        [
            ('<div className="p-4" />', 1),
            ('<div className="px-2" />', 1),
            ('<div className="py-6" />', 1),
            ('<div className="m-4" />', 1),
            ('<div className="mt-2" />', 1),
            ('<div className="gap-4" />', 1),
            ('<div className="space-x-2" />', 1),
            ('<div className="rounded-lg" />', 1),
            ('<div className="rounded-md" />', 1),
            ('<div className="bg-slate-100" />', 1),
            ('<div className="text-white" />', 1),
            ('<div className="text-zinc-200" />', 1),
            ('<div className="border-gray-300" />', 1),
            ('<div className="shadow-md" />', 1),
            ('<div className="p-4 rounded-lg bg-white" />', 3),
            ('<div className="flex p-4 items-center" />', 1),
            ("<div className={`flex p-4 gap-2`} />", 2),
            ('<div className={cn("flex", isActive ? "bg-white" : "bg-black")} />', 2),
            ('<div className={clsx(["p-4", , "m-2"])} />', 2),
        ],
    )
    def test_invalid(self, code: str, count: int):
        diagnostics = run_rule(BrandClassnamesOnly, code)
        assert len(diagnostics) == count
        assert all(d.message_id == "forbiddenClass" for d in diagnostics)
        assert all(d.rule_id == "brand-classnames-only" for d in diagnostics)

    def test_suggestions_and_message(self):
        diagnostics = run_rule(BrandClassnamesOnly, '<div className="p-4 rounded-lg bg-white" />')
        assert [d.data for d in diagnostics] == [
            {"className": "p-4", "suggestion": "p-brand-4"},
            {"className": "rounded-lg", "suggestion": "rounded-brand-lg"},
            {"className": "bg-white", "suggestion": "bg-brand-white"},
        ]
        assert diagnostics[0].message == (
            'Non-brand utility "p-4" is not allowed. Use brand-prefixed utilities '
            "(e.g., p-brand-4) or layout utilities only."
        )

    def test_location_is_attribute(self):
        (diagnostic,) = run_rule(BrandClassnamesOnly, '<div\n  className="p-4" />', filename="a.tsx")
        assert (diagnostic.file, diagnostic.line, diagnostic.column) == ("a.tsx", 2, 3)

    def test_every_class_name_attribute_checked(self):
        diagnostics = run_rule(BrandClassnamesOnly, '<div className="p-4" className="m-4" />')
        assert [d.data["className"] for d in diagnostics] == ["p-4", "m-4"]

    def test_template_interpolations_not_inspected(self):
        assert run_rule(BrandClassnamesOnly, '<div className={`flex ${a ? "p-4" : "m-4"}`} />') == []


class TestBrandClassnamesOnlyIgnorePaths:
    @pytest.mark.parametrize(
        ("code", "pattern", "filename"),
        [
            (
                '<div className="p-4 rounded-lg bg-white" />',
                "**/components/ui/**",
                "/project/components/ui/button.tsx",
            ),
            (
                '<div className="m-2 bg-slate-100" />',
                "src/components/ui/**",
                "/project/src/components/ui/card.tsx",
            ),
            ('<div className="p-4" />', "**/*.ignore.tsx", "/project/src/test.ignore.tsx"),
        ],
    )
    def test_matching_paths_skipped(self, code: str, pattern: str, filename: str):
        assert run_rule(BrandClassnamesOnly, code, {"ignorePaths": [pattern]}, filename) == []

    @pytest.mark.parametrize(
        ("code", "patterns", "filename", "count"),
        [
            ('<div className="p-4" />', ["**/components/ui/**"], "/project/components/Button.tsx", 1),
            ('<div className="rounded-lg" />', ["src/components/ui/**"], "/project/src/pages/index.tsx", 1),
            ('<div className="p-4" />', [], "/project/components/ui/button.tsx", 1),
            ('<div className="p-4 bg-white" />', ["**/*"], "<input>", 2),
        ],
    )
    def test_other_paths_reported(self, code: str, patterns: list[str], filename: str, count: int):
        diagnostics = run_rule(BrandClassnamesOnly, code, {"ignorePaths": patterns}, filename)
        assert len(diagnostics) == count


# =============================================================================
# brand-margin-policy
# =============================================================================


class TestBrandMarginPolicy:
    @pytest.mark.parametrize(
        ("code", "options"),
        [
            ('<main className="m-brand-4" />', None),
            ('<header className="m-brand-4" />', None),
            ('<footer className="m-brand-4" />', None),
            ('<main className="mx-brand-2" />', None),
            ('<header className="my-brand-4" />', None),
            ('<footer className="mt-brand-2" />', None),
            ('<main className="mr-brand-4" />', None),
            ('<header className="mb-brand-2" />', None),
            ('<footer className="ml-brand-4" />', None),
            ('<header className="mr-brand-2 px-brand-4" />', None),
            ('<footer className="mb-brand-2 grid gap-brand-4" />', None),
            ('<main className="m-brand-4 flex items-center" />', None),
            ('<div className="p-brand-4" />', None),
            ('<div className="flex gap-brand-2" />', None),
            ('<Card className="p-brand-4 rounded-brand-md" />', None),
            ('<button className="px-brand-4 py-brand-2" />', None),
            ("<div />", None),
            ("<main />", None),
            ('<section className="m-brand-2" />', {"allowSection": True}),
            ('<section className="mx-brand-4 my-brand-2" />', {"allowSection": True}),
            ('<div className={cn("flex", "p-brand-4")} />', None),
            ('<div className={`flex ${active && "bg-brand-primary"}`} />', None),
            ('<Card className={clsx("p-brand-4", ["rounded-brand-md"])} />', None),
        ],
    )
    def test_valid(self, code: str, options: dict[str, Any] | None):
        assert run_rule(BrandMarginPolicy, code, options) == []

    @pytest.mark.parametrize(
        ("code", "options"),
        [
            ('<div className="m-brand-4" />', None),
            ('<div className="mx-brand-2" />', None),
            ('<div className="my-brand-4" />', None),
            ('<div className="mt-brand-2" />', None),
            ('<div className="mr-brand-4" />', None),
            ('<div className="mb-brand-2" />', None),
            ('<div className="ml-brand-4" />', None),
            ('<Card className="m-brand-4" />', None),
            ('<Button className="mt-brand-2" />', None),
            ('<div className="m-brand-4 flex gap-brand-2" />', None),
            ('<div className="px-brand-4 mt-brand-2" />', None),
            ('<section className="m-brand-2" />', None),
            ('<section className="mx-brand-4" />', {"allowSection": False}),
            ('<div className={cn("flex", "m-brand-4")} />', None),
            ('<div className={cn("p-brand-4", isActive && "mt-brand-2")} />', None),
            ("<Card className={`p-brand-4 mb-brand-2`} />", None),
            ('<div className={clsx(["flex", "m-brand-4"])} />', None),
            ('<div className={isActive && "m-brand-4"} />', None),
            ('<Button className={hasMargin ? "mt-brand-2" : "mb-brand-2"} />', None),
            ('<div className="mx-brand-4 my-brand-2" />', None),
        ],
    )
    def test_invalid(self, code: str, options: dict[str, Any] | None):
        diagnostics = run_rule(BrandMarginPolicy, code, options)
        assert len(diagnostics) == 1
        assert diagnostics[0].message_id == "marginOnNonSemanticElement"

    def test_message_lists_allowed_tags(self):
        (diagnostic,) = run_rule(BrandMarginPolicy, '<div className="m-brand-4" />')
        assert diagnostic.data == {"allowed": "main, header, footer"}
        assert diagnostic.message == (
            "BrandPlan margin utilities are only allowed on semantic layout elements "
            "(main, header, footer). Consider using gap-brand-* or padding instead."
        )

    def test_message_with_section_allowed(self):
        (diagnostic,) = run_rule(
            BrandMarginPolicy, '<div className="m-brand-4" />', {"allowSection": True}
        )
        assert diagnostic.data == {"allowed": "main, header, footer, section"}

    def test_only_first_class_name_attribute(self):
        code = '<div className="p-brand-4" className="m-brand-4" />'
        assert run_rule(BrandMarginPolicy, code) == []

    def test_template_interpolations_not_inspected(self):
        code = '<div className={`flex ${active ? "m-brand-4" : "m-brand-2"}`} />'
        assert run_rule(BrandMarginPolicy, code) == []

    def test_non_brand_margin_left_to_utility_rule(self):
        assert run_rule(BrandMarginPolicy, '<div className="m-4" />') == []


class TestBrandMarginPolicyIgnorePaths:
    @pytest.mark.parametrize(
        ("code", "pattern", "filename"),
        [
            ('<div className="m-brand-4" />', "**/components/ui/**", "/project/components/ui/button.tsx"),
            (
                '<Card className="mt-brand-2 mb-brand-4" />',
                "src/components/ui/**",
                "/project/src/components/ui/card.tsx",
            ),
            ('<div className={cn("flex", "m-brand-4")} />', "**/*.shadcn.tsx", "/project/src/button.shadcn.tsx"),
        ],
    )
    def test_matching_paths_skipped(self, code: str, pattern: str, filename: str):
        assert run_rule(BrandMarginPolicy, code, {"ignorePaths": [pattern]}, filename) == []

    @pytest.mark.parametrize(
        ("code", "patterns", "filename"),
        [
            ('<div className="m-brand-4" />', ["**/components/ui/**"], "/project/components/Button.tsx"),
            ('<Card className="mt-brand-2" />', ["src/components/ui/**"], "/project/src/pages/index.tsx"),
            ('<div className="m-brand-4" />', [], "/project/components/ui/button.tsx"),
            ('<div className="m-brand-4 mt-brand-2" />', ["**/*"], "<input>"),
        ],
    )
    def test_other_paths_reported(self, code: str, patterns: list[str], filename: str):
        diagnostics = run_rule(BrandMarginPolicy, code, {"ignorePaths": patterns}, filename)
        assert len(diagnostics) == 1


# =============================================================================
# Options and activation
# =============================================================================


class TestRuleOptions:
    def test_defaults(self):
        assert RuleOptions().ignore_paths == []
        assert MarginPolicyOptions().allow_section is False

    def test_camel_case_aliases(self):
        options = MarginPolicyOptions.model_validate(
            {"ignorePaths": ["**/ui/**"], "allowSection": True}
        )
        assert options.ignore_paths == ["**/ui/**"]
        assert options.allow_section is True

    def test_unknown_option_rejected(self):
        with pytest.raises(RuleConfigError) as exc_info:
            BrandClassnamesOnly.parse_options({"allowSection": True})
        assert exc_info.value.rule_id == "brand-classnames-only"

    @pytest.mark.parametrize(
        "raw",
        [{"ignorePaths": "**/ui/**"}, {"ignorePaths": [1]}, {"allowSection": "yes"}],
    )
    def test_wrong_types_rejected(self, raw: dict[str, Any]):
        with pytest.raises(RuleConfigError):
            BrandMarginPolicy.parse_options(raw)

    def test_activation_returns_none_when_exempt(self):
        reporter = Reporter("/p/components/ui/x.tsx")
        rule = BrandMarginPolicy.activate(
            "/p/components/ui/x.tsx", reporter, {"ignorePaths": ["**/ui/**"]}
        )
        assert rule is None

    def test_activation_rejects_bad_options_before_exemption(self):
        with pytest.raises(RuleConfigError):
            BrandMarginPolicy.activate("<input>", Reporter(), {"ignorePaths": [None]})

    def test_check_element_directly(self):
        reporter = Reporter("page.tsx")
        rule = BrandClassnamesOnly.activate("page.tsx", reporter, severity=Severity.WARN)
        assert rule is not None
        rule.check_element("div", [ElementContext(tag_name="div", value=StringLiteral(value="p-4"))])
        (diagnostic,) = reporter.diagnostics
        assert diagnostic.severity == Severity.WARN
        assert diagnostic.format() == (
            'page.tsx:1:1: warn: Non-brand utility "p-4" is not allowed. Use brand-prefixed '
            "utilities (e.g., p-brand-4) or layout utilities only. [brand-classnames-only]"
        )


class TestRegistry:
    def test_recommended_enables_both_rules(self):
        assert RECOMMENDED == {
            "brand-classnames-only": Severity.ERROR,
            "brand-margin-policy": Severity.ERROR,
        }

    def test_get_rule(self):
        assert get_rule("brand-margin-policy") is BrandMarginPolicy

    def test_get_unknown_rule(self):
        with pytest.raises(RuleConfigError, match="Unknown rule 'nope'"):
            get_rule("nope")
