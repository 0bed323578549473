"""Tests for the utility-class policy."""

from __future__ import annotations

import pytest

from brandplan.core.ir.lint import VerdictKind
from brandplan.lint.utility_policy import (
    BRAND_CRITICAL_PREFIXES,
    FORBIDDEN_CLASS,
    brand_critical_prefix,
    classify,
    has_brand_marker,
    is_structural,
    suggest_brand_class,
)


class TestBrandMarker:
    @pytest.mark.parametrize(
        "class_name",
        ["p-brand-4", "bg-brand-surface-0", "brand-card", "hover:bg-brand-primary"],
    )
    def test_marked(self, class_name: str):
        assert has_brand_marker(class_name)

    @pytest.mark.parametrize("class_name", ["p-4", "branding", "bg-brandy-500", "text-brand"])
    def test_unmarked(self, class_name: str):
        assert not has_brand_marker(class_name)


class TestStructural:
    @pytest.mark.parametrize(
        "class_name",
        ["flex", "grid", "w-full", "max-w-md", "mx-auto", "z-10", "overflow-hidden", "text-2xl"],
    )
    def test_structural(self, class_name: str):
        assert is_structural(class_name)

    @pytest.mark.parametrize("class_name", ["text-white", "text-2xl/7", "p-4", "bg-white"])
    def test_not_structural(self, class_name: str):
        assert not is_structural(class_name)


class TestClassify:
    @pytest.mark.parametrize(
        "class_name",
        [
            "p-brand-4",
            "m-brand-4",
            "rounded-brand-md",
            "text-brand-text-primary",
            "ring-brand-brand-primary",
            "shadow-brand-sm",
        ],
    )
    def test_brand_marked_is_exempt(self, class_name: str):
        assert classify(class_name).kind == VerdictKind.EXEMPT

    @pytest.mark.parametrize(
        "class_name",
        ["flex", "items-center", "h-screen", "cursor-pointer", "transition", "text-xs", "text-9xl"],
    )
    def test_structural_is_compliant(self, class_name: str):
        assert classify(class_name).kind == VerdictKind.COMPLIANT

    @pytest.mark.parametrize(
        ("class_name", "suggestion"),
        [
            ("p-4", "p-brand-4"),
            ("px-2", "px-brand-2"),
            ("mt-2", "mt-brand-2"),
            ("gap-4", "gap-brand-4"),
            ("space-x-2", "space-brand-x-2"),
            ("rounded-lg", "rounded-brand-lg"),
            ("bg-slate-100", "bg-brand-slate-100"),
            ("text-white", "text-brand-white"),
            ("border-gray-300", "border-brand-gray-300"),
            ("shadow-md", "shadow-brand-md"),
            ("from-red-500", "from-brand-red-500"),
        ],
    )
    def test_brand_critical_is_violation(self, class_name: str, suggestion: str):
        verdict = classify(class_name)
        assert verdict.is_violation
        assert verdict.reason == FORBIDDEN_CLASS
        assert verdict.suggestion == suggestion

    @pytest.mark.parametrize("class_name", ["border", "shadow", "md:block", "widget", "hover:p-4"])
    def test_unknown_is_compliant(self, class_name: str):
        assert classify(class_name).kind == VerdictKind.COMPLIANT

    def test_mx_auto_is_structural_not_margin(self):
        assert classify("mx-auto").kind == VerdictKind.COMPLIANT


class TestSuggestion:
    @pytest.mark.parametrize("prefix", BRAND_CRITICAL_PREFIXES)
    def test_suggestion_roundtrip(self, prefix: str):
        class_name = f"{prefix}-value"
        assert brand_critical_prefix(class_name) == prefix

        suggestion = suggest_brand_class(class_name)
        assert has_brand_marker(suggestion)
        assert suggestion.replace("-brand", "", 1) == class_name

    def test_only_first_prefix_rewritten(self):
        assert suggest_brand_class("p-p-4") == "p-brand-p-4"

    def test_two_letter_prefix(self):
        assert brand_critical_prefix("px-2") == "px"
