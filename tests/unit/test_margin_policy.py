"""Tests for the margin placement policy."""

from __future__ import annotations

import pytest

from brandplan.core.ir.lint import ElementContext, VerdictKind
from brandplan.lint.margin_policy import (
    LANDMARK_TAGS,
    MARGIN_ON_NON_SEMANTIC_ELEMENT,
    allowed_tags,
    classify,
    find_margin_classes,
)


def ctx(tag_name: str) -> ElementContext:
    return ElementContext(tag_name=tag_name)


class TestAllowedTags:
    def test_default(self):
        assert allowed_tags() == ("main", "header", "footer")

    def test_with_section(self):
        assert allowed_tags(allow_section=True) == ("main", "header", "footer", "section")


class TestFindMarginClasses:
    @pytest.mark.parametrize(
        "token",
        ["m-brand-4", "mx-brand-2", "my-brand-4", "mt-brand-2", "mr-brand-4", "mb-brand-2", "ml-brand-4"],
    )
    def test_every_margin_prefix(self, token: str):
        assert find_margin_classes([token]) == [token]

    @pytest.mark.parametrize("token", ["p-brand-4", "gap-brand-2", "m-4", "mx-auto", "brand-m-4"])
    def test_non_margin(self, token: str):
        assert find_margin_classes([token]) == []

    def test_variant_prefixed_margin(self):
        assert find_margin_classes(["md:mt-brand-2"]) == ["mt-brand-2"]


class TestClassify:
    @pytest.mark.parametrize("tag_name", LANDMARK_TAGS)
    def test_landmarks_always_compliant(self, tag_name: str):
        verdict = classify(["m-brand-4", "mx-brand-2"], ctx(tag_name))
        assert verdict.kind == VerdictKind.COMPLIANT

    @pytest.mark.parametrize("tag_name", ["div", "Card", "Button", "span"])
    def test_margin_on_other_tags(self, tag_name: str):
        verdict = classify(["m-brand-4"], ctx(tag_name))
        assert verdict.is_violation
        assert verdict.reason == MARGIN_ON_NON_SEMANTIC_ELEMENT

    def test_one_verdict_for_many_margins(self):
        verdict = classify(["mx-brand-4", "my-brand-2", "mt-brand-6"], ctx("div"))
        assert verdict.is_violation

    def test_no_margin_is_compliant(self):
        verdict = classify(["flex", "p-brand-4"], ctx("div"))
        assert verdict.kind == VerdictKind.COMPLIANT

    def test_section_needs_option(self):
        assert classify(["m-brand-2"], ctx("section")).is_violation
        assert not classify(["m-brand-2"], ctx("section"), allow_section=True).is_violation

    def test_tag_names_are_case_sensitive(self):
        assert classify(["m-brand-2"], ctx("Main")).is_violation
