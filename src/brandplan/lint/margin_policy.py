"""
Margin placement policy: brand margin utilities only on landmark elements.

Components should space themselves with gap or padding; outer margins are
reserved for page-level grouping elements. One verdict is produced per
element, however many margin utilities it carries. Non-brand margins
(``m-4``) are left to the utility-class policy.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from brandplan.core.ir.lint import ElementContext, PolicyVerdict

LANDMARK_TAGS: tuple[str, ...] = ("main", "header", "footer")
SECTION_TAG = "section"

MARGIN_RE = re.compile(r"\b(m|mx|my|mt|mr|mb|ml)-brand-\S+")

MARGIN_ON_NON_SEMANTIC_ELEMENT = "marginOnNonSemanticElement"


def allowed_tags(allow_section: bool = False) -> tuple[str, ...]:
    """Tags permitted to carry brand margin utilities."""
    if allow_section:
        return (*LANDMARK_TAGS, SECTION_TAG)
    return LANDMARK_TAGS


def find_margin_classes(tokens: Sequence[str]) -> list[str]:
    """Return the brand margin utilities among ``tokens``."""
    margins: list[str] = []
    for token in tokens:
        margins.extend(match.group(0) for match in MARGIN_RE.finditer(token))
    return margins


def classify(
    tokens: Sequence[str],
    context: ElementContext,
    allow_section: bool = False,
) -> PolicyVerdict:
    """Classify an element's class names under the margin placement policy."""
    tags = allowed_tags(allow_section)
    if context.tag_name in tags:
        return PolicyVerdict.compliant()

    if find_margin_classes(tokens):
        return PolicyVerdict.violation(MARGIN_ON_NON_SEMANTIC_ELEMENT)

    return PolicyVerdict.compliant()
