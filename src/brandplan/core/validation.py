"""
Brand plan validation.

Validates raw brand plan data (as loaded from brandplan.yaml) field by
field and raises a path-qualified ``BrandPlanValidationError`` on the first
problem found. ``define_brand_plan`` is the single entry point that turns
raw data into a ``BrandPlan``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from .errors import BrandPlanValidationError
from .ir.brandplan import BRAND_PLAN_GROUPS, BrandPlan, ColorPair

CSS_LENGTH_RE = re.compile(r"^(0|[0-9]+(\.[0-9]+)?(px|rem|em|%|vh|vw|vmin|vmax|ch|ex))$")
HEX_COLOR_RE = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_WHITESPACE_RE = re.compile(r"\s")


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    return type(value).__name__


def _require_non_empty_string(value: Any, path: str) -> str:
    if not isinstance(value, str) or value == "":
        raise BrandPlanValidationError(
            f"{path}: expected a non-empty string, got {_type_name(value)}", path
        )
    return value


def validate_css_length(value: Any, path: str) -> str:
    """Validate a CSS length such as ``0``, ``0.5rem``, ``8px`` or ``50%``."""
    value = _require_non_empty_string(value, path)
    if _WHITESPACE_RE.search(value):
        raise BrandPlanValidationError(
            f'{path}: "{value}" contains whitespace '
            f'(must be a valid CSS length like 0.5rem, not "0.5 rem")',
            path,
        )
    if not CSS_LENGTH_RE.match(value):
        raise BrandPlanValidationError(
            f'{path}: "{value}" is not a valid CSS length '
            f"(expected 0 or a value like 1rem, 8px, 50%, etc.)",
            path,
        )
    return value


def validate_hex_color(value: Any, path: str) -> str:
    """Validate a ``#RGB`` or ``#RRGGBB`` color."""
    value = _require_non_empty_string(value, path)
    if not HEX_COLOR_RE.match(value):
        raise BrandPlanValidationError(
            f'{path}: "{value}" is not a valid hex color (expected #RGB or #RRGGBB)',
            path,
        )
    return value


def _validate_length_group(group: Any, name: str) -> dict[str, str]:
    if not isinstance(group, Mapping):
        raise BrandPlanValidationError(
            f"{name}: expected an object with token names as keys", name
        )
    return {str(key): validate_css_length(value, f"{name}.{key}") for key, value in group.items()}


def _validate_color_group(color: Any) -> dict[str, dict[str, ColorPair]]:
    if not isinstance(color, Mapping):
        raise BrandPlanValidationError(
            "color: expected an object with color groups as keys", "color"
        )

    groups: dict[str, dict[str, ColorPair]] = {}
    for group, tokens in color.items():
        group_path = f"color.{group}"
        if not isinstance(tokens, Mapping):
            raise BrandPlanValidationError(
                f"{group_path}: expected an object with token names as keys", group_path
            )

        pairs: dict[str, ColorPair] = {}
        for token_name, value in tokens.items():
            path = f"{group_path}.{token_name}"
            if not isinstance(value, Mapping):
                raise BrandPlanValidationError(
                    f"{path}: expected an object with 'dark' and 'light' properties", path
                )
            if "dark" not in value:
                raise BrandPlanValidationError(f"{path}: missing 'dark' property", path)
            if "light" not in value:
                raise BrandPlanValidationError(f"{path}: missing 'light' property", path)

            pairs[str(token_name)] = ColorPair(
                dark=validate_hex_color(value["dark"], f"{path}.dark"),
                light=validate_hex_color(value["light"], f"{path}.light"),
            )
        groups[str(group)] = pairs
    return groups


def validate_brand_plan(plan: Any) -> None:
    """Validate raw brand plan data.

    Raises:
        BrandPlanValidationError: On the first invalid field.
    """
    define_brand_plan(plan)


def define_brand_plan(plan: Any) -> BrandPlan:
    """Validate raw brand plan data and build a ``BrandPlan``.

    Keys are coerced to strings so YAML such as ``2: 0.5rem`` yields a
    ``"2"`` token. The result shares no mutable state with ``plan``.

    Args:
        plan: Mapping with exactly ``space``, ``radius`` and ``color``.

    Returns:
        Validated, frozen BrandPlan.

    Raises:
        BrandPlanValidationError: If any field is missing or malformed.
    """
    if isinstance(plan, BrandPlan):
        return plan

    if not isinstance(plan, Mapping):
        raise BrandPlanValidationError(
            "Expected an object with space, radius, and color properties"
        )

    for key in plan:
        if key not in BRAND_PLAN_GROUPS:
            raise BrandPlanValidationError(
                f'Unknown top-level key "{key}". Only space, radius, and color are allowed.',
                str(key),
            )

    for group in BRAND_PLAN_GROUPS:
        if group not in plan:
            raise BrandPlanValidationError(f"Missing required property: {group}", group)

    return BrandPlan(
        space=_validate_length_group(plan["space"], "space"),
        radius=_validate_length_group(plan["radius"], "radius"),
        color=_validate_color_group(plan["color"]),
    )
