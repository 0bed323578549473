"""
CSS custom property compiler for brand plans.

Every token becomes a ``--brand-*`` custom property. Dark values (and all
space/radius values) populate ``:root``; light color values populate the
``[data-theme="light"]`` override block. Keys are sorted so the output is
deterministic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .ir.brandplan import BrandPlan
from .templates import get_css_header
from .validation import define_brand_plan

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CssVariable:
    """One compiled custom property."""

    name: str
    dark_value: str
    light_value: str | None = None


def collect_css_variables(plan: BrandPlan) -> list[CssVariable]:
    """Flatten a brand plan into custom properties in output order."""
    variables: list[CssVariable] = []

    for key in sorted(plan.space):
        variables.append(CssVariable(name=f"--brand-space-{key}", dark_value=plan.space[key]))

    for key in sorted(plan.radius):
        variables.append(CssVariable(name=f"--brand-radius-{key}", dark_value=plan.radius[key]))

    for group in sorted(plan.color):
        tokens = plan.color[group]
        for key in sorted(tokens):
            pair = tokens[key]
            variables.append(
                CssVariable(
                    name=f"--brand-color-{group}-{key}",
                    dark_value=pair.dark,
                    light_value=pair.light,
                )
            )

    return variables


def brand_plan_to_css(plan: BrandPlan | dict[str, Any]) -> str:
    """Compile a brand plan to CSS.

    Raw mappings are validated first, so this raises
    ``BrandPlanValidationError`` for malformed input.

    Args:
        plan: BrandPlan or raw plan data.

    Returns:
        CSS text (without the generated-file header).
    """
    plan = define_brand_plan(plan)
    variables = collect_css_variables(plan)

    root_declarations = "\n".join(f"  {v.name}: {v.dark_value};" for v in variables)
    light_declarations = "\n".join(
        f"  {v.name}: {v.light_value};" for v in variables if v.light_value is not None
    )

    css = '@import "tailwindcss";\n\n'
    css += ":root {\n"
    css += "  color-scheme: dark;\n"
    css += root_declarations + "\n"
    css += "}\n\n"
    css += '[data-theme="light"] {\n'
    css += "  color-scheme: light;\n"
    css += light_declarations + "\n"
    css += "}\n"

    return css


def export_css_file(plan: BrandPlan | dict[str, Any], output_path: Path) -> Path:
    """Compile a brand plan and write it, with the generated-file header.

    Args:
        plan: BrandPlan or raw plan data.
        output_path: Path to write the CSS file.

    Returns:
        Path to the written file.
    """
    css = get_css_header() + brand_plan_to_css(plan)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(css, encoding="utf-8")
    logger.info("Wrote %s", output_path)

    return output_path
