"""
BrandPlan IR types for the design-token vocabulary.

A brand plan has exactly three groups:

- space:  token name -> CSS length         (--brand-space-<key>)
- radius: token name -> CSS length         (--brand-radius-<key>)
- color:  group -> token name -> dark/light (--brand-color-<group>-<key>)

Only colors vary by theme. Instances are produced by
``brandplan.core.validation.define_brand_plan`` after field-by-field
validation, so the models themselves stay thin.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

BRAND_PLAN_GROUPS: tuple[str, ...] = ("space", "radius", "color")


class ColorPair(BaseModel):
    """A theme-dependent color value."""

    dark: str = Field(description="Hex color for the default (dark) theme")
    light: str = Field(description='Hex color for [data-theme="light"]')

    model_config = ConfigDict(frozen=True, extra="forbid")


class BrandPlan(BaseModel):
    """Validated brand token vocabulary."""

    space: dict[str, str] = Field(default_factory=dict)
    radius: dict[str, str] = Field(default_factory=dict)
    color: dict[str, dict[str, ColorPair]] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, extra="forbid")

    def token_names(self) -> list[str]:
        """All CSS custom property names this plan defines, in compile order."""
        names = [f"--brand-space-{key}" for key in sorted(self.space)]
        names.extend(f"--brand-radius-{key}" for key in sorted(self.radius))
        for group in sorted(self.color):
            names.extend(f"--brand-color-{group}-{key}" for key in sorted(self.color[group]))
        return names
