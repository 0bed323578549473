"""
File templates written by ``brandplan init`` and ``brandplan build``.
"""

CONFIG_TEMPLATE = """\
# BrandPlan tokens
# These tokens are used by the Button and Card class recipes.
# Rebuild CSS after editing: brandplan build

space:
  "2": 0.5rem
  "4": 1rem
  "6": 1.5rem

radius:
  sm: 0.25rem
  md: 0.5rem
  lg: 1rem

color:
  # Brand colors
  brand:
    primary: { dark: "#3b82f6", light: "#2563eb" }
    accent: { dark: "#8b5cf6", light: "#7c3aed" }
  # Surface colors
  surface:
    "0": { dark: "#0b0f17", light: "#ffffff" }
    "1": { dark: "#111827", light: "#f9fafb" }
  # Text colors
  text:
    primary: { dark: "#f9fafb", light: "#111827" }
    secondary: { dark: "#9ca3af", light: "#6b7280" }
"""


def get_css_header() -> str:
    """Comment block prepended to generated CSS."""
    return """/**
 * BrandPlan Generated CSS
 *
 * This file is auto-generated from brandplan.yaml
 * DO NOT EDIT MANUALLY - changes will be overwritten
 *
 * To regenerate: brandplan build
 */

"""
