"""Shared pytest fixtures for BrandPlan tests."""

from pathlib import Path
from typing import Any

import pytest

from brandplan.core.templates import CONFIG_TEMPLATE


@pytest.fixture
def sample_plan_data() -> dict[str, Any]:
    """Return raw brand plan data matching the default template."""
    return {
        "space": {"2": "0.5rem", "4": "1rem", "6": "1.5rem"},
        "radius": {"sm": "0.25rem", "md": "0.5rem", "lg": "1rem"},
        "color": {
            "brand": {
                "primary": {"dark": "#3b82f6", "light": "#2563eb"},
                "accent": {"dark": "#8b5cf6", "light": "#7c3aed"},
            },
            "surface": {
                "0": {"dark": "#0b0f17", "light": "#ffffff"},
                "1": {"dark": "#111827", "light": "#f9fafb"},
            },
        },
    }


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create a project directory with the default brandplan.yaml."""
    (tmp_path / "brandplan.yaml").write_text(CONFIG_TEMPLATE)
    return tmp_path
