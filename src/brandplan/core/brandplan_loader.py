"""
Brand plan persistence layer.

Handles reading brandplan.yaml from the project root, writing the
default template, and locating the generated CSS file.

Default locations:
    {project_root}/brandplan.yaml
    {project_root}/app/brandplan.css   (Next.js app router)
    {project_root}/src/brandplan.css
    {project_root}/brandplan.css
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError, make_config_error
from .ir.brandplan import BrandPlan
from .templates import CONFIG_TEMPLATE
from .validation import define_brand_plan

logger = logging.getLogger(__name__)

BRANDPLAN_FILE = "brandplan.yaml"
CSS_FILE = "brandplan.css"


# =============================================================================
# Path helpers
# =============================================================================


def get_config_path(project_root: Path) -> Path:
    """Get the brandplan.yaml file path."""
    return project_root / BRANDPLAN_FILE


def get_css_output_path(project_root: Path) -> Path:
    """Pick the CSS output path based on the project layout."""
    app_dir = project_root / "app"
    src_dir = project_root / "src"

    if app_dir.exists():
        return app_dir / CSS_FILE
    if src_dir.exists():
        return src_dir / CSS_FILE
    return project_root / CSS_FILE


# =============================================================================
# Loading
# =============================================================================


def load_brand_plan_data(project_root: Path) -> dict[str, Any]:
    """Read brandplan.yaml without validating it.

    Raises:
        ConfigError: If the file is missing, empty, or not valid YAML.
    """
    config_path = get_config_path(project_root)

    if not config_path.exists():
        raise ConfigError(
            f"Config file not found: {config_path}\n\nRun \"brandplan init\" to create one."
        )

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.MarkedYAMLError as e:
        mark = e.problem_mark
        if mark is not None:
            raise make_config_error(
                f"Invalid YAML: {e.problem}", config_path, mark.line + 1, mark.column + 1
            ) from e
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        raise ConfigError(f"Config must define a brand plan: {config_path} is empty")

    return data


def load_brand_plan(project_root: Path) -> BrandPlan:
    """Load and validate brandplan.yaml.

    Raises:
        ConfigError: If the file cannot be read.
        BrandPlanValidationError: If the plan is malformed.
    """
    data = load_brand_plan_data(project_root)
    plan = define_brand_plan(data)
    logger.debug("Loaded brand plan with %d tokens", len(plan.token_names()))
    return plan


# =============================================================================
# Writing
# =============================================================================


def write_default_config(project_root: Path) -> Path | None:
    """Write the default brandplan.yaml.

    Returns:
        Path to the written file, or None if one already exists.
    """
    config_path = get_config_path(project_root)
    if config_path.exists():
        logger.debug("%s already exists, not overwriting", config_path)
        return None

    config_path.write_text(CONFIG_TEMPLATE, encoding="utf-8")
    return config_path
