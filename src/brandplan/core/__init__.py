"""Core BrandPlan functionality: token IR, validation, CSS compilation, project files."""

from . import ir
from .brandplan_loader import (
    get_config_path,
    get_css_output_path,
    load_brand_plan,
    write_default_config,
)
from .css_compiler import brand_plan_to_css, export_css_file
from .errors import (
    BrandPlanError,
    BrandPlanValidationError,
    ConfigError,
    ErrorContext,
    RuleConfigError,
)
from .manifest import LintConfig, ProjectManifest, RuleConfig, load_project_manifest
from .validation import define_brand_plan, validate_brand_plan

__all__ = [
    "ir",
    # Errors
    "BrandPlanError",
    "BrandPlanValidationError",
    "ConfigError",
    "ErrorContext",
    "RuleConfigError",
    # Tokens
    "define_brand_plan",
    "validate_brand_plan",
    "brand_plan_to_css",
    "export_css_file",
    # Project files
    "get_config_path",
    "get_css_output_path",
    "load_brand_plan",
    "write_default_config",
    "LintConfig",
    "ProjectManifest",
    "RuleConfig",
    "load_project_manifest",
]
