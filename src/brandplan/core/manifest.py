import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import ConfigError

logger = logging.getLogger(__name__)

MANIFEST_FILE = "brandplan.toml"

DEFAULT_INCLUDE = ["**/*.tsx", "**/*.jsx"]
DEFAULT_EXCLUDE = ["node_modules/**", ".next/**", "dist/**", "build/**"]


# =============================================================================
# Lint Configuration
# =============================================================================


@dataclass
class RuleConfig:
    """Severity and options for one lint rule."""

    severity: str = "error"  # "error" | "warn" | "off"
    options: dict[str, Any] = field(default_factory=dict)


@dataclass
class LintConfig:
    """Which files to lint and how each rule is configured.

    Rules missing from ``rules`` fall back to the recommended configuration.
    """

    include: list[str] = field(default_factory=lambda: list(DEFAULT_INCLUDE))
    exclude: list[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE))
    rules: dict[str, RuleConfig] = field(default_factory=dict)


@dataclass
class ProjectManifest:
    """Contents of brandplan.toml."""

    lint: LintConfig = field(default_factory=LintConfig)


def _parse_rule(rule_id: str, data: Any) -> RuleConfig:
    # `rule = "warn"` shorthand
    if isinstance(data, str):
        return RuleConfig(severity=data)
    if not isinstance(data, dict):
        raise ConfigError(f"lint.rules.{rule_id}: expected a table or a severity string")

    options = {k: v for k, v in data.items() if k != "severity"}
    return RuleConfig(severity=data.get("severity", "error"), options=options)


def _parse_globs(key: str, data: Any) -> list[str]:
    if not isinstance(data, list) or not all(isinstance(p, str) for p in data):
        raise ConfigError(f"lint.{key}: expected a list of glob strings")
    return list(data)


def load_manifest(path: Path) -> ProjectManifest:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    lint_data = data.get("lint", {})
    if not isinstance(lint_data, dict):
        raise ConfigError("lint: expected a table")
    rules_data = lint_data.get("rules", {})
    if not isinstance(rules_data, dict):
        raise ConfigError("lint.rules: expected a table")

    lint_config = LintConfig(
        include=_parse_globs("include", lint_data.get("include", DEFAULT_INCLUDE)),
        exclude=_parse_globs("exclude", lint_data.get("exclude", DEFAULT_EXCLUDE)),
        rules={rule_id: _parse_rule(rule_id, rule) for rule_id, rule in rules_data.items()},
    )

    return ProjectManifest(lint=lint_config)


def load_project_manifest(project_root: Path) -> ProjectManifest:
    """Load brandplan.toml from a project root, or defaults if absent."""
    path = project_root / MANIFEST_FILE
    if not path.exists():
        logger.debug("No %s found, using defaults", MANIFEST_FILE)
        return ProjectManifest()
    return load_manifest(path)
