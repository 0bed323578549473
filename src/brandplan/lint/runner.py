"""
Lint runner.

Lints a source string, a single file, or a set of paths. Every rule is
activated once per file from the lint configuration (``brandplan.toml``
or the recommended defaults); exempt files and rules at severity ``off``
are skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from brandplan.core.errors import RuleConfigError
from brandplan.core.ir.lint import Diagnostic, Severity
from brandplan.core.manifest import LintConfig, RuleConfig

from .jsx import LineIndex, class_name_contexts, scan_elements
from .path_exemption import matches_any, normalize_path
from .reporter import Reporter, sort_diagnostics
from .rules import RECOMMENDED, RULES, BrandMarginPolicy, LintRule, get_rule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActiveRule:
    """A rule id resolved to its class, severity and raw options."""

    rule: type[LintRule]
    severity: Severity
    options: dict[str, Any] = field(default_factory=dict)


@dataclass
class LintResult:
    """Diagnostics from a multi-file run."""

    diagnostics: list[Diagnostic] = field(default_factory=list)
    files_checked: int = 0
    skipped: list[str] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.severity == Severity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.severity == Severity.WARN)


# =============================================================================
# Configuration
# =============================================================================


def _parse_severity(rule_id: str, value: str) -> Severity:
    try:
        return Severity(value)
    except ValueError:
        allowed = ", ".join(s.value for s in Severity)
        raise RuleConfigError(
            f"Invalid severity '{value}' for {rule_id} (expected one of: {allowed})",
            rule_id,
        ) from None


def resolve_rules(config: LintConfig | None = None) -> list[ActiveRule]:
    """Resolve the configured rules, recommended ones first.

    Raises:
        RuleConfigError: For an unknown rule id or severity.
    """
    config = config or LintConfig()
    for rule_id in config.rules:
        get_rule(rule_id)

    resolved: list[ActiveRule] = []
    rule_ids = list(RECOMMENDED) + [r for r in config.rules if r not in RECOMMENDED]
    for rule_id in rule_ids:
        rule_config = config.rules.get(rule_id)
        if rule_config is None:
            severity = RECOMMENDED.get(rule_id, Severity.OFF)
            options: dict[str, Any] = {}
        else:
            severity = _parse_severity(rule_id, rule_config.severity)
            options = dict(rule_config.options)

        if severity == Severity.OFF:
            logger.debug("Rule %s is off", rule_id)
            continue
        resolved.append(ActiveRule(rule=RULES[rule_id], severity=severity, options=options))

    return resolved


def apply_overrides(
    config: LintConfig,
    ignore_paths: Sequence[str] = (),
    allow_section: bool = False,
) -> LintConfig:
    """Layer command-line options on top of a lint configuration.

    ``ignore_paths`` extends ``ignorePaths`` of every rule;
    ``allow_section`` turns on ``allowSection`` for the margin rule.
    """
    if not ignore_paths and not allow_section:
        return config

    rules = dict(config.rules)
    for rule_id in RULES:
        rule_config = rules.get(rule_id)
        if rule_config is None:
            rule_config = RuleConfig(severity=RECOMMENDED.get(rule_id, Severity.OFF).value)
        options = dict(rule_config.options)

        if ignore_paths:
            options["ignorePaths"] = [*options.get("ignorePaths", []), *ignore_paths]
        if allow_section and rule_id == BrandMarginPolicy.rule_id:
            options["allowSection"] = True

        rules[rule_id] = RuleConfig(severity=rule_config.severity, options=options)

    return replace(config, rules=rules)


# =============================================================================
# Linting
# =============================================================================


def lint_source(
    source: str,
    filename: str = "<input>",
    config: LintConfig | None = None,
    rules: Sequence[ActiveRule] | None = None,
) -> list[Diagnostic]:
    """Lint JSX/TSX source text.

    Args:
        source: File contents.
        filename: Path used for ``ignorePaths`` matching and in diagnostics.
        config: Lint configuration; recommended defaults if omitted.
        rules: Pre-resolved rules, overriding ``config``.

    Returns:
        Diagnostics ordered by position.

    Raises:
        RuleConfigError: If a rule's options are invalid.
    """
    if rules is None:
        rules = resolve_rules(config)

    reporter = Reporter(filename)
    active: list[LintRule] = []
    for entry in rules:
        rule = entry.rule.activate(filename, reporter, entry.options, entry.severity)
        if rule is not None:
            active.append(rule)

    if not active:
        return []

    index = LineIndex(source)
    for element in scan_elements(source):
        contexts = class_name_contexts(element, index)
        for rule in active:
            rule.check_element(element.tag_name, contexts)

    return sort_diagnostics(reporter.diagnostics)


def lint_file(
    path: Path,
    config: LintConfig | None = None,
    rules: Sequence[ActiveRule] | None = None,
) -> list[Diagnostic]:
    """Lint one file on disk."""
    source = path.read_text(encoding="utf-8")
    return lint_source(source, filename=normalize_path(str(path)), config=config, rules=rules)


def discover_files(paths: Iterable[Path], config: LintConfig | None = None) -> list[Path]:
    """Expand paths to the files to lint.

    Files named explicitly are always linted. Directories are walked and
    filtered by the ``include``/``exclude`` globs, relative to the directory.
    """
    config = config or LintConfig()
    found: list[Path] = []
    seen: set[Path] = set()

    for path in paths:
        if path.is_file():
            candidates = [path]
        elif path.is_dir():
            candidates = []
            for candidate in sorted(path.rglob("*")):
                if not candidate.is_file():
                    continue
                relative = candidate.relative_to(path).as_posix()
                if matches_any(relative, config.exclude):
                    continue
                if matches_any(relative, config.include):
                    candidates.append(candidate)
        else:
            logger.warning("Path does not exist: %s", path)
            continue

        for candidate in candidates:
            if candidate not in seen:
                seen.add(candidate)
                found.append(candidate)

    logger.debug("Discovered %d file(s)", len(found))
    return found


def lint_paths(paths: Iterable[Path], config: LintConfig | None = None) -> LintResult:
    """Lint every file under ``paths``; unreadable files are skipped."""
    rules = resolve_rules(config)
    result = LintResult()

    for path in discover_files(paths, config):
        try:
            diagnostics = lint_file(path, rules=rules)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read %s: %s", path, e)
            result.skipped.append(str(path))
            continue
        result.files_checked += 1
        result.diagnostics.extend(diagnostics)

    result.diagnostics = sort_diagnostics(result.diagnostics)
    return result
