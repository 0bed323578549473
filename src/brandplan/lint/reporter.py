"""
Diagnostic reporting for lint rules.

A ``Reporter`` is created per linted file. Rules hand it the element
context, a message id and the message data; it renders the message
template and records a ``Diagnostic``.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any

from brandplan.core.ir.lint import Diagnostic, ElementContext, Severity


def render_message(template: str, data: Mapping[str, Any]) -> str:
    """Fill ``{name}`` placeholders; unknown placeholders are left as-is."""
    rendered = template
    for key, value in data.items():
        rendered = rendered.replace(f"{{{key}}}", str(value))
    return rendered


class Reporter:
    """Collects diagnostics for one source file."""

    def __init__(self, filename: str = "<input>") -> None:
        self.filename = filename
        self.diagnostics: list[Diagnostic] = []

    def report(
        self,
        rule_id: str,
        context: ElementContext,
        message_id: str,
        template: str,
        data: Mapping[str, Any] | None = None,
        severity: Severity = Severity.ERROR,
    ) -> Diagnostic:
        data = dict(data or {})
        diagnostic = Diagnostic(
            rule_id=rule_id,
            message_id=message_id,
            message=render_message(template, data),
            data=data,
            file=self.filename,
            line=context.location.line,
            column=context.location.column,
            severity=severity,
        )
        self.diagnostics.append(diagnostic)
        return diagnostic


def sort_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    """Order by file, then position; report order is kept for ties."""
    return sorted(diagnostics, key=lambda d: (d.file, d.line, d.column))


def count_by_severity(diagnostics: Iterable[Diagnostic]) -> dict[Severity, int]:
    counts = {Severity.ERROR: 0, Severity.WARN: 0}
    for diagnostic in diagnostics:
        if diagnostic.severity in counts:
            counts[diagnostic.severity] += 1
    return counts


def format_human(diagnostics: Iterable[Diagnostic]) -> str:
    """One ``file:line:col: severity: message [rule]`` line per diagnostic."""
    return "\n".join(d.format() for d in sort_diagnostics(diagnostics))


def format_json(diagnostics: Iterable[Diagnostic]) -> str:
    """JSON array of diagnostic records."""
    return json.dumps(
        [d.model_dump(mode="json") for d in sort_diagnostics(diagnostics)],
        indent=2,
    )
