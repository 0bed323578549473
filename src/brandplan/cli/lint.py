"""
Lint CLI command.

Runs the class-name rules over .tsx/.jsx files and prints diagnostics in
``file:line:col: severity: message [rule]`` form, or as JSON.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

import typer
from rich.console import Console

from brandplan.core.errors import BrandPlanError
from brandplan.core.manifest import load_project_manifest
from brandplan.lint.reporter import format_human, format_json
from brandplan.lint.runner import apply_overrides, lint_paths

console = Console(stderr=True)


class OutputFormat(StrEnum):
    HUMAN = "human"
    JSON = "json"


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def lint_command(
    paths: list[Path] | None = typer.Argument(
        None, help="Files or directories to lint (default: current directory)"
    ),
    ignore_path: list[str] | None = typer.Option(
        None, "--ignore-path", help="Glob of files exempt from every rule (repeatable)"
    ),
    allow_section: bool = typer.Option(
        False, "--allow-section", help="Allow brand margins on <section>"
    ),
    format: OutputFormat = typer.Option(
        OutputFormat.HUMAN, "--format", "-f", help="Output format: 'human' or 'json'"
    ),
) -> None:
    """
    Lint className attributes against the brand token policies.
    """
    try:
        manifest = load_project_manifest(Path.cwd())
        config = apply_overrides(manifest.lint, ignore_path or [], allow_section)
        result = lint_paths(paths or [Path(".")], config)
    except BrandPlanError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if format == OutputFormat.JSON:
        typer.echo(format_json(result.diagnostics))
    else:
        if result.diagnostics:
            typer.echo(format_human(result.diagnostics))

        problems = len(result.diagnostics)
        if problems:
            console.print(
                f"[red]✗ {_plural(problems, 'problem')}[/red] "
                f"({_plural(result.error_count, 'error')}, "
                f"{_plural(result.warning_count, 'warning')})"
            )
        else:
            console.print(
                f"[green]✓ No problems found in {_plural(result.files_checked, 'file')}[/green]"
            )

    if result.error_count:
        raise typer.Exit(code=1)
