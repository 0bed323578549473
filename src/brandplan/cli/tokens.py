"""
Token CLI commands.

- init:  write brandplan.yaml and generate the initial CSS
- build: compile brandplan.yaml to CSS custom properties
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from brandplan.cli.utils import print_validation_error, resolve_project_root
from brandplan.core.brandplan_loader import (
    BRANDPLAN_FILE,
    get_config_path,
    get_css_output_path,
    load_brand_plan,
    write_default_config,
)
from brandplan.core.css_compiler import export_css_file
from brandplan.core.errors import BrandPlanError, BrandPlanValidationError

logger = logging.getLogger(__name__)

NEXT_STEPS = """\

Next steps:

1. Import the generated CSS in your app layout (app/layout.tsx):
   import './brandplan.css';

2. Use brand utilities in markup:
   <div className="p-brand-4 bg-brand-surface-1 rounded-brand-md" />

3. Lint class names:
   brandplan lint src

4. Rebuild CSS after token changes:
   brandplan build
"""


def init_command(
    path: str | None = typer.Option(
        None, "--path", "-p", help="Project directory (default: current)"
    ),
) -> None:
    """
    Initialize BrandPlan in a project.

    Writes brandplan.yaml (unless it already exists) and generates the CSS.
    """
    project_root = resolve_project_root(path)
    config_path = get_config_path(project_root)

    try:
        written = write_default_config(project_root)
    except OSError as e:
        typer.echo(f"\n✗ Failed to initialize:\n{e}", err=True)
        raise typer.Exit(code=1)

    if written is None:
        typer.echo(f"⚠ {config_path} already exists, skipping...")
    else:
        typer.echo(f"✓ Created {config_path}")

    css_path = get_css_output_path(project_root)
    try:
        plan = load_brand_plan(project_root)
        export_css_file(plan, css_path)
        typer.echo(f"✓ Generated {css_path}")
    except BrandPlanValidationError as e:
        print_validation_error(e, BRANDPLAN_FILE)
        typer.echo("\nFix the tokens and run 'brandplan build'.")
    except (BrandPlanError, OSError) as e:
        typer.echo(f"Failed to generate initial CSS: {e}", err=True)
        typer.echo("\nRun 'brandplan build' once the config is fixed.")

    typer.echo(NEXT_STEPS)


def build_command(
    path: str | None = typer.Option(
        None, "--path", "-p", help="Project directory (default: current)"
    ),
    out: Path | None = typer.Option(
        None, "--out", "-o", help="Output path for generated CSS"
    ),
) -> None:
    """
    Generate CSS from brandplan.yaml.
    """
    project_root = resolve_project_root(path)
    output_path = out or get_css_output_path(project_root)

    try:
        plan = load_brand_plan(project_root)
        export_css_file(plan, output_path)
    except BrandPlanValidationError as e:
        print_validation_error(e, BRANDPLAN_FILE)
        raise typer.Exit(code=1)
    except (BrandPlanError, OSError) as e:
        typer.echo(f"\n✗ Failed to build:\n{e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"✓ Generated {output_path}")
