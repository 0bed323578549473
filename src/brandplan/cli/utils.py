"""
BrandPlan CLI Utilities.

Shared utility functions used across CLI modules.
"""

import logging
import platform
from pathlib import Path

import typer

from brandplan.core.errors import BrandPlanValidationError


def get_version() -> str:
    """Get BrandPlan version from pyproject.toml or package metadata."""
    from brandplan import __version__

    return __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        import brandplan

        install_location = Path(brandplan.__file__).parent

        typer.echo(f"BrandPlan version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(
            f"  Python:        {platform.python_implementation()} {platform.python_version()}"
        )
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        typer.echo(f"  Location:      {install_location}")

        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send library log records to stderr when --verbose is given."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def resolve_project_root(path: str | None) -> Path:
    return Path(path or ".").resolve()


def print_validation_error(error: BrandPlanValidationError, config_name: str) -> None:
    """Print a token validation error the way init/build report it."""
    typer.echo(f"\n✗ Validation error in {config_name}:", err=True)
    typer.echo(error.message, err=True)
