"""
BrandPlan CLI Package.

- tokens.py: init and build commands
- lint.py: class-name lint command
- utils.py: Shared utilities
"""

import sys

import typer

from brandplan.cli.lint import lint_command
from brandplan.cli.tokens import build_command, init_command
from brandplan.cli.utils import configure_logging, get_version, version_callback

# =============================================================================
# Main Application
# =============================================================================

app = typer.Typer(
    help="BrandPlan - scaffold, build and lint brand token CSS",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """BrandPlan CLI main callback for global options."""
    configure_logging(verbose)


app.command(name="init")(init_command)
app.command(name="build")(build_command)
app.command(name="lint")(lint_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = [
    "app",
    "main",
    "get_version",
    "version_callback",
]


if __name__ == "__main__":
    main(sys.argv[1:])
