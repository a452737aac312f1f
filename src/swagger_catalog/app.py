"""Typer application and CLI entry point for swagger-catalog.

The root callback initialises output formatting and logging from the global
flags and resolves the effective configuration; sub-commands from
:mod:`swagger_catalog.commands` read it from ``ctx.obj``.

:func:`main` is the console-script entry point declared in
``pyproject.toml``.  :class:`~swagger_catalog.exceptions.CatalogError`
instances exit with their ``exit_code``; anything else exits with
:data:`~swagger_catalog.exit_codes.EXIT_GENERIC_FAILURE`.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import typer

from swagger_catalog import __version__
from swagger_catalog.commands.config import config_app
from swagger_catalog.commands.inspect import info_command, operations_command, show_command
from swagger_catalog.exit_codes import EXIT_GENERIC_FAILURE

app = typer.Typer(
    name="swagger-catalog",
    help="Flatten Swagger 2.0 documents into an operation catalog.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command("operations")(operations_command)
app.command("show")(show_command)
app.command("info")(info_command)
app.add_typer(config_app, name="config", help="Configuration management.")


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"swagger-catalog {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    json_output: bool = typer.Option(False, "--json", help="JSON output format."),
    plain_output: bool = typer.Option(False, "--plain", help="Plain text output."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable color output."),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Resolves configuration (CLI flags > environment > project > user),
    installs the global :class:`~swagger_catalog.output.OutputManager`, and
    routes library log records to stderr when ``--verbose`` is set.
    """
    from swagger_catalog.config import resolve_config
    from swagger_catalog.exceptions import ConfigError
    from swagger_catalog.output import OutputFormat, OutputManager, error, set_output

    cli_format: Optional[str] = None
    if json_output:
        cli_format = OutputFormat.JSON.value
    elif plain_output:
        cli_format = OutputFormat.PLAIN.value

    try:
        config = resolve_config(cli_format=cli_format)
    except ConfigError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    try:
        fmt = OutputFormat(config.output.format)
    except ValueError:
        fmt = OutputFormat.AUTO

    set_output(OutputManager(format=fmt, no_color=no_color, quiet=quiet, verbose=verbose))

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="[debug] %(name)s: %(message)s",
        )

    ctx.ensure_object(dict)
    ctx.obj["config"] = config


def main() -> None:
    """CLI entry point invoked by the ``swagger-catalog`` console script.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from swagger_catalog.exceptions import CatalogError
        from swagger_catalog.output import error

        if isinstance(exc, CatalogError):
            error(str(exc))
            sys.exit(exc.exit_code)
        error(f"Unexpected error: {exc}")
        sys.exit(EXIT_GENERIC_FAILURE)
