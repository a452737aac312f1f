"""Config commands -- inspect the effective configuration.

``swagger-catalog config show`` prints the configuration the other commands
run with, after CLI flags, environment variables, the project file and the
user file have been merged.  ``config path`` prints where the user file is
looked up.
"""

from __future__ import annotations

import typer

from swagger_catalog.config import global_config_path
from swagger_catalog.models import CatalogConfig
from swagger_catalog.output import format_response, get_output

config_app = typer.Typer(no_args_is_help=True)


@config_app.command("show")
def config_show(ctx: typer.Context) -> None:
    """Print the effective configuration."""
    config = ctx.obj.get("config") if ctx.obj else None
    if not isinstance(config, CatalogConfig):
        config = CatalogConfig()
    format_response(config.model_dump(mode="json"))


@config_app.command("path")
def config_path() -> None:
    """Print the location of the user config file."""
    get_output().print_data(str(global_config_path()))
