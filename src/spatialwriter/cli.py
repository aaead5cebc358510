"""spatialwriter command line: global flags, settings, subcommands."""

from __future__ import annotations

import click

from spatialwriter import __version__
from spatialwriter.commands import register_commands
from spatialwriter.commands._context import AppContext
from spatialwriter.config.settings import SwSettings

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(__version__, prog_name="spatialwriter")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging on stderr.")
@click.option("--log-json", is_flag=True, help="Log JSON lines instead of console text.")
@click.option(
    "-c",
    "--config",
    "config_path",
    metavar="FILE",
    default=None,
    help="Read this TOML file instead of searching for spatialwriter.toml.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """Encode GeoJSON geometries as WKB, EWKB or MySQL internal binary."""
    ctx.obj = AppContext(
        SwSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            verbose=verbose,
            log_json=log_json,
        )
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
