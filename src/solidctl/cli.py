"""The ``solidctl`` entry point: global flags, settings, and subcommands."""

from __future__ import annotations

from typing import Any

import click

from solidctl import __version__
from solidctl.commands import register_commands
from solidctl.commands._context import AppContext
from solidctl.config.settings import SolidSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="solidctl")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only demo lines or bare values.")
@click.option("-v", "--verbose", is_flag=True, help="Add headings, timings and debug logs.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    help="Use this config file instead of searching for solidctl.toml.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: Any) -> None:
    """solidctl: good and bad examples of the SOLID design principles."""
    ctx.obj = AppContext(SolidSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
