"""Command: list the principles and their demo variants."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from solidctl.commands._base import SolidCommand

if TYPE_CHECKING:
    from solidctl.commands._context import AppContext


@click.command(
    "list",
    cls=SolidCommand,
    examples="""\
  solidctl list
  solidctl -v list
  solidctl -q list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List the SOLID principles with their available demo variants."""
    from solidctl.services.demo import DemoService

    app.emit(DemoService(app.settings).catalog())
