"""Subcommand modules for solidctl.

Provides register_commands(), which imports command modules lazily inside
the function so importing :mod:`solidctl.cli` stays cheap.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from solidctl.commands.discount import discount, tiers
    from solidctl.commands.list_cmd import list_cmd
    from solidctl.commands.run import run, run_all
    from solidctl.commands.save import save

    cli.add_command(list_cmd)
    cli.add_command(run)
    cli.add_command(run_all)
    cli.add_command(discount)
    cli.add_command(tiers)
    cli.add_command(save)
