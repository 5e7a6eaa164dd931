"""Commands: run one demo, or every demo for a variant."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from solidctl.commands._base import SolidCommand
from solidctl.domain.types import Principle, Variant

if TYPE_CHECKING:
    from solidctl.commands._context import AppContext

_VARIANT_OPTION = click.option(
    "--variant",
    type=click.Choice([v.value for v in Variant], case_sensitive=False),
    default=Variant.GOOD.value,
    show_default=True,
    help="Run the refactored (good) or flawed (bad) half of the pair.",
)


@click.command(
    cls=SolidCommand,
    examples="""\
  solidctl run dip
  solidctl run lsp --variant bad
  solidctl --json run ocp""",
)
@click.argument("principle", type=click.Choice([p.value for p in Principle], case_sensitive=False))
@_VARIANT_OPTION
@click.pass_obj
def run(app: AppContext, principle: str, variant: str) -> None:
    """Run one principle's demo and print what it prints."""
    from solidctl.services.demo import DemoService

    app.emit(DemoService(app.settings).run(principle, variant))


@click.command(
    "run-all",
    cls=SolidCommand,
    examples="""\
  solidctl run-all
  solidctl run-all --variant bad
  solidctl -q run-all""",
)
@_VARIANT_OPTION
@click.pass_obj
def run_all(app: AppContext, variant: str) -> None:
    """Run every principle's demo in order."""
    from solidctl.services.demo import DemoService

    app.emit(DemoService(app.settings).run_all(variant))
