"""Commands: apply a named discount tier, list tiers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from solidctl.commands._base import SolidCommand

if TYPE_CHECKING:
    from solidctl.commands._context import AppContext


@click.command(
    cls=SolidCommand,
    examples="""\
  solidctl discount 1000
  solidctl discount 1000 --tier gold
  solidctl -q discount 250 --tier premium""",
)
@click.argument("amount", type=float)
@click.option("--tier", default=None, help="Discount tier name (see 'solidctl tiers').")
@click.pass_obj
def discount(app: AppContext, amount: float, tier: str | None) -> None:
    """Calculate the discount on AMOUNT for a customer tier."""
    from solidctl.services.discount import DiscountService

    app.emit(DiscountService(app.settings, app.plugins).calculate(amount, tier))


@click.command(
    cls=SolidCommand,
    examples="""\
  solidctl tiers
  solidctl --json tiers""",
)
@click.pass_obj
def tiers(app: AppContext) -> None:
    """List discount tiers from built-ins, config, and plugins."""
    from solidctl.services.discount import DiscountService

    app.emit(DiscountService(app.settings, app.plugins).list_tiers())
