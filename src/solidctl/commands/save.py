"""Command: save user data through an injected database."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from solidctl.commands._base import SolidCommand

if TYPE_CHECKING:
    from solidctl.commands._context import AppContext


@click.command(
    cls=SolidCommand,
    examples="""\
  solidctl save Kanishk
  solidctl save Kanishk --db nosql
  solidctl save "John Doe" --db h2""",
)
@click.argument("data")
@click.option("--db", "database", default="sql", show_default=True, help="Database variant.")
@click.pass_obj
def save(app: AppContext, data: str, database: str) -> None:
    """Save DATA through the chosen database variant."""
    from solidctl.services.storage import StorageService

    app.emit(StorageService(app.settings, app.plugins).save(data, database))
