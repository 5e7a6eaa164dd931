"""Click command class with an ``--examples`` flag.

``--help`` stays short; ``--examples`` prints sample invocations and exits
before required arguments are checked.
"""

from __future__ import annotations

from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    examples = getattr(ctx.command, "examples", None)
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(examples)
    ctx.exit(0)


class SolidCommand(click.Command):
    """A command that carries a block of sample invocations."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples

    def get_params(self, ctx: click.Context) -> list[click.Parameter]:
        params = super().get_params(ctx)
        if not self.examples:
            return params
        flag = click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=_print_examples,
            help="Show usage examples and exit.",
        )
        # Keep --help last in the option listing.
        own = len(self.params)
        return [*params[:own], flag, *params[own:]]
