"""Pluggy hook specifications: setup-time hooks that register new variants.

Both hooks return a ``name -> variant`` mapping (or None). Adding a variant
this way never requires editing the consumer that uses it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from solidctl.domain.discounts import DiscountFn
    from solidctl.domain.storage import Database

PROJECT_NAME = "solidctl"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class SolidctlHookSpec:
    """Hook specifications for the solidctl plugin system."""

    @hookspec
    def register_discounts(self) -> dict[str, DiscountFn] | None:
        """Return tier name -> discount function mappings."""

    @hookspec
    def register_databases(self) -> dict[str, type[Database]] | None:
        """Return name -> database class mappings.

        Classes are constructed with the caller's line sink as their only
        argument and must satisfy the ``Database`` protocol.
        """
