"""Open/Closed: discount rules as caller-supplied functions.

:class:`DiscountCalculator` never changes when a new customer tier appears.
New tiers are new functions, either passed directly or looked up by name in
a :class:`DiscountRegistry` that config and plugins can extend.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping

DiscountFn = Callable[[float], float]


def regular_discount(amount: float) -> float:
    """5% for regular customers."""
    return amount * 0.05


def premium_discount(amount: float) -> float:
    """10% for premium customers."""
    return amount * 0.1


def gold_discount(amount: float) -> float:
    """15% for gold customers."""
    return amount * 0.15


def diamond_discount(amount: float) -> float:
    """20% for diamond customers, added without touching the calculator."""
    return amount * 0.2


def rate_discount(rate: float) -> DiscountFn:
    """Build a flat-rate discount function.

    Raises:
        ValueError: If *rate* is outside ``[0, 1]``.
    """
    if not 0 <= rate <= 1:
        msg = f"Discount rate must be between 0 and 1, got {rate!r}"
        raise ValueError(msg)

    def discount(amount: float) -> float:
        return amount * rate

    discount.__name__ = f"rate_discount_{rate:g}"
    return discount


class DiscountCalculator:
    """Applies whatever discount function it is given."""

    def calculate_discount(self, amount: float, discount_fn: DiscountFn | None = None) -> float:
        if discount_fn is None:
            return 0
        return discount_fn(amount)


BUILTIN_TIERS: dict[str, DiscountFn] = {
    "regular": regular_discount,
    "premium": premium_discount,
    "gold": gold_discount,
    "diamond": diamond_discount,
}


class DiscountRegistry:
    """Name -> discount function table.

    Built-in tier names are reserved and cannot be re-registered.
    """

    def __init__(self, tiers: Mapping[str, DiscountFn] | None = None) -> None:
        self._tiers: dict[str, DiscountFn] = dict(BUILTIN_TIERS)
        for name, fn in (tiers or {}).items():
            self.register(name, fn)

    def register(self, name: str, discount_fn: DiscountFn) -> None:
        """Add a tier.

        Raises:
            ValueError: Empty name, built-in name, or a different function
                already registered under *name*.
            TypeError: *discount_fn* is not callable.
        """
        normalized = name.strip().lower()
        if not normalized:
            msg = "Discount tier name must not be empty"
            raise ValueError(msg)
        if not callable(discount_fn):
            msg = f"Discount tier {normalized!r} must be callable"
            raise TypeError(msg)
        if normalized in BUILTIN_TIERS:
            msg = f"Discount tier {normalized!r} conflicts with a built-in tier"
            raise ValueError(msg)
        existing = self._tiers.get(normalized)
        if existing is not None and existing is not discount_fn:
            msg = f"Discount tier {normalized!r} is already registered"
            raise ValueError(msg)
        self._tiers[normalized] = discount_fn

    def get(self, name: str) -> DiscountFn:
        """Look up a tier by name.

        Raises:
            KeyError: If no tier is registered under *name*.
        """
        normalized = name.strip().lower()
        if normalized not in self._tiers:
            msg = f"No discount tier registered for {name!r}"
            raise KeyError(msg)
        return self._tiers[normalized]

    def names(self) -> list[str]:
        return list(self._tiers)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().lower() in self._tiers

    def __iter__(self) -> Iterator[str]:
        return iter(self._tiers)

    def __len__(self) -> int:
        return len(self._tiers)


def format_amount(value: float) -> str:
    """Render a money amount the way the demos print it (``50``, not ``50.0``)."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)
