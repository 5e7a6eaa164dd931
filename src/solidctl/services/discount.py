"""DiscountService: named discount tiers on top of the open/closed calculator.

The tier table starts from the built-in tiers, then adds flat-rate tiers from
``[discounts.tiers]`` and any tiers plugins return from ``register_discounts``.
:class:`~solidctl.domain.discounts.DiscountCalculator` is the same class the
OCP demo uses; none of these sources change it.
"""

from __future__ import annotations

import logging
import math
from typing import Any

from solidctl.domain.discounts import (
    BUILTIN_TIERS,
    DiscountCalculator,
    DiscountFn,
    DiscountRegistry,
    rate_discount,
)
from solidctl.services.base import BaseService
from solidctl.services.contracts import DiscountResultData, TiersResultData, dump_validated
from solidctl.services.result import ServiceResult
from solidctl.services.telemetry import traced

logger = logging.getLogger(__name__)


class DiscountService(BaseService):
    """Apply and list discount tiers."""

    def _build_registry(self, warnings: list[str]) -> tuple[DiscountRegistry, dict[str, str]]:
        registry = DiscountRegistry()
        sources = {name: "builtin" for name in BUILTIN_TIERS}

        for name, rate in self._settings.discounts.tiers.items():
            try:
                registry.register(name, rate_discount(rate))
            except (TypeError, ValueError) as exc:
                warnings.append(f"Skipping config tier {name!r}: {exc}")
                continue
            sources[name.strip().lower()] = "config"

        plugin_tiers = self._collect_plugin_variants("register_discounts", warnings)
        for name, discount_fn in plugin_tiers.items():
            try:
                registry.register(name, discount_fn)
            except (TypeError, ValueError) as exc:
                logger.warning("Skipping plugin discount tier %r", name, exc_info=True)
                warnings.append(f"Skipping plugin tier {name!r}: {exc}")
                continue
            sources[name.strip().lower()] = "plugin"

        return registry, sources

    @traced
    def calculate(self, amount: float, tier: str | None = None) -> ServiceResult:
        """Apply *tier* to *amount*; no tier means no discount."""
        op = "discount"
        if not math.isfinite(amount):
            return ServiceResult.failure(
                op, "INVALID_AMOUNT", f"Amount must be a finite number, got {amount}"
            )
        if amount < 0:
            return ServiceResult.failure(
                op, "INVALID_AMOUNT", f"Amount must not be negative, got {amount}"
            )

        warnings: list[str] = []
        registry, _sources = self._build_registry(warnings)

        discount_fn = None
        if tier is not None:
            try:
                discount_fn = registry.get(tier)
            except KeyError:
                return ServiceResult.failure(
                    op,
                    "UNKNOWN_TIER",
                    f"Unknown discount tier: {tier!r}",
                    available=registry.names(),
                )

        try:
            discount = _apply(discount_fn, amount)
        except Exception as exc:
            logger.warning("Discount tier %r failed", tier, exc_info=True)
            return ServiceResult.failure(
                op, "DISCOUNT_FAILED", f"Discount tier {tier!r} failed: {exc}"
            )

        data = dump_validated(
            DiscountResultData,
            {
                "amount": amount,
                "tier": tier.strip().lower() if tier is not None else None,
                "discount": discount,
                "total": amount - discount,
            },
        )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    @traced
    def list_tiers(self) -> ServiceResult:
        """List every tier with its source and the discount on the demo amount."""
        warnings: list[str] = []
        registry, sources = self._build_registry(warnings)
        amount = self._settings.demo.amount
        items: list[dict[str, Any]] = []
        for name in registry:
            try:
                example = _apply(registry.get(name), amount)
            except Exception as exc:
                logger.warning("Discount tier %r failed", name, exc_info=True)
                warnings.append(f"Skipping tier {name!r}: {exc}")
                continue
            items.append({"name": name, "source": sources[name], "example": example})
        data = dump_validated(TiersResultData, {"count": len(items), "items": items})
        return ServiceResult(ok=True, op="tiers", data=data, warnings=warnings)


def _apply(discount_fn: DiscountFn | None, amount: float) -> float:
    """Run *discount_fn* through the calculator and check it returned a number.

    Raises:
        TypeError: If the function returned something other than a real number.
    """
    value = DiscountCalculator().calculate_discount(amount, discount_fn)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        msg = f"returned {type(value).__name__}, expected a number"
        raise TypeError(msg)
    return float(value)
