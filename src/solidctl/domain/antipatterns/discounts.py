"""Discounts chosen by branching on a customer-type string.

Adding a tier means editing :meth:`DiscountCalculator.calculate_discount`.
"""

from __future__ import annotations


class DiscountCalculator:
    def calculate_discount(self, customer_type: str, amount: float) -> float:
        if customer_type == "regular":
            return amount * 0.05
        if customer_type == "premium":
            return amount * 0.1
        if customer_type == "gold":
            return amount * 0.15
        return 0
