"""Strategy - corrected.

Each discount rule is a :class:`DiscountStrategy` object bundling the
computation with its description. :class:`DiscountCalculator` delegates both
to whichever strategy it currently holds, so swapping strategies changes the
next result and description together.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class DiscountStrategy(ABC):
    @abstractmethod
    def calculate_discount(self, amount: float) -> float: ...

    @abstractmethod
    def description(self) -> str: ...


class PercentageDiscount(DiscountStrategy):
    """Discount as a fixed fraction of the amount."""

    rate: float = 0.0
    label: str = ""

    def calculate_discount(self, amount: float) -> float:
        return round(amount * self.rate, 2)

    def description(self) -> str:
        return self.label


class RegularCustomerDiscount(PercentageDiscount):
    rate = 0.0
    label = "Cliente regular - sin descuento"


class VIPCustomerDiscount(PercentageDiscount):
    rate = 0.20
    label = "Cliente VIP - 20% de descuento"


class StudentDiscount(PercentageDiscount):
    rate = 0.10
    label = "Estudiante - 10% de descuento"


class DiscountCalculator:
    def __init__(self, strategy: DiscountStrategy) -> None:
        self._strategy = strategy

    @property
    def strategy(self) -> DiscountStrategy:
        return self._strategy

    def set_strategy(self, strategy: DiscountStrategy) -> None:
        self._strategy = strategy

    def calculate_discount(self, amount: float) -> float:
        return self._strategy.calculate_discount(amount)

    def get_discount_info(self) -> str:
        return self._strategy.description()


__all__ = [
    "DiscountCalculator",
    "DiscountStrategy",
    "PercentageDiscount",
    "RegularCustomerDiscount",
    "StudentDiscount",
    "VIPCustomerDiscount",
]
