"""Builder - corrected.

:class:`PizzaBuilder` collects configuration through chained calls and
:meth:`PizzaBuilder.build` produces a frozen :class:`Pizza`. Anything not
configured falls back to the defaults declared on :class:`Pizza`.

Example:
    >>> pizza = PizzaBuilder().set_size("large").add_topping("pepperoni").with_extra_cheese().build()
    >>> pizza.crust
    'regular'
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

MIN_SPICY_LEVEL = 0
MAX_SPICY_LEVEL = 5


class Pizza(BaseModel):
    size: str = "medium"
    crust: str = "regular"
    sauce: str = "tomate"
    cheese: str = "mozzarella"
    toppings: tuple[str, ...] = ()
    extra_cheese: bool = False
    spicy_level: int = Field(default=MIN_SPICY_LEVEL, ge=MIN_SPICY_LEVEL, le=MAX_SPICY_LEVEL)

    model_config = ConfigDict(frozen=True)

    def get_description(self) -> str:
        parts = [f"Pizza {self.size} con masa {self.crust}, salsa {self.sauce} y queso {self.cheese}"]
        if self.toppings:
            parts.append(f"ingredientes: {', '.join(self.toppings)}")
        if self.extra_cheese:
            parts.append("queso extra")
        if self.spicy_level:
            parts.append(f"nivel picante: {self.spicy_level}")
        return ", ".join(parts)


class PizzaBuilder:
    def __init__(self) -> None:
        self._fields: dict[str, Any] = {}
        self._toppings: list[str] = []

    def set_size(self, size: str) -> PizzaBuilder:
        self._fields["size"] = size
        return self

    def set_crust(self, crust: str) -> PizzaBuilder:
        self._fields["crust"] = crust
        return self

    def set_sauce(self, sauce: str) -> PizzaBuilder:
        self._fields["sauce"] = sauce
        return self

    def set_cheese(self, cheese: str) -> PizzaBuilder:
        self._fields["cheese"] = cheese
        return self

    def add_topping(self, topping: str) -> PizzaBuilder:
        self._toppings.append(topping)
        return self

    def with_extra_cheese(self) -> PizzaBuilder:
        self._fields["extra_cheese"] = True
        return self

    def set_spicy_level(self, level: int) -> PizzaBuilder:
        """Raises ValueError outside the 0-5 range."""
        if not MIN_SPICY_LEVEL <= level <= MAX_SPICY_LEVEL:
            raise ValueError(f"Spicy level must be between {MIN_SPICY_LEVEL} and {MAX_SPICY_LEVEL}, got {level}")
        self._fields["spicy_level"] = level
        return self

    def reset(self) -> PizzaBuilder:
        self._fields.clear()
        self._toppings.clear()
        return self

    def build(self) -> Pizza:
        """Snapshot the current configuration; later builder calls do not affect it."""
        return Pizza(**self._fields, toppings=tuple(self._toppings))


__all__ = ["MAX_SPICY_LEVEL", "MIN_SPICY_LEVEL", "Pizza", "PizzaBuilder"]
