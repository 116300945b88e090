"""Inheritance - corrected.

Shared fields and behavior are declared once on :class:`Animal`; each variant
only adds what is specific to it. The base model is frozen, so variants share
behavior without sharing mutable state.

Being pydantic models, variants are built with keyword arguments
(``Dog(name="Rex", age=5, weight=25)``), unlike the positional constructors
of the duplicated classes in ``inheritance_bad``.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class Animal(BaseModel):
    """Common contract for every animal variant.

    Attributes:
        name: Display name
        age: Age in years
        weight: Weight in kilograms
    """

    species: ClassVar[str] = "animal"

    name: str = Field(min_length=1)
    age: int = Field(ge=0)
    weight: float = Field(gt=0)

    model_config = ConfigDict(frozen=True)

    def get_info(self) -> str:
        return f"{self.name} ({self.species}), {self.age} años, {self.weight:g} kg"

    def eat(self) -> str:
        return f"{self.name} está comiendo"

    def sleep(self) -> str:
        return f"{self.name} está durmiendo"


class Dog(Animal):
    species: ClassVar[str] = "perro"

    def fetch(self) -> str:
        return f"{self.name} trae la pelota"


class Cat(Animal):
    species: ClassVar[str] = "gato"

    def purr(self) -> str:
        return f"{self.name} ronronea"


__all__ = ["Animal", "Cat", "Dog"]
