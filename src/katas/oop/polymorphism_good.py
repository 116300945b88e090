"""Polymorphism - corrected.

Each variant implements the behavior itself and the processor just calls it.
New variants subclass :class:`Animal`; :class:`AnimalProcessor` never changes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable


class Animal(ABC):
    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def make_sound(self) -> str: ...

    @abstractmethod
    def feed(self) -> str: ...

    @abstractmethod
    def move(self) -> str: ...


class Dog(Animal):
    def make_sound(self) -> str:
        return f"{self.name} dice: ¡Guau!"

    def feed(self) -> str:
        return f"{self.name} come croquetas"

    def move(self) -> str:
        return f"{self.name} corre"


class Cat(Animal):
    def make_sound(self) -> str:
        return f"{self.name} dice: ¡Miau!"

    def feed(self) -> str:
        return f"{self.name} come pescado"

    def move(self) -> str:
        return f"{self.name} salta"


class AnimalProcessor:
    def process_animal(self, animal: Animal) -> tuple[str, str, str]:
        """Run the full routine for one animal: sound, feed, move."""
        return (animal.make_sound(), animal.feed(), animal.move())

    def process_animals(self, animals: Iterable[Animal]) -> list[tuple[str, str, str]]:
        return [self.process_animal(animal) for animal in animals]


__all__ = ["Animal", "AnimalProcessor", "Cat", "Dog"]
