"""Open/Closed - corrected.

:class:`Communication` is closed for modification and open for extension:
anything satisfying :class:`Communicable` can be passed in, so a new animal is
a new class and nothing else.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable


@runtime_checkable
class Communicable(Protocol):
    def communicate(self) -> str: ...


class Dog:
    def communicate(self) -> str:
        return "woof woof"


class Cat:
    def communicate(self) -> str:
        return "meow meow"


class Fox:
    def communicate(self) -> str:
        return "ring-ding-ding-ding-dingeringeding"


class Communication:
    def communicate(self, animal: Communicable) -> str:
        return animal.communicate()

    def communicate_multiple(self, animals: Iterable[Communicable]) -> list[str]:
        return [self.communicate(animal) for animal in animals]


__all__ = ["Cat", "Communicable", "Communication", "Dog", "Fox"]
