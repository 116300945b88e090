"""Polymorphism - anti-pattern.

Animals are plain records carrying a ``type`` tag, and every processor method
repeats the same if/elif over that tag. Adding a fish means editing all three.
"""

from typing import Literal

from pydantic import BaseModel


class DogData(BaseModel):
    type: Literal["dog"] = "dog"
    name: str


class CatData(BaseModel):
    type: Literal["cat"] = "cat"
    name: str


class AnimalProcessor:
    def make_sound(self, animal):
        if animal.type == "dog":
            return f"{animal.name} dice: ¡Guau!"
        elif animal.type == "cat":
            return f"{animal.name} dice: ¡Miau!"
        else:
            return "Animal desconocido"

    def feed(self, animal):
        if animal.type == "dog":
            return f"{animal.name} come croquetas"
        elif animal.type == "cat":
            return f"{animal.name} come pescado"
        else:
            return "Animal desconocido"

    def move(self, animal):
        if animal.type == "dog":
            return f"{animal.name} corre"
        elif animal.type == "cat":
            return f"{animal.name} salta"
        else:
            return "Animal desconocido"
