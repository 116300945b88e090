"""Inheritance - anti-pattern.

``Dog`` and ``Cat`` copy the same fields and the same ``get_info``/``eat``/
``sleep`` bodies. A fix to one has to be remembered in the other.
"""


class Dog:
    def __init__(self, name, age, weight):
        self.name = name
        self.age = age
        self.weight = weight

    def get_info(self):
        return f"{self.name} (perro), {self.age} años, {self.weight} kg"

    def eat(self):
        return f"{self.name} está comiendo"

    def sleep(self):
        return f"{self.name} está durmiendo"

    def fetch(self):
        return f"{self.name} trae la pelota"


class Cat:
    def __init__(self, name, age, weight):
        self.name = name
        self.age = age
        self.weight = weight

    def get_info(self):
        return f"{self.name} (gato), {self.age} años, {self.weight} kg"

    def eat(self):
        return f"{self.name} está comiendo"

    def sleep(self):
        return f"{self.name} está durmiendo"

    def purr(self):
        return f"{self.name} ronronea"
