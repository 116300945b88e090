"""Builder - anti-pattern.

A telescoping constructor: eight positional parameters whose order the caller
must remember, with ``None``/``False`` placeholders for everything skipped.
"""


class Pizza:
    def __init__(self, size, crust, sauce, cheese, toppings, extra_cheese, spicy_level, gluten_free):
        self.size = size
        self.crust = crust
        self.sauce = sauce
        self.cheese = cheese
        self.toppings = toppings
        self.extra_cheese = extra_cheese
        self.spicy_level = spicy_level
        self.gluten_free = gluten_free

    def get_description(self):
        d = "Pizza " + str(self.size) + " con masa " + str(self.crust)
        if self.toppings:
            d += ", ingredientes: " + ", ".join(self.toppings)
        if self.extra_cheese:
            d += ", queso extra"
        if self.spicy_level:
            d += ", nivel picante: " + str(self.spicy_level)
        return d
