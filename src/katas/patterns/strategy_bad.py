"""Strategy - anti-pattern.

Every discount rule lives in one conditional chain, and the description is a
second chain that has to be kept in sync with the first.
"""


class DiscountCalculator:
    def calculate(self, amount, customer_type):
        if customer_type == "regular":
            return 0
        elif customer_type == "vip":
            return amount * 0.2
        elif customer_type == "student":
            return amount * 0.1
        return 0

    def info(self, customer_type):
        if customer_type == "regular":
            return "Cliente regular - sin descuento"
        elif customer_type == "vip":
            return "Cliente VIP - 20% de descuento"
        elif customer_type == "student":
            return "Estudiante - 10% de descuento"
        return ""
