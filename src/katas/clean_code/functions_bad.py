"""Functions - anti-pattern.

One long function validates, totals, discounts, charges and notifies, with
nested conditionals and magic numbers. It works, but no part of it can be
read, reused or tested on its own.
"""


class OrderProcessor:
    def __init__(self):
        self.orders = []

    def process_order(self, name, email, items, payment):
        if name:
            if email and "@" in email:
                if len(items) > 0:
                    total = 0
                    for i in items:
                        if i["price"] > 0 and i["quantity"] > 0:
                            total = total + i["price"] * i["quantity"]
                        else:
                            return False
                    if total > 100:
                        total = total - total * 0.1
                    if payment == "credit_card" or payment == "debit_card" or payment == "paypal":
                        self.orders.append({"n": name, "e": email, "t": total, "p": payment})
                        print("Email enviado a " + email + ": pedido por " + str(total))
                        return True
                    else:
                        return False
                else:
                    return False
            else:
                return False
        else:
            return False
