"""Dependency Inversion - anti-pattern.

``OrderService`` builds its own ``MySQLDatabase``. The high-level policy is
welded to a low-level detail and cannot be tested without it.
"""


class MySQLDatabase:
    def __init__(self):
        self.records = []

    def save(self, data):
        print(f"Guardando en MySQL: {data}")
        self.records.append(data)


class OrderService:
    def __init__(self):
        self.database = MySQLDatabase()

    def process_order(self, order_id):
        self.database.save(f"Pedido {order_id} procesado")
