"""
Tests for the dependency inversion kata.

These tests demonstrate:
- Injecting a Mock in place of the database
- Any object with a matching ``save`` satisfies the protocol
"""

from unittest.mock import Mock

from katas.solid import dip_bad
from katas.solid.dip_good import Database, MongoDatabase, MySQLDatabase, OrderService


class RecordingDatabase:
    """Hand-written test double capturing saved data."""

    def __init__(self) -> None:
        self.saved_data: list[str] = []

    def save(self, data: str) -> None:
        self.saved_data.append(data)


def test_order_service_calls_injected_database():
    database = Mock(spec=Database)

    OrderService(database).process_order("12345")

    database.save.assert_called_once_with("Pedido 12345 procesado")


def test_recording_double_captures_data():
    database = RecordingDatabase()

    OrderService(database).process_order("TEST123")

    assert database.saved_data == ["Pedido TEST123 procesado"]
    assert isinstance(database, Database)


def test_mysql_database_works_as_dependency():
    database = MySQLDatabase()

    OrderService(database).process_order("67890")

    assert database.records == ("Pedido 67890 procesado",)


def test_mongo_database_is_a_drop_in_replacement():
    database = MongoDatabase()

    OrderService(database).process_order("1")

    assert database.documents == ({"data": "Pedido 1 procesado"},)


def test_bad_service_is_welded_to_mysql():
    service = dip_bad.OrderService()

    service.process_order("1")

    assert isinstance(service.database, dip_bad.MySQLDatabase)
    assert service.database.records == ["Pedido 1 procesado"]
