"""Dependency Inversion - corrected.

:class:`OrderService` depends on the :class:`Database` protocol and receives
an implementation through its constructor. Any object with a matching
``save`` works, including a test double.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class Database(Protocol):
    def save(self, data: str) -> None: ...


class MySQLDatabase:
    """In-memory stand-in for a MySQL table."""

    def __init__(self) -> None:
        self._records: list[str] = []

    @property
    def records(self) -> tuple[str, ...]:
        return tuple(self._records)

    def save(self, data: str) -> None:
        logger.debug("MySQL save: %s", data)
        self._records.append(data)


class MongoDatabase:
    """In-memory stand-in for a MongoDB collection."""

    def __init__(self, collection: str = "orders") -> None:
        self.collection = collection
        self._documents: list[dict[str, str]] = []

    @property
    def documents(self) -> tuple[dict[str, str], ...]:
        return tuple(self._documents)

    def save(self, data: str) -> None:
        logger.debug("MongoDB insert into %s: %s", self.collection, data)
        self._documents.append({"data": data})


class OrderService:
    def __init__(self, database: Database) -> None:
        self._database = database

    def process_order(self, order_id: str) -> None:
        self._database.save(f"Pedido {order_id} procesado")


__all__ = ["Database", "MongoDatabase", "MySQLDatabase", "OrderService"]
