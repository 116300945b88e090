"""Factory - corrected.

Construction is centralized in :class:`NotificationFactory`, which maps a
channel name to a :class:`Notification` subclass. Callers only know the
abstract ``send`` operation. New channels are added with ``register``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar

from ..domain.domain_type import NotificationChannel

logger = logging.getLogger(__name__)


class Notification(ABC):
    @abstractmethod
    def send(self, message: str) -> str: ...


class EmailNotification(Notification):
    def send(self, message: str) -> str:
        return f"EMAIL: {message}"


class SMSNotification(Notification):
    def send(self, message: str) -> str:
        return f"SMS: {message}"


class PushNotification(Notification):
    def send(self, message: str) -> str:
        return f"PUSH: {message}"


class NotificationFactory:
    """Builds notifications from a channel name.

    Lookup ignores case and surrounding whitespace. Unknown channels raise
    ``ValueError`` carrying the name exactly as the caller passed it.
    """

    _registry: ClassVar[dict[str, type[Notification]]] = {
        NotificationChannel.EMAIL: EmailNotification,
        NotificationChannel.SMS: SMSNotification,
        NotificationChannel.PUSH: PushNotification,
    }

    @classmethod
    def create(cls, kind: str) -> Notification:
        notification_cls = cls._registry.get(kind.strip().lower())
        if notification_cls is None:
            raise ValueError(f"Tipo de notificación desconocido: {kind}")
        return notification_cls()

    @classmethod
    def register(cls, kind: str, notification_cls: type[Notification]) -> None:
        key = kind.strip().lower()
        if not key:
            raise ValueError("Notification kind cannot be empty")
        # rebind instead of mutating: a subclass registry must not alter its parent
        cls._registry = {**cls._registry, key: notification_cls}
        logger.debug("Registered notification kind %r -> %s", key, notification_cls.__name__)

    @classmethod
    def kinds(cls) -> tuple[str, ...]:
        return tuple(str(kind) for kind in cls._registry)


class NotificationService:
    def __init__(self, factory: type[NotificationFactory] = NotificationFactory) -> None:
        self._factory = factory

    def send_notification(self, kind: str, message: str) -> str:
        return self._factory.create(kind).send(message)


__all__ = [
    "EmailNotification",
    "Notification",
    "NotificationFactory",
    "NotificationService",
    "PushNotification",
    "SMSNotification",
]
