"""Domain Type System - Core Enumerations.

Defines type-safe constants using Python's StrEnum for the concepts shared by
the "good" katas. Using StrEnum instead of plain Enum means callers can pass
the raw string ("VIP", "paypal", "email") and still compare equal.
"""

from __future__ import annotations

from enum import StrEnum


class UserStatus(StrEnum):
    """Account status codes as stored on a user record."""

    ACTIVE = "ACT"
    INACTIVE = "INA"


class CustomerType(StrEnum):
    """Customer segments used for discount calculation."""

    VIP = "VIP"
    REGULAR = "REG"


class PaymentMethod(StrEnum):
    """Payment methods an order processor accepts.

    Note:
        Anything outside this set is rejected by the processors rather than
        raising, so ``PaymentMethod.parse`` returns None for unknown values.
    """

    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"
    PAYPAL = "paypal"

    @classmethod
    def parse(cls, value: str) -> PaymentMethod | None:
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class NotificationChannel(StrEnum):
    """Notification variants the factory knows how to build."""

    EMAIL = "email"
    SMS = "sms"
    PUSH = "push"


class AudioFormat(StrEnum):
    """File extensions the media player can route to an adapter."""

    MP3 = "mp3"
    WAV = "wav"


class TransactionKind(StrEnum):
    """Entries recorded in a bank account's history."""

    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"


class KataTopic(StrEnum):
    """Top-level grouping of the katas (one subpackage each)."""

    CLEAN_CODE = "clean_code"
    OOP = "oop"
    SOLID = "solid"
    PATTERNS = "patterns"


class KataVariant(StrEnum):
    """Which half of a kata pair to look at."""

    BAD = "bad"
    GOOD = "good"


__all__ = [
    "AudioFormat",
    "CustomerType",
    "KataTopic",
    "KataVariant",
    "NotificationChannel",
    "PaymentMethod",
    "TransactionKind",
    "UserStatus",
]
