"""Domain Layer - Shared Types and the Kata Catalog.

Key Components:
    - domain_type: StrEnums shared by the "good" katas (statuses, channels, formats)
    - KataCatalog: Index of every bad/good pair, loaded from kata_metadata.json
"""

from .catalog import DEFAULT_METADATA_PATH, KataCatalog, KataEntry
from .domain_type import (
    AudioFormat,
    CustomerType,
    KataTopic,
    KataVariant,
    NotificationChannel,
    PaymentMethod,
    TransactionKind,
    UserStatus,
)

__all__ = [
    "DEFAULT_METADATA_PATH",
    "AudioFormat",
    "CustomerType",
    "KataCatalog",
    "KataEntry",
    "KataTopic",
    "KataVariant",
    "NotificationChannel",
    "PaymentMethod",
    "TransactionKind",
    "UserStatus",
]
