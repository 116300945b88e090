"""Single Responsibility - corrected.

One reason to change per class: :class:`User` holds data,
:class:`UserValidator` checks it, :class:`EmailService` talks to mail and
:class:`UserFileManager` talks to storage. Neither service performs real I/O;
each returns a description of what it would do.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

DEFAULT_USERS_FILE = "users.txt"


class UserValidator:
    @staticmethod
    def is_valid_email(email: str) -> bool:
        local, sep, domain = email.partition("@")
        return bool(sep and local and domain)


class User(BaseModel):
    name: str = Field(min_length=1)
    email: str

    model_config = ConfigDict(frozen=True)

    @field_validator("email")
    @classmethod
    def _check_email(cls, v: str) -> str:
        if not UserValidator.is_valid_email(v):
            raise ValueError(f"Invalid email address: {v!r}")
        return v


class EmailService:
    def send_welcome_email(self, user: User) -> str:
        message = f"Enviando email de bienvenida a {user.email}"
        logger.info(message)
        return message


class UserFileManager:
    def __init__(self, filename: str = DEFAULT_USERS_FILE) -> None:
        self.filename = filename

    def save_to_file(self, user: User) -> str:
        message = f"Guardando usuario {user.name} en archivo {self.filename}"
        logger.info(message)
        return message


__all__ = ["EmailService", "User", "UserFileManager", "UserValidator"]
