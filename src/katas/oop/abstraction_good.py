"""Abstraction - corrected.

Callers see one operation, ``send_email``. Server address, credentials and the
connect/authenticate/disconnect sequence stay inside the class.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class EmailSender:
    def __init__(self, username: str, password: str) -> None:
        self._username = username
        self._password = password
        self._smtp_server = "smtp.gmail.com"
        self._smtp_port = 587
        self._connected = False
        self._sent_count = 0

    @property
    def sent_count(self) -> int:
        return self._sent_count

    def send_email(self, to: str, subject: str, body: str) -> bool:
        """Deliver one message, handling the connection lifecycle internally.

        Returns:
            False when the recipient address is not valid or the credentials
            are rejected, True once sent
        """
        if not self._is_valid_address(to):
            logger.debug("Rejected recipient %r", to)
            return False

        if not self._connect():
            return False
        try:
            self._deliver(to, subject, body)
        finally:
            self._disconnect()
        return True

    def _is_valid_address(self, address: str) -> bool:
        return "@" in address

    def _connect(self) -> bool:
        self._connected = self._authenticate()
        if self._connected:
            logger.debug("Connected to %s:%s", self._smtp_server, self._smtp_port)
        return self._connected

    def _authenticate(self) -> bool:
        if not (self._username and self._password):
            logger.warning("Authentication failed for %r", self._username)
            return False
        logger.debug("Authenticated as %s", self._username)
        return True

    def _deliver(self, to: str, subject: str, body: str) -> None:
        if not self._connected:
            raise RuntimeError("Cannot deliver without an open connection")
        self._sent_count += 1
        logger.info("Email sent to %s: %s (%d chars)", to, subject, len(body))

    def _disconnect(self) -> None:
        self._connected = False


__all__ = ["EmailSender"]
