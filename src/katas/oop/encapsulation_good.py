"""Encapsulation - corrected.

State is private and exposed through read-only properties. The only way to
change the balance is ``deposit``/``withdraw``, which validate the amount and
record an immutable :class:`Transaction`.

Invariant:
    ``balance`` never drops below zero.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from ..domain.domain_type import TransactionKind

logger = logging.getLogger(__name__)


class Transaction(BaseModel):
    kind: TransactionKind
    amount: float = Field(gt=0)
    balance_after: float = Field(ge=0)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))

    model_config = ConfigDict(frozen=True)


class BankAccount:
    def __init__(self, account_number: str, initial_balance: float = 0) -> None:
        if not account_number.strip():
            raise ValueError("Account number is required")
        if initial_balance < 0:
            raise ValueError(f"Initial balance cannot be negative: {initial_balance}")

        self._account_number = account_number
        self._balance = float(initial_balance)
        self._transactions: list[Transaction] = []

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def balance(self) -> float:
        return self._balance

    @property
    def transaction_history(self) -> tuple[Transaction, ...]:
        """Snapshot of the history; mutating it does not affect the account."""
        return tuple(self._transactions)

    def deposit(self, amount: float) -> bool:
        if amount <= 0:
            return False
        self._apply(TransactionKind.DEPOSIT, amount, self._balance + amount)
        return True

    def withdraw(self, amount: float) -> bool:
        if amount <= 0:
            return False
        if amount > self._balance:
            logger.info("Withdrawal of %s rejected on %s: insufficient funds", amount, self._account_number)
            return False
        self._apply(TransactionKind.WITHDRAWAL, amount, self._balance - amount)
        return True

    def _apply(self, kind: TransactionKind, amount: float, new_balance: float) -> None:
        self._transactions.append(Transaction(kind=kind, amount=amount, balance_after=new_balance))
        self._balance = new_balance


__all__ = ["BankAccount", "Transaction"]
