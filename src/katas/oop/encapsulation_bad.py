"""Encapsulation - anti-pattern.

Every field is public and writable, and nothing is validated: the balance can
go negative, the account number can be swapped and history can be erased.
"""


class BankAccount:
    def __init__(self, account_number, balance):
        self.account_number = account_number
        self.balance = balance
        self.transaction_history = []

    def deposit(self, amount):
        self.balance += amount
        self.transaction_history.append(("deposit", amount))

    def withdraw(self, amount):
        self.balance -= amount
        self.transaction_history.append(("withdrawal", amount))
