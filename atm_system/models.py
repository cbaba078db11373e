"""
Data models for the ATM system.

This module contains the account model and its withdrawal policies.
"""

import csv
import io
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence

from .exceptions import InsufficientFunds, InvalidAmount, RecordFormatError, ParseError
from .money import Money


class AccountType(Enum):
    """Types of bank accounts."""
    SAVINGS = "savings"
    CHECKING = "checking"


@dataclass
class Account:
    """Represents a bank account.

    Savings accounts may only withdraw up to their balance. Checking
    accounts may go negative down to ``-overdraft_maximum``.
    """

    account_id: str = ""
    owner_name: str = ""
    balance: Money = field(default_factory=Money.zero)
    account_type: AccountType = AccountType.SAVINGS
    overdraft_maximum: Money = field(default_factory=Money.zero)

    def __post_init__(self):
        """Validate account after creation."""
        if not isinstance(self.balance, Money):
            self.balance = Money.parse(str(self.balance))

        if not isinstance(self.overdraft_maximum, Money):
            self.overdraft_maximum = Money.parse(str(self.overdraft_maximum))

        if self.overdraft_maximum.is_negative():
            raise InvalidAmount("Overdraft maximum cannot be negative")

        if self.account_type is AccountType.SAVINGS and self.overdraft_maximum != Money.zero():
            raise InvalidAmount("Savings accounts do not allow overdraft")

    def available_funds(self) -> Money:
        """Largest amount a single withdrawal may take."""
        if self.account_type is AccountType.CHECKING:
            return self.balance + self.overdraft_maximum
        return self.balance

    def can_withdraw(self, amount: Money) -> bool:
        """Check if withdrawal is allowed by the account's policy."""
        return amount <= self.available_funds()

    def deposit(self, amount: Money) -> Money:
        """Deposit money to account and return the new balance."""
        self.balance = self.balance + amount
        return self.balance

    def withdraw(self, amount: Money) -> Money:
        """Withdraw money from account and return the new balance."""
        if not self.can_withdraw(amount):
            raise InsufficientFunds(self.account_id)

        self.balance = self.balance - amount
        return self.balance

    def to_record(self) -> List[str]:
        """Fields of the account line."""
        record = [self.account_type.value, self.account_id, self.owner_name, str(self.balance)]
        if self.account_type is AccountType.CHECKING:
            record.append(str(self.overdraft_maximum))
        return record

    def to_line(self) -> str:
        """Canonical account line, without the line terminator."""
        buffer = io.StringIO()
        csv.writer(buffer, lineterminator="").writerow(self.to_record())
        return buffer.getvalue()

    @classmethod
    def from_record(cls, fields: Sequence[str]) -> "Account":
        """Build an account from the fields of one account line."""
        fields = [value.strip() for value in fields]
        if not fields:
            raise RecordFormatError("Empty account record")

        try:
            account_type = AccountType(fields[0].lower())
        except ValueError:
            raise RecordFormatError(f"Unknown account type: {fields[0]!r}")

        expected = 5 if account_type is AccountType.CHECKING else 4
        if len(fields) != expected:
            raise RecordFormatError(
                f"A {account_type.value} record needs {expected} fields, got {len(fields)}"
            )

        if not fields[1]:
            raise RecordFormatError("Account ID cannot be empty")

        try:
            balance = Money.parse(fields[3])
            overdraft = Money.parse(fields[4]) if expected == 5 else Money.zero()
            return cls(
                account_id=fields[1],
                owner_name=fields[2],
                balance=balance,
                account_type=account_type,
                overdraft_maximum=overdraft,
            )
        except (ParseError, InvalidAmount) as e:
            raise RecordFormatError(str(e))

    def __str__(self) -> str:
        return self.to_line()
