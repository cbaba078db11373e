"""
ATM Account System

A single-user ATM simulation over a flat-file list of bank accounts.
Supports balance inquiries, deposits and withdrawals with overdraft rules.
"""

__version__ = "0.1.0"
__author__ = "Developer"
__email__ = "dev@example.com"

from .money import Money, Ordering
from .models import Account, AccountType
from .bank import Bank, DEFAULT_BANK_NAME
from .session import ATMSession, SessionState, TransactionCode
from .storage import read_accounts, write_accounts
from .config import ATMConfig
from .exceptions import (
    ATMError,
    ParseError,
    RecordFormatError,
    InvalidAmount,
    AccountNotFound,
    DuplicateAccount,
    InsufficientFunds,
    InvalidTransactionCode,
    SessionStateError,
)
from .cli import main


def load_session(input_path: str, bank_name: str = DEFAULT_BANK_NAME,
                 allow_negative_amounts: bool = False) -> ATMSession:
    """
    Create an ATMSession over the accounts in a file.

    Args:
        input_path: Path to the accounts file
        bank_name: Name given to the loaded bank
        allow_negative_amounts: Accept negative deposit and withdrawal amounts

    Returns:
        ATMSession instance with the bank sorted by account ID
    """
    bank = read_accounts(input_path, bank_name)
    bank.sort_accounts()
    return ATMSession(bank, allow_negative_amounts)


__all__ = [
    "Money",
    "Ordering",
    "Account",
    "AccountType",
    "Bank",
    "ATMSession",
    "SessionState",
    "TransactionCode",
    "ATMConfig",
    "read_accounts",
    "write_accounts",
    "load_session",
    "ATMError",
    "ParseError",
    "RecordFormatError",
    "InvalidAmount",
    "AccountNotFound",
    "DuplicateAccount",
    "InsufficientFunds",
    "InvalidTransactionCode",
    "SessionStateError",
    "main",
]
