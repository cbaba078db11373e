"""
Transaction engine for the ATM system.

This module contains the session state machine: selecting one account
by identifier, then running balance, deposit and withdraw transactions
against it until the user quits.
"""

import logging
from enum import Enum
from typing import Optional

from .bank import Bank
from .exceptions import (
    AccountNotFound,
    InsufficientFunds,
    InvalidAmount,
    InvalidTransactionCode,
    SessionStateError,
)
from .models import Account
from .money import Money


logger = logging.getLogger(__name__)

QUIT_COMMAND = "quit"


class SessionState(Enum):
    """States of an ATM session."""
    AWAITING_IDENTIFIER = "awaiting_identifier"
    ACCOUNT_SELECTED = "account_selected"
    AWAITING_TRANSACTION = "awaiting_transaction"
    TERMINAL = "terminal"


class TransactionCode(Enum):
    """Transaction types offered at the prompt."""
    CHECK_BALANCE = "1"
    DEPOSIT = "2"
    WITHDRAW = "3"
    QUIT = "4"


class ATMSession:
    """Runs transactions for a single selected account."""

    def __init__(self, bank: Bank, allow_negative_amounts: bool = False):
        """Initialize session over a loaded bank."""
        self.bank = bank
        self.allow_negative_amounts = allow_negative_amounts
        self.state = SessionState.AWAITING_IDENTIFIER
        self.account: Optional[Account] = None
        self.persist_on_exit = False

    def _require_state(self, *states: SessionState) -> None:
        if self.state not in states:
            expected = ", ".join(state.value for state in states)
            raise SessionStateError(
                f"Operation not allowed in state {self.state.value} (expected {expected})"
            )

    def _require_account(self) -> Account:
        self._require_state(SessionState.AWAITING_TRANSACTION)
        return self.account

    def select_account(self, identifier: str) -> Optional[Account]:
        """Select the account to work with.

        Returns None when the user asked to quit. Raises AccountNotFound
        and stays in AWAITING_IDENTIFIER for an unknown identifier.
        """
        self._require_state(SessionState.AWAITING_IDENTIFIER)

        if identifier.lower() == QUIT_COMMAND:
            self.state = SessionState.TERMINAL
            logger.info("Session ended at identifier prompt")
            return None

        account = self.bank.search(identifier)
        if account is None:
            logger.info("No account for ID %s", identifier)
            raise AccountNotFound(identifier)

        self.account = account
        self.state = SessionState.ACCOUNT_SELECTED
        logger.info("Selected account %s", account.account_id)
        return account

    def begin_transactions(self) -> None:
        """Move from the selected account to the transaction prompt."""
        self._require_state(SessionState.ACCOUNT_SELECTED)
        self.state = SessionState.AWAITING_TRANSACTION

    def parse_transaction_code(self, text: str) -> TransactionCode:
        """Map user input to a transaction code, case-insensitively."""
        code = text.lower()
        try:
            return TransactionCode(code)
        except ValueError:
            raise InvalidTransactionCode(code)

    def validate_amount(self, amount: Money) -> Money:
        """Reject negative amounts unless they are allowed."""
        if amount.is_negative() and not self.allow_negative_amounts:
            raise InvalidAmount(f"Amount cannot be negative: {amount}")
        return amount

    def check_balance(self) -> Money:
        """Current balance of the selected account."""
        return self._require_account().balance

    def deposit(self, amount: Money) -> Money:
        """Deposit to the selected account and return the new balance."""
        account = self._require_account()
        self.validate_amount(amount)

        new_balance = account.deposit(amount)
        logger.info("Deposited %s to %s, balance %s", amount, account.account_id, new_balance)
        return new_balance

    def withdraw(self, amount: Money) -> Money:
        """Withdraw from the selected account and return the new balance."""
        account = self._require_account()
        self.validate_amount(amount)

        try:
            new_balance = account.withdraw(amount)
        except InsufficientFunds:
            logger.warning(
                "Refused withdrawal of %s from %s, available %s",
                amount, account.account_id, account.available_funds()
            )
            raise

        logger.info("Withdrew %s from %s, balance %s", amount, account.account_id, new_balance)
        return new_balance

    def quit(self) -> None:
        """End the transaction loop; the bank should then be saved."""
        self._require_state(SessionState.AWAITING_TRANSACTION)
        self.state = SessionState.TERMINAL
        self.persist_on_exit = True
        logger.info("Session ended for %s", self.account.account_id)
