"""
Account store for the ATM system.

A Bank is an ordered collection of accounts keyed by identifier.
"""

import logging
from typing import Iterator, List, Optional

from .exceptions import AccountNotFound, DuplicateAccount
from .models import Account


logger = logging.getLogger(__name__)

DEFAULT_BANK_NAME = "Bank of Kazakhstan"


class Bank:
    """Holds the accounts of one ATM session."""

    def __init__(self, name: str = DEFAULT_BANK_NAME):
        """Initialize an empty bank."""
        self.name = name
        self._accounts: List[Account] = []

    @property
    def accounts(self) -> List[Account]:
        """Accounts in their current order."""
        return list(self._accounts)

    def add_account(self, account: Account) -> None:
        """Append an account; identifiers must be unique."""
        if self.search(account.account_id) is not None:
            raise DuplicateAccount(account.account_id)
        self._accounts.append(account)

    def search(self, account_id: str) -> Optional[Account]:
        """Find an account by exact identifier."""
        for account in self._accounts:
            if account.account_id == account_id:
                return account
        return None

    def get_account(self, account_id: str) -> Account:
        """Find an account by identifier or raise AccountNotFound."""
        account = self.search(account_id)
        if account is None:
            raise AccountNotFound(account_id)
        return account

    def sort_accounts(self) -> None:
        """Order accounts by identifier, ascending."""
        self._accounts.sort(key=lambda account: account.account_id)
        logger.debug("Sorted %d accounts in %s", len(self._accounts), self.name)

    def __len__(self) -> int:
        return len(self._accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(self._accounts)

    def __contains__(self, account_id: object) -> bool:
        return isinstance(account_id, str) and self.search(account_id) is not None

    def __str__(self) -> str:
        return "".join(f"{account.to_line()}\n" for account in self._accounts)
