"""
Flat-file storage for the ATM system.

This module reads the accounts list at startup and writes the sorted
list back out when the session ends.
"""

import csv
import logging
from pathlib import Path
from typing import Union

from .bank import Bank, DEFAULT_BANK_NAME
from .exceptions import DuplicateAccount, RecordFormatError
from .models import Account


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_accounts(path: PathLike, bank_name: str = DEFAULT_BANK_NAME) -> Bank:
    """Load a bank from an accounts file, one account per line."""
    bank = Bank(bank_name)
    source = str(path)

    with open(path, newline="", encoding="utf-8") as accounts_file:
        try:
            for line_number, fields in enumerate(csv.reader(accounts_file), start=1):
                if not fields or not "".join(fields).strip():
                    continue
                if fields[0].lstrip().startswith("#"):
                    continue

                try:
                    account = Account.from_record(fields)
                    bank.add_account(account)
                except (RecordFormatError, DuplicateAccount) as e:
                    raise RecordFormatError(str(e), source, line_number)
        except UnicodeDecodeError as e:
            # Decoding happens in buffered chunks, so no line number is reliable.
            raise RecordFormatError(f"File is not valid UTF-8 text: {e}", source)

    logger.info("Loaded %d accounts from %s", len(bank), source)
    return bank


def write_accounts(path: PathLike, bank: Bank) -> None:
    """Sort the bank and write it to an accounts file."""
    bank.sort_accounts()

    with open(path, "w", newline="", encoding="utf-8") as output_file:
        output_file.write(str(bank))

    logger.info("Wrote %d accounts to %s", len(bank), path)
