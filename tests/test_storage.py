"""
Tests for the storage module.

This module contains tests for reading the accounts file and writing
the sorted output file.
"""

import pytest
import tempfile
import os

from atm_system.storage import read_accounts, write_accounts
from atm_system.models import AccountType
from atm_system.money import Money
from atm_system.exceptions import RecordFormatError


ACCOUNTS_TEXT = (
    "# type,id,owner,balance[,overdraft]\n"
    "savings,S2,Aigerim Bekova,1250.00\n"
    "\n"
    "checking,C1,\"Smith, Jane\",50.00,20.00\n"
    "savings,S1,Daniyar Omarov,-0.00\n"
)


class TestStorage:
    """Test accounts file reading and writing."""

    @pytest.fixture
    def temp_file_path(self):
        """Create a temporary accounts file path."""
        fd, path = tempfile.mkstemp(suffix='.txt')
        os.close(fd)
        yield path
        if os.path.exists(path):
            os.unlink(path)

    def write_text(self, path, text):
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)

    def read_text(self, path):
        with open(path, encoding='utf-8') as f:
            return f.read()

    def test_read_accounts(self, temp_file_path):
        """Test loading accounts skips comments and blank lines."""
        self.write_text(temp_file_path, ACCOUNTS_TEXT)

        bank = read_accounts(temp_file_path, "Test Bank")

        assert bank.name == "Test Bank"
        assert [account.account_id for account in bank] == ["S2", "C1", "S1"]

        checking = bank.search("C1")
        assert checking.account_type == AccountType.CHECKING
        assert checking.owner_name == "Smith, Jane"
        assert checking.balance == Money(50, 0)
        assert checking.overdraft_maximum == Money(20, 0)
        assert bank.search("S1").balance == Money.zero()

    def test_read_missing_file(self):
        """Test missing accounts file raises an OS error."""
        with pytest.raises(FileNotFoundError):
            read_accounts(os.path.join(tempfile.gettempdir(), "no_such_accounts_file.txt"))

    def test_read_malformed_line(self, temp_file_path):
        """Test malformed line reports file and line number."""
        self.write_text(temp_file_path, "savings,S1,Daniyar,1.00\nsavings,S2,Aigerim,1.5\n")

        with pytest.raises(RecordFormatError) as exc_info:
            read_accounts(temp_file_path)

        assert exc_info.value.line_number == 2
        assert f"{temp_file_path}:2:" in str(exc_info.value)

    def test_read_duplicate_id(self, temp_file_path):
        """Test duplicate identifiers fail the load."""
        self.write_text(temp_file_path, "savings,S1,Daniyar,1.00\nsavings,S1,Aigerim,2.00\n")

        with pytest.raises(RecordFormatError, match="Duplicate account ID: S1"):
            read_accounts(temp_file_path)

    def test_read_undecodable_file(self, temp_file_path):
        """Test non UTF-8 bytes are reported as a format error."""
        with open(temp_file_path, 'wb') as f:
            f.write(b"savings,A1,J\xff,1.00\n")

        with pytest.raises(RecordFormatError, match="not valid UTF-8") as exc_info:
            read_accounts(temp_file_path)

        assert exc_info.value.source == temp_file_path
        assert str(exc_info.value).startswith(f"{temp_file_path}: ")

    def test_read_empty_file(self, temp_file_path):
        """Test empty file gives an empty bank."""
        bank = read_accounts(temp_file_path)
        assert len(bank) == 0

    def test_write_accounts_sorted(self, temp_file_path):
        """Test writing sorts accounts by identifier."""
        self.write_text(temp_file_path, ACCOUNTS_TEXT)
        bank = read_accounts(temp_file_path)

        write_accounts(temp_file_path, bank)

        assert self.read_text(temp_file_path) == (
            'checking,C1,"Smith, Jane",50.00,20.00\n'
            "savings,S1,Daniyar Omarov,0.00\n"
            "savings,S2,Aigerim Bekova,1250.00\n"
        )

    def test_written_file_reloads(self, temp_file_path):
        """Test the output file can be read back as input."""
        self.write_text(temp_file_path, ACCOUNTS_TEXT)
        bank = read_accounts(temp_file_path)
        bank.search("C1").withdraw(Money(60, 0))

        write_accounts(temp_file_path, bank)
        reloaded = read_accounts(temp_file_path)

        assert reloaded.search("C1").balance == Money(-10, 0)
        assert str(reloaded) == str(bank)
