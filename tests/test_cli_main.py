"""
Test for CLI main execution.

This module checks the package entry points: the main() function and
running the CLI module as a script.
"""

import sys
import subprocess

import atm_system
import atm_system.cli


class TestCLIMainExecution:
    """Test CLI main execution block."""

    def test_main_is_exported(self):
        """Test main() is available from the package."""
        assert callable(atm_system.cli.main)
        assert atm_system.main is atm_system.cli.main

    def test_cli_module_as_script(self):
        """Test running CLI module as a script using subprocess."""
        result = subprocess.run(
            [sys.executable, '-m', 'atm_system.cli', '--help'],
            capture_output=True,
            text=True,
            timeout=30,
        )

        assert result.returncode == 0
        assert "ATM Account System CLI" in result.stdout


class TestLoadSession:
    """Test the load_session factory."""

    def test_load_session(self, tmp_path):
        """Test load_session reads and sorts the accounts file."""
        path = tmp_path / "accounts_list.txt"
        path.write_text("savings,B,Bob,1.00\nsavings,A,Ann,2.00\n", encoding="utf-8")

        session = atm_system.load_session(str(path), bank_name="Test Bank")

        assert session.bank.name == "Test Bank"
        assert [account.account_id for account in session.bank] == ["A", "B"]
        assert session.state is atm_system.SessionState.AWAITING_IDENTIFIER
        assert session.allow_negative_amounts is False
