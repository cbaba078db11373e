"""
CLI interface for the ATM system.

This module provides the interactive command-line driver: it loads the
accounts file, lets the user pick an account and run transactions on it,
then writes the sorted accounts to the output file.
"""

import logging

import click

from .bank import DEFAULT_BANK_NAME
from .config import (
    ATMConfig,
    DEFAULT_INPUT_FILE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OUTPUT_FILE,
    INPUT_FILE_ENV,
    OUTPUT_FILE_ENV,
)
from .exceptions import (
    AccountNotFound,
    InsufficientFunds,
    InvalidAmount,
    InvalidTransactionCode,
    ParseError,
    RecordFormatError,
)
from .money import Money
from .session import ATMSession, SessionState, TransactionCode
from .storage import read_accounts, write_accounts


ID_PROMPT = "Please enter your ID or 'quit': "
TRANSACTION_PROMPT = (
    "Please enter a transaction type "
    "(check balance (1) / deposit (2) / withdraw (3) / quit (4)): "
)
AMOUNT_PROMPT = "Please enter the amount (in the format x.xx): "
INVALID_AMOUNT_MESSAGE = "Invalid input. Please try again."
GOODBYE_MESSAGE = "Thank you for using our ATM. Goodbye!"


class ATMCLI:
    """CLI wrapper for ATM session operations."""

    def __init__(self, config: ATMConfig):
        """Initialize CLI by loading the accounts file."""
        self.config = config
        self.bank = read_accounts(config.input_path, config.bank_name)
        self.bank.sort_accounts()
        self.session = ATMSession(self.bank, config.allow_negative_amounts)

    def read_amount(self) -> Money:
        """Prompt until the user enters a valid amount."""
        while True:
            text = click.prompt(AMOUNT_PROMPT, default="", show_default=False,
                                prompt_suffix="")
            try:
                return self.session.validate_amount(Money.parse(text))
            except (ParseError, InvalidAmount):
                click.echo(INVALID_AMOUNT_MESSAGE)

    def select_account(self) -> bool:
        """Identifier loop; returns False if the user quit."""
        while self.session.state is SessionState.AWAITING_IDENTIFIER:
            identifier = click.prompt(ID_PROMPT, default="", show_default=False,
                                      prompt_suffix="")
            try:
                account = self.session.select_account(identifier)
            except AccountNotFound as e:
                click.echo(str(e))
                continue

            if account is None:
                click.echo(GOODBYE_MESSAGE)
                return False

            click.echo(f"Account FOUND for ID: {account.account_id}")
            click.echo(str(account))

        self.session.begin_transactions()
        return True

    def run_transactions(self) -> None:
        """Transaction loop for the selected account."""
        account = self.session.account

        while self.session.state is SessionState.AWAITING_TRANSACTION:
            text = click.prompt(TRANSACTION_PROMPT, default="", show_default=False,
                                prompt_suffix="")
            try:
                code = self.session.parse_transaction_code(text)
            except InvalidTransactionCode as e:
                click.echo(str(e))
                continue

            if code is TransactionCode.CHECK_BALANCE:
                self.session.check_balance()
                click.echo(f"{account}\n")

            elif code is TransactionCode.DEPOSIT:
                new_balance = self.session.deposit(self.read_amount())
                click.echo(
                    f"Deposit successful. New balance for account "
                    f"({account.account_id}): {new_balance}\n"
                )

            elif code is TransactionCode.WITHDRAW:
                try:
                    new_balance = self.session.withdraw(self.read_amount())
                except InsufficientFunds as e:
                    click.echo(f"Withdrawal failed. {e}\n")
                    continue
                click.echo(
                    f"Withdrawal successful. New balance for account "
                    f"({account.account_id}): {new_balance}\n"
                )

            elif code is TransactionCode.QUIT:
                click.echo(GOODBYE_MESSAGE)
                self.session.quit()

    def save(self) -> None:
        """Write the sorted accounts to the output file."""
        write_accounts(self.config.output_path, self.bank)


@click.command()
@click.option('--input', '-i', 'input_path', default=DEFAULT_INPUT_FILE,
              envvar=INPUT_FILE_ENV, show_default=True,
              help='Accounts file to load')
@click.option('--output', '-o', 'output_path', default=DEFAULT_OUTPUT_FILE,
              envvar=OUTPUT_FILE_ENV, show_default=True,
              help='File the sorted accounts are written to')
@click.option('--bank-name', default=DEFAULT_BANK_NAME, help='Name of the bank')
@click.option('--allow-negative-amounts', is_flag=True, default=False,
              help='Accept negative deposit and withdrawal amounts')
@click.option('--log-level', default=DEFAULT_LOG_LEVEL, show_default=True,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level')
@click.pass_context
def cli(ctx, input_path, output_path, bank_name, allow_negative_amounts, log_level):
    """ATM Account System CLI"""
    config = ATMConfig(
        input_path=input_path,
        output_path=output_path,
        bank_name=bank_name,
        allow_negative_amounts=allow_negative_amounts,
        log_level=log_level.upper(),
    )
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        atm = ATMCLI(config)
    except (OSError, RecordFormatError) as e:
        click.echo(f"❌ Error: {e}", err=True)
        ctx.exit(1)

    click.echo(f"🏦 {atm.bank.name}")
    click.echo(str(atm.bank))

    if not atm.select_account():
        ctx.exit(0)

    atm.run_transactions()
    if not atm.session.persist_on_exit:
        return

    try:
        atm.save()
    except OSError as e:
        click.echo(f"❌ Error: {e}", err=True)
        ctx.exit(1)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
