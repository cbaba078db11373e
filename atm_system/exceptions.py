"""Custom exceptions for the ATM system."""


class ATMError(ValueError):
    """Base exception for all ATM-related errors."""
    pass


class ParseError(ATMError):
    """Raised when text cannot be parsed as an amount of money."""
    pass


class RecordFormatError(ParseError):
    """Raised when a line of the accounts file is malformed."""

    def __init__(self, message: str, source: str = "", line_number: int = 0):
        self.source = source
        self.line_number = line_number
        if source and line_number:
            message = f"{source}:{line_number}: {message}"
        elif source:
            message = f"{source}: {message}"
        super().__init__(message)


class InvalidAmount(ATMError):
    """Raised when an amount is out of range (e.g., cents >= 100 or a negative deposit)."""
    pass


class AccountNotFound(ATMError):
    """Raised when no account matches an identifier."""

    def __init__(self, account_id: str):
        self.account_id = account_id
        super().__init__(f"Account NOT FOUND for ID: {account_id}")


class DuplicateAccount(ATMError):
    """Raised when an identifier is added to the bank twice."""

    def __init__(self, account_id: str):
        self.account_id = account_id
        super().__init__(f"Duplicate account ID: {account_id}")


class InsufficientFunds(ATMError):
    """Raised when a withdrawal exceeds what the account allows."""

    def __init__(self, account_id: str):
        self.account_id = account_id
        super().__init__(f"Insufficient funds in account ({account_id}).")


class InvalidTransactionCode(ATMError):
    """Raised for a transaction type other than 1-4."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Invalid transaction type: {code}")


class SessionStateError(ATMError):
    """Raised when a session operation is used in the wrong state."""
    pass
