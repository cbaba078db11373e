"""
Configuration defaults for the ATM system.

Values can be overridden from the command line or the environment.
"""

from dataclasses import dataclass

from .bank import DEFAULT_BANK_NAME


DEFAULT_INPUT_FILE = "accounts_list.txt"
DEFAULT_OUTPUT_FILE = "output_list.txt"
DEFAULT_LOG_LEVEL = "WARNING"

INPUT_FILE_ENV = "ATM_ACCOUNTS_FILE"
OUTPUT_FILE_ENV = "ATM_OUTPUT_FILE"


@dataclass(frozen=True)
class ATMConfig:
    """Settings for one ATM run."""

    input_path: str = DEFAULT_INPUT_FILE
    output_path: str = DEFAULT_OUTPUT_FILE
    bank_name: str = DEFAULT_BANK_NAME
    allow_negative_amounts: bool = False
    log_level: str = DEFAULT_LOG_LEVEL
