"""
Money value type for the ATM system.

Amounts are held as whole units plus cents and all arithmetic is done on
an integer count of cents, so no floating point is ever involved.
"""

import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from .exceptions import InvalidAmount, ParseError


CENTS_PER_UNIT = 100

# Canonical "D.CC" form with an optional sign.
_MONEY_PATTERN = re.compile(r"^([+-]?)(\d+)\.(\d{2})$")


class Ordering(Enum):
    """Result of a three-way comparison."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True)
class Money:
    """An exact amount of money.

    Negative amounts keep ``cents`` in [0, 100) and carry the sign in
    ``units``, so -0.50 is ``Money(-1, 50)``.
    """

    units: int = 0
    cents: int = 0

    def __post_init__(self):
        """Validate the fields."""
        if isinstance(self.units, bool) or not isinstance(self.units, int):
            raise InvalidAmount(f"Whole units must be an integer: {self.units!r}")
        if isinstance(self.cents, bool) or not isinstance(self.cents, int):
            raise InvalidAmount(f"Cents must be an integer: {self.cents!r}")
        if not 0 <= self.cents < CENTS_PER_UNIT:
            raise InvalidAmount(f"Cents must be between 0 and 99: {self.cents}")

    @classmethod
    def from_minor_units(cls, minor_units: int) -> "Money":
        """Build a normalized amount from a count of cents."""
        units, cents = divmod(minor_units, CENTS_PER_UNIT)
        return cls(units, cents)

    @classmethod
    def zero(cls) -> "Money":
        return cls(0, 0)

    @classmethod
    def parse(cls, text: str) -> "Money":
        """Parse the canonical "D.CC" form, e.g. ``"12.50"`` or ``"-3.05"``."""
        match = _MONEY_PATTERN.match(text.strip()) if isinstance(text, str) else None
        if not match:
            raise ParseError(f"Invalid amount: {text!r} (expected format x.xx)")

        sign, whole, fraction = match.groups()
        minor_units = int(whole) * CENTS_PER_UNIT + int(fraction)
        if sign == "-":
            minor_units = -minor_units
        return cls.from_minor_units(minor_units)

    @property
    def minor_units(self) -> int:
        """Total amount in cents."""
        return self.units * CENTS_PER_UNIT + self.cents

    def is_negative(self) -> bool:
        return self.minor_units < 0

    def add(self, other: "Money") -> "Money":
        return Money.from_minor_units(self.minor_units + other.minor_units)

    def subtract(self, other: "Money") -> "Money":
        return Money.from_minor_units(self.minor_units - other.minor_units)

    def compare(self, other: "Money") -> Ordering:
        """Three-way comparison on the cent count."""
        difference = self.minor_units - other.minor_units
        if difference < 0:
            return Ordering.LESS
        if difference > 0:
            return Ordering.GREATER
        return Ordering.EQUAL

    def to_decimal(self) -> Decimal:
        """Convert to a two-place Decimal."""
        return Decimal(self.minor_units).scaleb(-2)

    def __add__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self):
        return Money.from_minor_units(-self.minor_units)

    def __lt__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) is Ordering.LESS

    def __le__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) is not Ordering.GREATER

    def __gt__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) is Ordering.GREATER

    def __ge__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) is not Ordering.LESS

    def __str__(self) -> str:
        sign = "-" if self.minor_units < 0 else ""
        whole, cents = divmod(abs(self.minor_units), CENTS_PER_UNIT)
        return f"{sign}{whole}.{cents:02d}"
