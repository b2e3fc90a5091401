"""
Digit Decomposer
================

Splits a numeral into its four base-10 positions.

Design:
- Fail-fast: out-of-range values rejected before any geometry
- Immutable result (frozen dataclass)
"""

from dataclasses import dataclass
from numbers import Integral

from cistercian_glyph.errors import OutOfRangeError

MIN_VALUE = 0
MAX_VALUE = 9_999


@dataclass(frozen=True)
class DigitPositions:
    """
    Decimal digits of a numeral, one per glyph quadrant.

    Attributes:
        units: value % 10
        tens: (value % 100) // 10
        hundreds: (value % 1000) // 100
        thousands: (value % 10000) // 1000
        magnitude: Number of active positions (1-4)
    """

    units: int
    tens: int
    hundreds: int
    thousands: int
    magnitude: int

    @property
    def value(self) -> int:
        """Recompose the original integer."""
        return self.thousands * 1000 + self.hundreds * 100 + self.tens * 10 + self.units

    def as_tuple(self) -> tuple[int, int, int, int]:
        """Digits ordered units, tens, hundreds, thousands."""
        return (self.units, self.tens, self.hundreds, self.thousands)


def validate_value(value) -> int:
    """
    Check that value is a plain integer in [0, 9999].

    Raises:
        OutOfRangeError: For bools, non-integers and out-of-range integers
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise OutOfRangeError(value)
    if not MIN_VALUE <= value <= MAX_VALUE:
        raise OutOfRangeError(value)
    return int(value)


def magnitude_of(value: int) -> int:
    if value <= 9:
        return 1
    if value <= 99:
        return 2
    if value <= 999:
        return 3
    return 4


def decompose(value: int) -> DigitPositions:
    """
    Split value into units, tens, hundreds and thousands.

    Args:
        value: Integer in [0, 9999]

    Returns:
        DigitPositions with each digit in [0, 9]

    Raises:
        OutOfRangeError: If value is outside [0, 9999]

    Example:
        >>> decompose(1234).as_tuple()
        (4, 3, 2, 1)
    """
    value = validate_value(value)
    return DigitPositions(
        units=value % 10,
        tens=(value % 100) // 10,
        hundreds=(value % 1_000) // 100,
        thousands=(value % 10_000) // 1_000,
        magnitude=magnitude_of(value),
    )
