"""Fixed-point decimal value held as three 32-bit mantissa words and a flags word."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace

WORD_BITS = 32
WORD_MASK = 0xFFFFFFFF
MANTISSA_WORDS = 3
MAX_MANTISSA = (1 << (WORD_BITS * MANTISSA_WORDS)) - 1
MAX_SCALE = 28
SCALE_SHIFT = 16
SCALE_MASK = 0xFF
SIGN_BIT = 1 << 31
_RESERVED_BITS = 0x7F00FFFF


class DecimalError(ArithmeticError):
    """Base class for all decimal errors."""


class DecimalOverflowError(DecimalError):
    """The result is too large or equal to positive infinity."""


class DecimalNegativeOverflowError(DecimalError):
    """The result is too small or equal to negative infinity."""


class DivisionByZeroError(DecimalError, ZeroDivisionError):
    """Division by a zero divisor."""


class ConversionError(DecimalError):
    """A value cannot be converted to or from a decimal."""


class CalculationError(DecimalError):
    """A calculation was given a malformed decimal."""


def _join_words(words: Iterable[int]) -> int:
    return sum(word << (WORD_BITS * index) for index, word in enumerate(words))


def _split_words(value: int, count: int) -> Iterator[int]:
    return ((value >> (WORD_BITS * index)) & WORD_MASK for index in range(count))


def _checked_words(words: Iterable[int], count: int) -> tuple[int, ...]:
    result = tuple(words)
    if len(result) != count:
        raise ValueError(f"expected {count} words, got {len(result)}")
    for word in result:
        if not 0 <= word <= WORD_MASK:
            raise ValueError(f"word {word!r} does not fit in 32 bits")
    return result


@dataclass(frozen=True)
class Decimal:
    """A 96-bit unsigned mantissa with a flags word carrying scale and sign."""

    mantissa: int = 0
    flags: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.mantissa <= MAX_MANTISSA:
            raise ValueError("mantissa must fit in 96 bits")
        if not 0 <= self.flags <= WORD_MASK:
            raise ValueError("flags must fit in 32 bits")

    @classmethod
    def from_words(cls, words: Iterable[int]) -> Decimal:
        """Build a decimal from its four words: low, middle, high and flags."""
        *mantissa_words, flags = _checked_words(words, MANTISSA_WORDS + 1)
        return cls(_join_words(mantissa_words), flags)

    def words(self) -> tuple[int, int, int, int]:
        """Return the four words: low, middle, high and flags."""
        low, middle, high = _split_words(self.mantissa, MANTISSA_WORDS)
        return (low, middle, high, self.flags)

    @property
    def scale(self) -> int:
        """Power of ten the mantissa is divided by."""
        return (self.flags >> SCALE_SHIFT) & SCALE_MASK

    @property
    def negative(self) -> bool:
        return bool(self.flags & SIGN_BIT)

    def is_valid(self) -> bool:
        """True when the reserved flag bits are clear and the scale is at most 28."""
        return not (self.flags & _RESERVED_BITS) and self.scale <= MAX_SCALE

    def with_sign(self, negative: bool) -> Decimal:
        flags = self.flags | SIGN_BIT if negative else self.flags & ~SIGN_BIT
        return replace(self, flags=flags)

    def with_scale(self, scale: int) -> Decimal:
        """Replace the flags word by the scale, keeping only the sign bit."""
        if scale < 0:
            raise ValueError("scale must not be negative")
        flags = ((scale << SCALE_SHIFT) & WORD_MASK) | (self.flags & SIGN_BIT)
        return replace(self, flags=flags)

    def is_zero(self) -> bool:
        return self.mantissa == 0