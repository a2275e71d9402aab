"""Wide 192-bit working value used for intermediate decimal arithmetic."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace

from bitdecimal.value import (
    MAX_MANTISSA,
    MAX_SCALE,
    SCALE_MASK,
    SCALE_SHIFT,
    SIGN_BIT,
    WORD_BITS,
    WORD_MASK,
    Decimal,
    DecimalNegativeOverflowError,
    DecimalOverflowError,
    DivisionByZeroError,
)

MAGNITUDE_WORDS = 6
MAGNITUDE_BITS = WORD_BITS * MAGNITUDE_WORDS
_MAGNITUDE_MASK = (1 << MAGNITUDE_BITS) - 1
_SCALE_FIELD = SCALE_MASK << SCALE_SHIFT


def _set_bits_descending(value: int) -> Iterator[int]:
    for position in range(value.bit_length() - 1, -1, -1):
        if (value >> position) & 1:
            yield position


@dataclass(frozen=True)
class BigDecimal:
    """A 192-bit unsigned magnitude with a flags word carrying scale and sign."""

    magnitude: int = 0
    flags: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.magnitude <= _MAGNITUDE_MASK:
            raise ValueError("magnitude must fit in 192 bits")
        if not 0 <= self.flags <= WORD_MASK:
            raise ValueError("flags must fit in 32 bits")

    @classmethod
    def from_words(cls, words: Iterable[int]) -> BigDecimal:
        """Build from seven words: six magnitude words, low first, then flags."""
        values = tuple(words)
        if len(values) != MAGNITUDE_WORDS + 1:
            raise ValueError(f"expected {MAGNITUDE_WORDS + 1} words, got {len(values)}")
        for word in values:
            if not 0 <= word <= WORD_MASK:
                raise ValueError(f"word {word!r} does not fit in 32 bits")
        *magnitude_words, flags = values
        magnitude = sum(
            word << (WORD_BITS * index) for index, word in enumerate(magnitude_words)
        )
        return cls(magnitude, flags)

    @classmethod
    def from_decimal(cls, value: Decimal) -> BigDecimal:
        return cls(value.mantissa, value.flags)

    def words(self) -> tuple[int, ...]:
        magnitude_words = (
            (self.magnitude >> (WORD_BITS * index)) & WORD_MASK
            for index in range(MAGNITUDE_WORDS)
        )
        return (*magnitude_words, self.flags)

    @property
    def scale(self) -> int:
        return (self.flags >> SCALE_SHIFT) & SCALE_MASK

    @property
    def negative(self) -> bool:
        return bool(self.flags & SIGN_BIT)

    def with_scale(self, scale: int) -> BigDecimal:
        """Write the low eight bits of scale into the scale field."""
        flags = (self.flags & ~_SCALE_FIELD) | ((scale & SCALE_MASK) << SCALE_SHIFT)
        return replace(self, flags=flags)

    def with_sign(self, negative: bool) -> BigDecimal:
        flags = self.flags | SIGN_BIT if negative else self.flags & ~SIGN_BIT
        return replace(self, flags=flags)

    def compare_magnitude(self, other: BigDecimal) -> int:
        """Return -1, 0 or 1 as this magnitude is below, equal to or above the other."""
        return (self.magnitude > other.magnitude) - (self.magnitude < other.magnitude)

    def add_core(self, other: BigDecimal) -> BigDecimal:
        """Add magnitudes modulo 2**192, keeping this value's flags."""
        return replace(self, magnitude=(self.magnitude + other.magnitude) & _MAGNITUDE_MASK)

    def sub_core(self, other: BigDecimal) -> BigDecimal:
        """Return the magnitude difference, negative unless this magnitude is larger."""
        if self.magnitude > other.magnitude:
            return BigDecimal(self.magnitude - other.magnitude)
        return BigDecimal(other.magnitude - self.magnitude, SIGN_BIT)

    def div_core(self, other: BigDecimal) -> tuple[BigDecimal, BigDecimal]:
        """Integer division of magnitudes: (quotient, remainder), quotient signed."""
        if other.magnitude == 0:
            raise DivisionByZeroError("division by zero")
        quotient, remainder = divmod(self.magnitude, other.magnitude)
        sign = SIGN_BIT if self.negative != other.negative else 0
        return BigDecimal(quotient, sign), BigDecimal(remainder)

    def div(self, other: BigDecimal) -> BigDecimal:
        """Divide, producing fraction digits until exact or the scale reaches 28."""
        scale = self.scale - other.scale
        quotient, remainder = self.div_core(other)
        while (remainder.magnitude and scale < MAX_SCALE) or scale < 0:
            remainder = remainder.mul_by_ten()
            quotient = quotient.mul_by_ten()
            digit, remainder = remainder.div_core(other)
            quotient = quotient.add_core(digit)
            scale += 1
        return quotient.with_scale(scale)

    def mul(self, other: BigDecimal) -> BigDecimal:
        """Multiply by shift-and-add within 192 bits; scales add, signs combine."""
        product = 0
        multiplicand = self.magnitude
        for position in _set_bits_descending(other.magnitude):
            shifted = (multiplicand << position) & _MAGNITUDE_MASK
            product = (product + shifted) & _MAGNITUDE_MASK
            multiplicand = shifted >> position
        result = BigDecimal(product).with_scale(self.scale + other.scale)
        return result.with_sign(self.negative != other.negative)

    def mul_by_ten(self) -> BigDecimal:
        return replace(self, magnitude=(self.magnitude * 10) & _MAGNITUDE_MASK)

    def is_overflowed(self) -> bool:
        """True when the magnitude does not fit in 96 bits."""
        return self.magnitude > MAX_MANTISSA

    def bank_round(self, remainder: BigDecimal) -> BigDecimal:
        """Round by the last dropped digit: up above five, to even at five."""
        digit = remainder.magnitude & WORD_MASK
        if digit > 5 or (digit == 5 and self.magnitude & 1):
            return self.add_core(BigDecimal(1))
        return self

    def to_decimal(self) -> Decimal:
        """Narrow to a decimal, dropping fraction digits until it fits."""
        value = self
        scale = self.scale
        remainder = BigDecimal()
        ten = BigDecimal(10)
        while value.is_overflowed() or scale > MAX_SCALE:
            if scale == 0:
                break
            scale -= 1
            value, remainder = value.div_core(ten)
        value = value.with_scale(scale).bank_round(remainder)
        if value.is_overflowed():
            if value.negative:
                raise DecimalNegativeOverflowError("result is below the decimal range")
            raise DecimalOverflowError("result is above the decimal range")
        result = Decimal(value.magnitude).with_scale(value.scale)
        return result.with_sign(value.negative and value.magnitude != 0)


def _rescale(value: BigDecimal, target: int) -> BigDecimal:
    for _ in range(target - value.scale):
        value = value.mul_by_ten()
    return value.with_scale(target)


def to_common_factor(first: BigDecimal, second: BigDecimal) -> tuple[BigDecimal, BigDecimal]:
    """Scale the value with the smaller scale up so both share the larger scale."""
    if first.scale > second.scale:
        second = _rescale(second, first.scale)
    elif first.scale < second.scale:
        first = _rescale(first, second.scale)
    return first, second