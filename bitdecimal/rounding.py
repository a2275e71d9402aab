"""Truncation, flooring, rounding and negation of decimals."""

from __future__ import annotations

from bitdecimal.arithmetic import add, sub
from bitdecimal.compare import is_equal
from bitdecimal.value import SCALE_SHIFT, CalculationError, Decimal

_ONE = Decimal(1)
_HALF = Decimal(5, 1 << SCALE_SHIFT)


def _require_valid(value: Decimal) -> None:
    if not value.is_valid():
        raise CalculationError("malformed decimal: reserved bits set or scale above 28")


def truncate(value: Decimal) -> Decimal:
    """Drop the fraction digits, keeping the sign of a non-zero result."""
    _require_valid(value)
    whole = value.mantissa // 10**value.scale
    return Decimal(whole).with_sign(value.negative and whole != 0)


def negate(value: Decimal) -> Decimal:
    """Return the value with its sign flipped, zero included."""
    _require_valid(value)
    return value.with_sign(not value.negative)


def floor(value: Decimal) -> Decimal:
    """Round towards negative infinity."""
    _require_valid(value)
    whole = truncate(value)
    if value.negative and value.scale and not is_equal(value, whole):
        whole = sub(whole, _ONE)
    return whole


def round_half_away(value: Decimal) -> Decimal:
    """Round to the nearest integer, halves away from zero."""
    _require_valid(value)
    if value.scale:
        value = sub(value, _HALF) if value.negative else add(value, _HALF)
    return truncate(value)