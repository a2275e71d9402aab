"""Conversions between decimals, 32-bit integers and single-precision floats."""

from __future__ import annotations

import math
import operator
import struct
from fractions import Fraction

from bitdecimal.bigdecimal import BigDecimal
from bitdecimal.rounding import truncate
from bitdecimal.value import ConversionError, Decimal

INT_MIN = -(1 << 31)
INT_MAX = (1 << 31) - 1
_SIGNIFICANT_DIGITS = 7
_SMALLEST_MAGNITUDE = 1e-28
_LARGEST_MAGNITUDE = 2.0**96
_HALF = Fraction(1, 2)


def _to_single(value: float) -> float:
    """Round a float to the nearest single-precision value."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError as exc:
        raise ConversionError(f"{value!r} is out of single-precision range") from exc


def from_int(value: int) -> Decimal:
    """Convert a 32-bit signed integer to a decimal."""
    number = operator.index(value)
    if not INT_MIN <= number <= INT_MAX:
        raise ConversionError(f"{number} does not fit in a 32-bit integer")
    return Decimal(abs(number)).with_sign(number < 0)


def _seven_digits(magnitude: Fraction) -> tuple[int, int]:
    """Return (mantissa, scale) keeping seven significant digits, rounded half up."""
    scale = 0
    while 0 < magnitude < 1:
        magnitude *= 10
        scale += 1
    length = len(str(math.floor(magnitude)))
    shift = _SIGNIFICANT_DIGITS - length
    magnitude *= Fraction(10) ** shift
    scale += shift
    whole = math.floor(magnitude)
    if magnitude - whole >= _HALF:
        whole += 1
    return whole, scale


def from_float(value: float) -> Decimal:
    """Convert a number, taken at single precision, to a decimal of seven significant digits."""
    single = _to_single(float(value))
    if math.isnan(single) or math.isinf(single):
        raise ConversionError("cannot convert an infinity or NaN")
    magnitude = abs(single)
    if 0 < magnitude < _SMALLEST_MAGNITUDE:
        raise ConversionError(f"{single!r} is too small for a decimal")
    if magnitude >= _LARGEST_MAGNITUDE:
        raise ConversionError(f"{single!r} is too large for a decimal")
    negative = math.copysign(1.0, single) < 0
    mantissa, scale = _seven_digits(Fraction(magnitude))
    if scale < 0:
        mantissa *= 10**-scale
        scale = 0
    return BigDecimal(mantissa).with_scale(scale).with_sign(negative).to_decimal()


def to_int(value: Decimal) -> int:
    """Convert to a 32-bit signed integer, dropping the fraction."""
    if not value.is_valid():
        raise ConversionError("malformed decimal")
    whole = truncate(value)
    limit = -INT_MIN if whole.negative else INT_MAX
    if whole.mantissa > limit:
        raise ConversionError("value does not fit in a 32-bit integer")
    return -whole.mantissa if whole.negative else whole.mantissa


def to_float(value: Decimal) -> float:
    """Convert to the nearest single-precision value, returned as a float."""
    if not value.is_valid():
        raise ConversionError("malformed decimal")
    if value.is_zero():
        return 0.0
    result = float(value.mantissa) / 10.0**value.scale
    return _to_single(-result if value.negative else result)