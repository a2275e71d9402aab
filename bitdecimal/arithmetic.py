"""Addition, subtraction, multiplication and division of decimals."""

from __future__ import annotations

from bitdecimal.bigdecimal import BigDecimal, to_common_factor
from bitdecimal.value import Decimal, DivisionByZeroError


def _aligned(first: Decimal, second: Decimal) -> tuple[BigDecimal, BigDecimal]:
    return to_common_factor(BigDecimal.from_decimal(first), BigDecimal.from_decimal(second))


def add(first: Decimal, second: Decimal) -> Decimal:
    """Return the sum; raise an overflow error when it leaves the decimal range."""
    a, b = _aligned(first, second)
    if first.negative == second.negative:
        result = BigDecimal(a.add_core(b).magnitude).with_sign(first.negative)
    else:
        result = a.sub_core(b)
        if a.compare_magnitude(b) > 0:
            if a.negative:
                result = result.with_sign(True)
        elif b.negative:
            result = result.with_sign(True)
    return result.with_scale(a.scale).to_decimal()


def sub(first: Decimal, second: Decimal) -> Decimal:
    """Return the difference; raise an overflow error when it leaves the decimal range."""
    a, b = _aligned(first, second)
    if a.negative == b.negative:
        result = a.sub_core(b)
        if a.negative:
            result = result.with_sign(not result.negative)
    else:
        result = BigDecimal(a.add_core(b).magnitude).with_sign(a.negative)
    return result.with_scale(a.scale).to_decimal()


def mul(first: Decimal, second: Decimal) -> Decimal:
    """Return the product; raise an overflow error when it leaves the decimal range."""
    product = BigDecimal.from_decimal(first).mul(BigDecimal.from_decimal(second))
    return product.to_decimal()


def div(first: Decimal, second: Decimal) -> Decimal:
    """Return the quotient; raise DivisionByZeroError for a zero divisor."""
    if second.is_zero():
        raise DivisionByZeroError("division by zero")
    quotient = BigDecimal.from_decimal(first).div(BigDecimal.from_decimal(second))
    return quotient.to_decimal()