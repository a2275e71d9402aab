# bitdecimal

`bitdecimal` provides a decimal number that is stored exactly as four 32-bit words.

- The first three words form a 96-bit unsigned mantissa, low word first.
- The fourth word is the flags word. Bits 16 to 23 hold the scale, which runs from 0 to 28. Bit 31 holds the sign.

The value is `mantissa / 10**scale`, with the sign applied.

Arithmetic is done on a wider 192-bit working value, `bitdecimal.bigdecimal.BigDecimal`. The result is then narrowed back to 96 bits. If it does not fit, or if its scale is above 28, fraction digits are dropped one at a time. The result is then rounded on the last dropped digit:

- above five, it rounds up;
- at exactly five, it rounds to even.

## Installation

```
pip install bitdecimal
```

To run the tests:

```
pip install "bitdecimal[test]"
pytest
```

## Values

`bitdecimal.value.Decimal` is a frozen dataclass with two fields, `mantissa` and `flags`.

```python
from bitdecimal.value import Decimal

x = Decimal.from_words([1234, 0, 0, 2 << 16])   # 12.34
x.words()            # (1234, 0, 0, 131072)
x.scale              # 2
x.negative           # False
x.is_valid()         # True: scale <= 28 and no reserved flag bits set
x.with_sign(True)    # -12.34
x.with_scale(3)      # 1.234 (the flags word keeps only the sign bit)
x.is_zero()          # False
```

Both the constructor and `from_words` raise `ValueError` in these cases:

- a word does not fit in 32 bits;
- the mantissa does not fit in 96 bits;
- `from_words` is not given exactly four words.

## Arithmetic

```python
from bitdecimal.arithmetic import add, sub, mul, div
from bitdecimal.value import Decimal

a = Decimal.from_words([51, 0, 0, 0])
b = Decimal.from_words([2, 0, 0, 0])
div(a, b).words()    # (255, 0, 0, 65536), i.e. 25.5
```

- `add` and `sub` align the scales of their operands before combining them.
- `mul` adds the scales of its operands.
- `div` produces fraction digits until the division is exact or the scale reaches 28.

Failures are raised as exceptions from `bitdecimal.value`:

- `DecimalOverflowError`: the result is above the decimal range.
- `DecimalNegativeOverflowError`: the result is below the decimal range.
- `DivisionByZeroError`: the divisor is zero. It is also a `ZeroDivisionError`.

All of these derive from `DecimalError`, which is an `ArithmeticError`.

## Comparison

```python
from bitdecimal.compare import (
    is_equal, is_not_equal, is_less, is_less_or_equal,
    is_greater, is_greater_or_equal,
)
```

Each of these returns a `bool`. Values are compared by magnitude after their scales are aligned, so `30.0` equals `30`. Every zero equals every other zero, whatever its sign or scale.

## Rounding

```python
from bitdecimal.rounding import floor, round_half_away, truncate, negate
```

- `truncate` drops the fraction digits.
- `floor` rounds towards negative infinity.
- `round_half_away` rounds to the nearest integer, with halves going away from zero.
- `negate` flips the sign. It does this for zero too.

Each of them raises `CalculationError` for a malformed value. A value is malformed when its reserved flag bits are set or its scale is above 28.

## Conversion

```python
from bitdecimal.convert import from_int, from_float, to_int, to_float

from_int(-351453).words()        # (351453, 0, 0, 2147483648)
from_float(33.6755).words()      # (3367550, 0, 0, 327680)
to_int(Decimal.from_words([21452123, 0, 0, 2147483648]))   # -21452123
to_float(Decimal.from_words([2147483648, 0, 0, 0]))        # 2147483648.0
```

**`from_int`** accepts a 32-bit signed integer.

**`from_float`** works as follows:

- It first rounds its argument to single precision.
- It keeps seven significant digits, rounding half up.
- It rejects these inputs:
  - NaN and infinities;
  - non-zero magnitudes below `1e-28`;
  - magnitudes of `2**96` or more.

**`to_int`** truncates towards zero. The result must fit in a 32-bit signed integer.

**`to_float`** returns the nearest single-precision value, as a Python `float`.

Each of the four raises `ConversionError` when a value cannot be converted.

## What it does not do

`bitdecimal` is a library only. It has no command-line program. It does not parse decimals from text or format them as text. Values are built from their words, or from `int` and `float`, and are read back the same ways. `Decimal` does not overload Python's arithmetic or comparison operators. Use the functions above instead.