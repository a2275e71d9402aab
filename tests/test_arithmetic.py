import pytest

from bitdecimal.arithmetic import add, div, mul, sub
from bitdecimal.compare import is_equal
from bitdecimal.value import (
    Decimal,
    DecimalNegativeOverflowError,
    DecimalOverflowError,
    DivisionByZeroError,
)

MAX = 0xFFFFFFFF


def dec(*words):
    return Decimal.from_words(words)


def test_add_positive_integers():
    result = add(dec(123456, 0, 0, 0), dec(532167, 0, 0, 0))
    assert result.words() == (655623, 0, 0, 0)


def test_add_negative_and_larger_positive_magnitude():
    result = add(dec(34535, 0, 0, 2147483648), dec(267977, 0, 0, 0))
    assert result.words()[0] == 233442
    assert result.mantissa == 233442


@pytest.mark.parametrize(
    "first, second, expected",
    [
        (
            (776726685, 46, 0, 0),
            (781775, 542387564, 0, 2147483648),
            (3519022386, 542387517, 0, 2147483648),
        ),
        (
            (86727862, 465437, 1, 2147483648),
            (355626, 356436333, 52, 2147483648),
            (87083488, 356901770, 53, 2147483648),
        ),
        (
            (435, 243, 43256645, 851968),
            (454353, 43543535, 2567365545, 1310720),
            (3263556725, 1570006293, 432569017, 917504),
        ),
        (
            (543, 3, 765555, 2147483648),
            (5, 7, 45436, 1310720),
            (4287128833, 2999, 765555000, 2147680256),
        ),
    ],
)
def test_add_cases(first, second, expected):
    assert add(dec(*first), dec(*second)).words() == expected


def test_add_overflow_positive():
    with pytest.raises(DecimalOverflowError):
        add(dec(MAX, MAX, MAX, 0), dec(3556453626, 3564363353, 557372952, 0))


def test_add_overflow_negative():
    with pytest.raises(DecimalNegativeOverflowError):
        add(
            dec(MAX, MAX, MAX, 2147483648),
            dec(3556453626, 3564363353, 557372952, 2147483648),
        )


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ((14, 0, 0, 0), (8, 0, 0, 0), (6, 0, 0, 0)),
        ((7843786, 0, 0, 0), (4532, 0, 0, 0), (7839254, 0, 0, 0)),
        ((14324, 0, 0, 0), (32455775, 0, 0, 0), (32441451, 0, 0, 2147483648)),
        (
            (346256456, 542664727, 452847392, 0),
            (32455775, 4583772, 74656458, 0),
            (313800681, 538080955, 378190934, 0),
        ),
        (
            (234, 46, 2, 2147483648),
            (53465463, 7, 48378945, 2147483648),
            (53465229, 4294967257, 48378942, 0),
        ),
        ((0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0)),
        ((0, 0, 0, 0), (45254245, 2345245, 2, 0), (45254245, 2345245, 2, 2147483648)),
        (
            (5463, 5356727, 766553, 2147483648),
            (0, 0, 0, 0),
            (5463, 5356727, 766553, 2147483648),
        ),
    ],
)
def test_sub_cases(first, second, expected):
    assert sub(dec(*first), dec(*second)).words() == expected


def test_mul_zero_by_max_with_stray_flags():
    result = mul(dec(0, 0, 0, 0), dec(MAX, MAX, MAX, 228))
    assert is_equal(result, dec(0, 0, 0, 0))


def test_mul_overflow_negative():
    with pytest.raises(DecimalNegativeOverflowError):
        mul(dec(MAX, MAX, MAX, 2147483648), dec(MAX, MAX, MAX, 0))


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ((1, 0, 0, 0), (2, 0, 0, 0), (2, 0, 0, 0)),
        ((2042234234, 0, 0, 0), (202334324, 0, 0, 0), (0xF47E3B48, 0x5BC0804, 0, 0)),
        ((0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0)),
        ((0, 0, 0, 0x00030000), (0, 0, 0, 0x80050000), (0, 0, 0, 0x80080000)),
        ((0x0F, 0, 0, 0x00010000), (2, 0, 0, 0), (0x1E, 0, 0, 0x00010000)),
        ((1, 0, 0, 0x000F0000), (0x540BE400, 2, 0, 0), (0x540BE400, 2, 0, 0x000F0000)),
        (
            (MAX, MAX, MAX, 0x80180000),
            (MAX, MAX, MAX, 0x00180000),
            (0x096EE456, 0x359A3B3E, 0xCAD2F7F5, 0x80130000),
        ),
        ((MAX, MAX, MAX, 0x80000000), (1, 0, 0, 0x80000000), (MAX, MAX, MAX, 0)),
    ],
)
def test_mul_cases(first, second, expected):
    assert is_equal(mul(dec(*first), dec(*second)), dec(*expected))


def test_mul_sign_of_product_of_negatives_is_positive():
    result = mul(dec(MAX, MAX, MAX, 0x80000000), dec(1, 0, 0, 0x80000000))
    assert result.negative is False


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ((400, 0, 0, 0), (4, 0, 0, 0), (100, 0, 0, 0)),
        ((51, 0, 0, 0), (2, 0, 0, 0), (255, 0, 0, 0x10000)),
        ((3241, 31245, 132456, 0), (35, 0, 0, 0), (706166756, 279147529, 3784457143, 393216)),
        (
            (9872338, 35345433, 0, 851968),
            (3525, 34, 0, 1245184),
            (1943659971, 2999259544, 563552857, 1048576),
        ),
        ((5435, 643666, 23456, 851968), (1, 0, 0, 0), (5435, 643666, 23456, 851968)),
        (
            (5435, 643666, 23456, 851968),
            (1, 0, 0, 2147483648),
            (5435, 643666, 23456, 2148335616),
        ),
    ],
)
def test_div_cases(first, second, expected):
    assert div(dec(*first), dec(*second)).words() == expected


def test_div_by_zero():
    with pytest.raises(DivisionByZeroError):
        div(dec(9872338, 35345433, 0, 851968), dec(0, 0, 0, 0))


def test_div_by_zero_is_zero_division_error():
    with pytest.raises(ZeroDivisionError):
        div(dec(1, 0, 0, 0), dec(0, 0, 0, 0x80000000))


def test_add_then_sub_round_trip():
    first = dec(123456789, 42, 0, 0x00040000)
    second = dec(987654, 0, 0, 0x00040000)
    assert is_equal(sub(add(first, second), second), first)