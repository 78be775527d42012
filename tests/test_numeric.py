import pytest

from eorzeos.numeric import atoi, div, itoa, mod

PAIRS = [
    (a, b)
    for a in (-17, -9, -1, 0, 1, 4, 9, 17, 100)
    for b in (-7, -3, -1, 1, 2, 3, 7)
]


@pytest.mark.parametrize("a,b", PAIRS)
def test_div_mod_recombine(a, b):
    assert div(a, b) * b + mod(a, b) == a


@pytest.mark.parametrize("a,b", PAIRS)
def test_remainder_smaller_than_divisor(a, b):
    assert abs(mod(a, b)) < abs(b)


@pytest.mark.parametrize("a,b", PAIRS)
def test_remainder_takes_sign_of_dividend(a, b):
    remainder = mod(a, b)
    assert remainder == 0 or (remainder < 0) == (a < 0)


@pytest.mark.parametrize("a,b", PAIRS)
def test_division_truncates_toward_zero(a, b):
    assert div(-a, b) == -div(a, b)
    assert div(a, -b) == -div(a, b)


def test_division_by_zero_gives_zero():
    assert div(5, 0) == 0


def test_mod_by_zero_returns_dividend():
    assert mod(23, 0) == 23


def test_atoi_reads_signs_and_digits():
    assert atoi("-15") == -15
    assert atoi("+8") == 8
    assert atoi("42") == 42


def test_atoi_stops_at_first_non_digit():
    assert atoi("42abc") == 42
    assert atoi("--5") == 0


@pytest.mark.parametrize("text", ["", "abc", "-", "+"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_itoa_zero():
    assert itoa(0) == "0"


@pytest.mark.parametrize("num", [-2147483648, -1001, -7, -1, 1, 9, 10, 305, 2147483647])
def test_itoa_atoi_round_trip(num):
    assert atoi(itoa(num)) == num


def test_itoa_negative_has_single_leading_minus():
    text = itoa(-250)
    assert text.startswith("-")
    assert text[1:] == itoa(250)