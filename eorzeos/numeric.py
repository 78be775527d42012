"""Integer helpers: truncating division and decimal text conversion."""

from itertools import takewhile

_DECIMAL_DIGITS = frozenset("0123456789")


def _int32(value):
    """Wrap an integer to the signed 32-bit range."""
    return (value + 0x80000000) % 0x100000000 - 0x80000000


def div(a, b):
    """Divide with truncation toward zero; division by zero yields 0."""
    if b == 0:
        return 0
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def mod(a, b):
    """Remainder matching :func:`div`; a zero divisor returns ``a`` unchanged."""
    if b == 0:
        return a
    return a - div(a, b) * b


def atoi(text):
    """Parse an optional sign and leading decimal digits; stop at the first other character."""
    sign = 1
    if text[:1] == "-":
        sign = -1
        text = text[1:]
    elif text[:1] == "+":
        text = text[1:]
    digits = "".join(takewhile(_DECIMAL_DIGITS.__contains__, text))
    if not digits:
        return 0
    return _int32(sign * int(digits))


def itoa(num):
    """Render an integer as decimal text."""
    return str(int(num))