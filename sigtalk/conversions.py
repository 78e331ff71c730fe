"""Conversions between integers and their textual forms."""

from __future__ import annotations

from .chars import isdigit, isspace, tolower

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LLONG_MIN = -(2**63)
LLONG_MAX = 2**63 - 1
ULLONG_MASK = 2**64 - 1

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


class OutOfRangeError(OverflowError):
    """Raised when a parsed number does not fit; ``value`` holds the clamped result."""

    def __init__(self, value: int) -> None:
        super().__init__(f"value out of range, clamped to {value}")
        self.value = value


def _wrap_int(n: int) -> int:
    n &= 0xFFFFFFFF
    return n - 2**32 if n > INT_MAX else n


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping like a 32-bit int."""
    pos = 0
    while pos < len(text) and isspace(text[pos]):
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    n = 0
    while pos < len(text) and isdigit(text[pos]):
        n = n * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return _wrap_int(_wrap_int(n) * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def _digit_value(c: str, radix: int) -> int:
    index = _DIGITS.find(tolower(c))
    return index if 0 <= index < radix else -1


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def strtoll(text: str, radix: int = 0) -> int:
    """Parse a 64-bit integer in the given radix (0 picks it from the prefix).

    Raises ValueError when the radix is invalid or no digits follow the
    prefix, and OutOfRangeError when the value overflows.
    """
    pos = 0
    while pos < len(text) and isspace(text[pos]):
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] == "-":
        sign = -1
        pos += 1
    elif pos < len(text) and text[pos] == "+":
        pos += 1

    rest = text[pos:]
    if radix in (0, 16) and rest[:1] == "0" and len(rest) > 1 and tolower(rest[1]) == "x":
        pos += 2
        radix = 16
    elif radix == 0 and rest[:1] == "0":
        pos += 1
        radix = 8
    elif radix == 0:
        radix = 10

    if not 2 <= radix <= 36:
        raise ValueError(f"invalid radix {radix}")

    n = 0
    empty = True
    for c in text[pos:]:
        digit = _digit_value(c, radix)
        if digit < 0:
            break
        empty = False
        if sign == 1 and n > _trunc_div(LLONG_MAX - digit, radix):
            raise OutOfRangeError(LLONG_MAX)
        if sign == -1 and -n < _trunc_div(LLONG_MIN + digit, radix):
            raise OutOfRangeError(LLONG_MIN)
        n = n * radix + digit
    if empty:
        raise ValueError(f"no digits to convert in {text!r}")
    return n * sign


def itoa_base(n: int, base: str) -> str:
    """Write the unsigned 64-bit value ``n`` using the characters of ``base`` as digits."""
    if len(base) < 2:
        raise ValueError("base needs at least two digits")
    n &= ULLONG_MASK
    if n == 0:
        return base[0]
    radix = len(base)
    digits = []
    while n:
        n, rem = divmod(n, radix)
        digits.append(base[rem])
    return "".join(reversed(digits))