"""Character classification and case mapping for ASCII codes.

Every function accepts either a one-character string or an integer
character code.
"""

from __future__ import annotations

EOF = -1


def _code(c: str | int) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def isalpha(c: str | int) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: str | int) -> bool:
    """Return True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: str | int) -> bool:
    """Return True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: str | int) -> bool:
    """Return True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isprint(c: str | int) -> bool:
    """Return False for control codes, DEL and above, and EOF."""
    code = _code(c)
    return not (0 <= code <= 31 or code >= 127 or code == EOF)


def isspace(c: str | int) -> bool:
    """Return True for tab, newline, vertical tab, form feed, return or space."""
    code = _code(c) & 0xFF
    return 9 <= code <= 13 or code == 32


def _map_case(c: str | int, low: str, high: str, shift: int) -> str | int:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += shift
    return chr(code) if isinstance(c, str) else code


def toupper(c: str | int) -> str | int:
    """Map a lower-case ASCII letter to upper case; leave anything else."""
    return _map_case(c, "a", "z", -32)


def tolower(c: str | int) -> str | int:
    """Map an upper-case ASCII letter to lower case; leave anything else."""
    return _map_case(c, "A", "Z", 32)