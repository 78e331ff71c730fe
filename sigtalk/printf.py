"""Formatted output and small writers that go straight to a file descriptor."""

from __future__ import annotations

import os
import re
from typing import Any, Iterator

from .conversions import itoa_base

_DECIMAL = "0123456789"
_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"

_DIRECTIVE = re.compile(r"%(.?)", re.DOTALL)


def _as_int32(value: Any) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    n = int(value) & 0xFFFFFFFF
    return n - 2**32 if n >= 2**31 else n


def _as_uint32(value: Any) -> int:
    return int(value) & 0xFFFFFFFF


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _signed(value: Any) -> str:
    n = _as_int32(value)
    if n < 0:
        return "-" + itoa_base(-n, _DECIMAL)
    return itoa_base(n, _DECIMAL)


def _pointer(value: Any) -> str:
    if value is None or int(value) == 0:
        return "(nil)"
    return "0x" + itoa_base(int(value), _LOWER_HEX)


def _render(spec: str, take: Any) -> str:
    if spec == "c":
        return _char(take())
    if spec == "s":
        value = take()
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _pointer(take())
    if spec in ("i", "d"):
        return _signed(take())
    if spec == "u":
        return itoa_base(_as_uint32(take()), _DECIMAL)
    if spec == "x":
        return itoa_base(_as_uint32(take()), _LOWER_HEX)
    if spec == "X":
        return itoa_base(_as_uint32(take()), _UPPER_HEX)
    if spec == "%":
        return "%"
    return "%" + spec


def format(fmt: str, *args: Any) -> str:
    """Expand the directives %c %s %p %d %i %u %x %X and %% in ``fmt``.

    An unknown directive is kept as written; a lone ``%`` at the very end
    is dropped.  Raises TypeError when the arguments run out.
    """
    pending: Iterator[Any] = iter(args)

    def take() -> Any:
        try:
            return next(pending)
        except StopIteration:
            raise TypeError(f"not enough arguments for format string {fmt!r}") from None

    def replace(match: re.Match[str]) -> str:
        spec = match.group(1)
        if not spec:
            return ""
        return _render(spec, take)

    return _DIRECTIVE.sub(replace, fmt)


def _write_all(fd: int, data: bytes) -> int:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)


def printf(fmt: str, *args: Any, fd: int = 1) -> int:
    """Write the expansion of ``fmt`` to ``fd`` and return the number of bytes written."""
    return _write_all(fd, format(fmt, *args).encode("utf-8"))


def put_char(c: str | int, fd: int = 1) -> None:
    """Write one character to ``fd``; an integer is taken as a byte value."""
    if isinstance(c, str):
        _write_all(fd, _char(c).encode("utf-8"))
    else:
        _write_all(fd, bytes([int(c) & 0xFF]))


def put_str(text: str, fd: int = 1) -> None:
    """Write ``text`` to ``fd``."""
    _write_all(fd, text.encode("utf-8"))


def put_endl(text: str, fd: int = 1) -> None:
    """Write ``text`` followed by a newline to ``fd``."""
    _write_all(fd, (text + "\n").encode("utf-8"))


def put_nbr(n: int, fd: int = 1) -> None:
    """Write the decimal form of the 32-bit integer ``n`` to ``fd``."""
    _write_all(fd, str(_as_int32(n)).encode("ascii"))