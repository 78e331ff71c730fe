"""String helpers: splitting, trimming, searching, bounded copies and mapping."""

from __future__ import annotations

from typing import Any, Callable, MutableSequence, Optional


def _as_char(c: str | int) -> str:
    """Reduce ``c`` to one character the way a C ``char`` cast does for ints."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    sep = _as_char(sep)
    return [part for part in text.split(sep) if part]


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in ``charset``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` wholly inside the first ``length`` characters of ``haystack``.

    Returns its offset, 0 for an empty needle, or None when absent.
    """
    if not needle:
        return 0
    if length < 0:
        raise ValueError("length must not be negative")
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strchr(text: str, c: str | int) -> Optional[int]:
    """Return the offset of the first ``c`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _as_char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: str | int) -> Optional[int]:
    """Return the offset of the last ``c`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _as_char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference at the first mismatch."""
    if n < 0:
        raise ValueError("n must not be negative")
    for i in range(n):
        ca = ord(a[i]) if i < len(a) else 0
        cb = ord(b[i]) if i < len(b) else 0
        if ca != cb or ca == 0:
            return ca - cb
    return 0


def strlcpy(dest: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, keeping room for a terminator.

    Returns the resulting string and the length of ``src``.  A size of 0
    leaves ``dest`` untouched.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return dest, len(src)
    return src[:size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` slots.

    Returns the resulting string and the length it tried to create.  When
    ``dest`` already fills the buffer nothing is appended and the length
    reported is ``size + len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if len(dest) >= size:
        return dest, size + len(src)
    room = size - 1 - len(dest)
    return dest + src[:room], len(dest) + len(src)


def strjoin(a: Optional[str], b: Optional[str]) -> str:
    """Concatenate two strings, treating None as empty."""
    return (a or "") + (b or "")


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(i, ch) for i, ch in enumerate(text))


def striteri(buffer: MutableSequence[Any], func: Callable[[int, Any], Any]) -> None:
    """Call ``func(index, item)`` on every item of ``buffer`` in place.

    A non-None return value replaces the item; None leaves it unchanged.
    """
    for i, item in enumerate(list(buffer)):
        replacement = func(i, item)
        if replacement is not None:
            buffer[i] = replacement