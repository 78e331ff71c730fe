"""Byte-buffer helpers: filling, copying, searching and comparing."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_count(n: int, *buffers: bytes | bytearray | memoryview) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"byte count {n} exceeds buffer of length {len(buffer)}")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``value`` (taken modulo 256)."""
    _check_count(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buffer``."""
    memset(buffer, 0, n)


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest`` and return ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source bytes were
    first copied aside.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n)
    if max(dest, src) + n > len(buffer):
        raise ValueError("region extends past the end of the buffer")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data: bytes | bytearray, value: int, n: int) -> int | None:
    """Return the offset of the first byte equal to ``value`` among the first ``n``, or None."""
    _check_count(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair, else 0."""
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb * size`` bytes.

    A zero count or size yields a one-byte buffer.  Raises MemoryError when
    the total size does not fit in a 64-bit size.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if nmemb == 0 or size == 0:
        return bytearray(1)
    total = nmemb * size
    if total > SIZE_MAX:
        raise MemoryError(f"{nmemb} * {size} bytes overflows the size limit")
    return bytearray(total)