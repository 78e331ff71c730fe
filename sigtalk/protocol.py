"""The one-bit-at-a-time message protocol shared by client and server.

Each byte of a message travels most significant bit first, and the
message ends with a NUL byte.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterator, Optional


class Bit(IntEnum):
    """A single transmitted bit."""

    ZERO = 0
    ONE = 1


def _payload(message: str | bytes) -> bytes:
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    if b"\0" in data:
        raise ValueError("message must not contain a NUL byte")
    return data + b"\0"


class BitEncoder:
    """Hands out the bits of a message, terminator included, one per call."""

    def __init__(self, message: str | bytes) -> None:
        self.payload = _payload(message)
        self._position = 0

    @property
    def _total(self) -> int:
        return len(self.payload) * 8

    def next_bit(self) -> Bit:
        """Return the next bit; raise IndexError once the terminator has been sent."""
        if self._position >= self._total:
            raise IndexError("every bit of the message has been sent")
        byte_index, shift = divmod(self._position, 8)
        self._position += 1
        return Bit((self.payload[byte_index] >> (7 - shift)) & 1)

    def __iter__(self) -> Iterator[Bit]:
        while self._position < self._total:
            yield self.next_bit()


def encode_message(text: str | bytes) -> list[Bit]:
    """Return every bit that carries ``text`` and its terminator."""
    return list(BitEncoder(text))


class ByteDecoder:
    """Collects bits, most significant first, into whole bytes."""

    def __init__(self) -> None:
        self._value = 0
        self._received = 0

    def feed(self, bit: Bit | int) -> Optional[int]:
        """Take one bit; return the byte it completes, otherwise None.

        A completed byte may be 0, which marks the end of a message.
        """
        bit = Bit(bit)
        if bit is Bit.ONE:
            self._value |= 1 << (7 - self._received)
        self._received += 1
        if self._received < 8:
            return None
        value = self._value
        self._value = 0
        self._received = 0
        return value