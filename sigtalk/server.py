"""Receives messages one bit per signal and writes them to an output stream."""

from __future__ import annotations

import os
import signal
import sys
from typing import BinaryIO, Optional, Sequence

from .protocol import Bit, ByteDecoder

_BIT_FOR_SIGNAL = {signal.SIGUSR1: Bit.ZERO, signal.SIGUSR2: Bit.ONE}


class Server:
    """Decodes bits arriving as SIGUSR1 (zero) and SIGUSR2 (one).

    Every bit is acknowledged with SIGUSR1; the end of a message (a NUL
    byte) is acknowledged with SIGUSR2 instead.
    """

    def __init__(self, output: BinaryIO) -> None:
        self.output = output
        self.sender: Optional[int] = None
        self._decoder = ByteDecoder()

    def handle(self, signum: int, sender: int) -> signal.Signals:
        """Take one bit from ``sender`` and return the signal to answer with."""
        try:
            bit = _BIT_FOR_SIGNAL[signal.Signals(signum)]
        except (ValueError, KeyError):
            raise ValueError(f"signal {signum} does not carry a bit") from None
        self.sender = sender
        byte = self._decoder.feed(bit)
        if byte is None:
            return signal.SIGUSR1
        self.output.write(bytes([byte]))
        if byte == 0:
            self.output.write(b"\n")
            self.output.flush()
            return signal.SIGUSR2
        self.output.flush()
        return signal.SIGUSR1

    def serve(self) -> None:
        """Print the process id, then receive and acknowledge bits forever."""
        self.output.write(f"{os.getpid()}\n".encode("ascii"))
        self.output.flush()
        signals = set(_BIT_FOR_SIGNAL)
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, signals)
        try:
            while True:
                info = signal.sigwaitinfo(signals)
                reply = self.handle(info.si_signo, info.si_pid)
                try:
                    os.kill(info.si_pid, reply)
                except OSError:
                    pass
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the server on standard output until interrupted."""
    try:
        Server(sys.stdout.buffer).serve()
    except KeyboardInterrupt:
        return 0
    return 0