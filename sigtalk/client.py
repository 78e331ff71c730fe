"""Sends a message to a server one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
from typing import Callable, Optional, Sequence

from .conversions import atoi
from .protocol import Bit, BitEncoder

_SIGNALS = {signal.SIGUSR1, signal.SIGUSR2}


class Client:
    """Sends one bit, waits for the acknowledgement, then sends the next.

    A zero bit is sent as SIGUSR1 and a one bit as SIGUSR2.  The server
    answers each bit with SIGUSR1 and the end of the message with SIGUSR2.
    """

    def __init__(
        self,
        pid: int,
        message: str | bytes,
        send: Optional[Callable[[int, int], None]] = None,
    ) -> None:
        if pid == 0:
            raise ValueError("server pid must not be 0")
        self.pid = pid
        self.done = False
        self._encoder = BitEncoder(message)
        self._send = send

    def send_next(self) -> Bit:
        """Send the next bit and return it; IndexError once all have been sent."""
        bit = self._encoder.next_bit()
        sig = signal.SIGUSR2 if bit is Bit.ONE else signal.SIGUSR1
        send = self._send if self._send is not None else os.kill
        send(self.pid, sig)
        return bit

    def handle(self, signum: int) -> bool:
        """React to a reply from the server; return True once the message is confirmed."""
        try:
            sig = signal.Signals(signum)
        except ValueError:
            sig = None
        if sig == signal.SIGUSR1:
            self.send_next()
        elif sig == signal.SIGUSR2:
            self.done = True
        else:
            raise ValueError(f"unexpected signal {signum}")
        return self.done

    def run(self) -> None:
        """Send the whole message, waiting for each acknowledgement."""
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, _SIGNALS)
        try:
            self.send_next()
            while not self.done:
                self.handle(signal.sigwait(_SIGNALS))
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Send a message given on the command line to a server process."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        sys.stderr.write("Usage: sigtalk-client <server_pid> <string>\n")
        return 1
    pid = atoi(args[0])
    if pid == 0:
        sys.stderr.write("invalid server pid\n")
        return 1
    try:
        Client(pid, args[1]).run()
    except OSError as exc:
        sys.stderr.write(f"cannot signal process {pid}: {exc}\n")
        return 1
    sys.stdout.write("done!\n")
    sys.stdout.flush()
    return 0