import io
import os
import signal
from collections import deque

import pytest

from sigtalk.client import Client, main
from sigtalk.protocol import Bit, ByteDecoder, encode_message
from sigtalk.server import Server


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, pid, sig):
        self.calls.append((pid, sig))


def _decode(signals):
    decoder = ByteDecoder()
    out = bytearray()
    for sig in signals:
        byte = decoder.feed(Bit.ONE if sig == signal.SIGUSR2 else Bit.ZERO)
        if byte is not None:
            out.append(byte)
    return bytes(out)


def test_sent_signals_decode_to_message():
    record = Recorder()
    client = Client(42, "hey", send=record)
    for _ in encode_message("hey"):
        client.send_next()
    assert _decode(sig for _, sig in record.calls) == b"hey\x00"
    assert {pid for pid, _ in record.calls} == {42}


def test_first_bits_of_capital_a():
    record = Recorder()
    client = Client(7, "A", send=record)
    assert client.send_next() is Bit.ZERO
    assert client.send_next() is Bit.ONE
    assert [sig for _, sig in record.calls] == [signal.SIGUSR1, signal.SIGUSR2]


def test_acknowledgement_sends_one_more_bit():
    record = Recorder()
    client = Client(7, "a", send=record)
    assert client.handle(signal.SIGUSR1) is False
    assert len(record.calls) == 1


def test_confirmation_finishes_without_sending():
    record = Recorder()
    client = Client(7, "a", send=record)
    assert client.handle(signal.SIGUSR2) is True
    assert client.done is True
    assert record.calls == []


def test_sending_past_the_end_raises():
    client = Client(7, "", send=Recorder())
    for _ in range(8):
        client.send_next()
    with pytest.raises(IndexError):
        client.send_next()


def test_unexpected_signal_rejected():
    client = Client(7, "a", send=Recorder())
    with pytest.raises(ValueError):
        client.handle(signal.SIGTERM)


def test_zero_pid_rejected():
    with pytest.raises(ValueError):
        Client(0, "a", send=Recorder())


def test_exchange_with_server():
    out = io.BytesIO()
    server = Server(out)
    replies = deque()
    client = Client(99, "talk", send=lambda pid, sig: replies.append(server.handle(sig, 5)))
    client.send_next()
    while not client.done:
        client.handle(replies.popleft())
    assert out.getvalue() == b"talk\x00\n"
    assert not replies


def test_run_with_real_signals():
    out = io.BytesIO()
    server = Server(out)

    def send(pid, sig):
        os.kill(os.getpid(), server.handle(sig, pid))

    client = Client(os.getpid(), "ok", send=send)
    client.run()
    assert client.done is True
    assert out.getvalue() == b"ok\x00\n"


def test_main_usage_error(capsys):
    assert main(["123"]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_rejects_non_numeric_pid(capsys):
    assert main(["abc", "hello"]) == 1
    assert "pid" in capsys.readouterr().err