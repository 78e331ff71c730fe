# sigtalk

`sigtalk` moves a text message from one process to another using nothing
but two POSIX signals. Every byte of the UTF-8 encoded message is sent as
eight bits, most significant first: `SIGUSR1` carries a 0 and `SIGUSR2`
carries a 1. The server acknowledges each bit with `SIGUSR1`, so the
client never sends faster than the server can read. A terminating zero
byte ends the message; the server answers it with `SIGUSR2`, and the
client prints `done!` and exits.

## Requirements

A POSIX system with `SIGUSR1` and `SIGUSR2`. The server waits for signals
with `signal.sigwaitinfo`, which Python provides on Linux but not on
macOS. The client uses `signal.sigwait` and `signal.pthread_sigmask`.

## Installation

```
pip install .
```

## Usage

Start the server. It prints its process id and then waits for bits:

```
$ sigtalk-server
48213
```

From another terminal, send a message to that id:

```
$ sigtalk-client 48213 "hello there"
done!
```

The server writes each byte to standard output as soon as it is
complete. At the end of a message it writes the zero byte itself followed
by a newline, replies with `SIGUSR2`, and keeps listening. Stop it with
Ctrl-C.

The client needs exactly two arguments, the server's pid and the string.
With any other number it prints
`Usage: sigtalk-client <server_pid> <string>` to standard error and exits
with status 1. A pid that reads as zero prints `invalid server pid`, and a
signal that cannot be delivered prints `cannot signal process <pid>: ...`;
both exit with status 1. The pid is read like C's `atoi`: leading
whitespace and an optional sign are skipped and parsing stops at the first
non-digit. A message may not contain a zero byte.

## Library

The protocol does not depend on signals, so it can be used and tested
directly:

- `sigtalk.protocol.encode_message(text)` returns the list of `Bit`
  values (`Bit.ZERO`, `Bit.ONE`) for a `str` or `bytes` message,
  including the closing zero byte. A message that contains a zero byte
  raises `ValueError`.
- `sigtalk.protocol.BitEncoder(message)` hands out those bits one at a
  time with `next_bit()` (raising `IndexError` when none are left) or by
  iteration.
- `sigtalk.protocol.ByteDecoder().feed(bit)` collects bits and returns
  each completed byte, or `None` while a byte is still incomplete.
- `sigtalk.server.Server(output)` decodes bits into a binary stream.
  `handle(signum, sender)` takes one bit and returns the signal to reply
  with; `serve()` prints the pid and runs the receive loop.
- `sigtalk.client.Client(pid, message, send=None)` sends a message.
  `send_next()` sends one bit, `handle(signum)` reacts to a reply and
  returns `True` once the server has confirmed the end, and `run()` sends
  the whole message. `send` replaces `os.kill`, so a test can capture the
  signals with a plain callable.

The package also contains small helpers in the style of the C library:

- `sigtalk.chars`: `isalpha`, `isdigit`, `isalnum`, `isascii`,
  `isprint`, `isspace`, `toupper` and `tolower`, each taking a
  one-character string or an integer code.
- `sigtalk.conversions`: `atoi` (wraps like a 32-bit int), `itoa`,
  `itoa_base(n, base)` for unsigned 64-bit values with any digit set, and
  `strtoll(text, radix=0)`, which detects `0x` and leading-`0` prefixes,
  raises `ValueError` for a bad radix or no digits, and raises
  `OutOfRangeError` (with the clamped `value`) on 64-bit overflow.
- `sigtalk.memory`: `memset`, `bzero`, `memcpy`, `memmove` (offsets
  within one `bytearray`, overlap-safe), `memchr` (returns an offset or
  `None`), `memcmp` and `calloc` (a zero count or size gives one byte).
- `sigtalk.linkedlist`: `LinkedList` of `Node`s with `add_front`,
  `add_back`, `last`, `clear`, `for_each` and `map`; `map` raises
  `ValueError` if the function returns `None`.
- `sigtalk.textutil`: `split`, `strtrim`, `substr`, `strnstr`, `strchr`,
  `strrchr`, `strncmp`, `strlcpy` and `strlcat` (both return the new
  string and the length they tried to create), `strjoin`, `strmapi` and
  `striteri`.
- `sigtalk.printf`: `format(fmt, *args)` and `printf(fmt, *args, fd=1)`
  for the `%c %s %p %d %i %u %x %X %%` directives, plus `put_char`,
  `put_str`, `put_endl` and `put_nbr` for writing to a file descriptor.

## Limitations

- The server keeps one decoding state. Two clients sending at the same
  time would have their bits mixed together.
- There are no timeouts: a client whose acknowledgement never arrives
  waits forever.

## Running the tests

```
pip install ".[test]"
pytest
```