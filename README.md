# minitalk

A pair of commands that pass text from one process to another using only the
POSIX signals `SIGUSR1` and `SIGUSR2`. Each byte of the message is sent as
eight signals, most significant bit first. `SIGUSR1` carries a 0 bit and
`SIGUSR2` carries a 1 bit. The server puts the bits back together and writes
each byte to standard output as soon as its eighth bit arrives.

A POSIX system (Linux, macOS, BSD) is required, because the commands rely on
`SIGUSR1`/`SIGUSR2`, `os.kill` and `signal.pause`.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal. It prints its process id and then waits
for signals until it is killed:

```
$ minitalk-server
PID:12345
```

If the server is given any arguments, it exits at once with status 0 and does
nothing. If it cannot install its signal handlers, it writes `Error` to
standard error and exits with status 1.

From another terminal, send a message to that process id:

```
$ minitalk-client 12345 "hello, world"
```

The server prints `hello, world` as the bits arrive. The client sends the
message's bytes in the filesystem encoding and pauses briefly after every
signal.

The client takes exactly two arguments: the server's PID and the message.
With any other number of arguments, or when a signal cannot be delivered, it
writes `Error` to standard error and exits with status 1.

The PID is parsed leniently, like C's `atoi`: leading whitespace and one
`+` or `-` are accepted, and parsing stops at the first non-digit, so
`"12abc"` gives `12` and `"abc"` gives `0`. The result is truncated to a
32-bit signed integer.

## Library use

The pieces can also be used from Python:

```python
from minitalk.client import parse_pid, byte_to_signals, send_message
from minitalk.server import BitDecoder
from minitalk.printf import format_string, printf

pid = parse_pid("  +12345")          # 12345
signals = byte_to_signals(ord("A"))  # eight signal numbers, high bit first

decoder = BitDecoder()
for signum in signals:
    byte = decoder.feed(signum)      # None until the eighth bit arrives
print(byte)                          # 65

format_string("PID:%d\n", 42)        # "PID:42\n"
```

- `minitalk.client.send_message(pid, message)` sends every byte of a `str`
  (UTF-8 encoded) or `bytes` message to `pid`, raising `OSError` if a signal
  cannot be sent.
- `minitalk.server.BitDecoder` counts `SIGUSR2` as a 1 bit and any other
  signal as a 0 bit; `feed` returns the byte value after every eighth bit and
  starts afresh.
- `minitalk.server.run_server()` prints the PID and decodes signals forever.

### Formatting

`format_string(fmt, *args)` returns the formatted text and `printf(fmt, *args)`
writes it to standard output and returns its length (or `-1` when `fmt` is
`None`). The conversions are:

| Conversion | Output |
|------------|--------|
| `%d`, `%i` | signed decimal, wrapped to 32 bits |
| `%u`       | unsigned decimal, wrapped to 32 bits |
| `%x`, `%X` | lower/upper case hexadecimal, wrapped to 32 bits |
| `%c`       | one character (an int, a one-character string or a one-byte bytes) |
| `%s`       | a string or bytes, cut at the first NUL; `None` gives `(null)` |
| `%p`       | `0x` followed by hexadecimal; `0` or `None` gives `(nil)` |
| `%%`       | a literal `%` |

There are no flags, widths or precisions. An unknown conversion character is
consumed and produces nothing, and a lone `%` at the end of the format ends
the output. Too few arguments raise `TypeError`.

## Limitations

The server has no acknowledgement back to the client: the client cannot tell
whether bits arrived, and signals sent faster than the server handles them may
be lost. The server only writes bytes out; it keeps no record of messages.

## Running the tests

```
pip install ".[test]"
pytest
```