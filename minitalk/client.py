"""Client that sends a message to a server one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
import time

_LONG_MAX = (1 << 63) - 1
_LONG_MIN = -(1 << 63)
_BIT_DELAY = 0.0005
_BYTE_DELAY = 0.0001


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def parse_pid(text: str) -> int:
    """Parse a PID the way the C library's lenient atoi does, truncated to 32 bits.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Overflowing a long yields LONG_MAX or LONG_MIN cast to int.
    """
    rest = text.lstrip(" \t\n\v\f\r")
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    number = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digit = ord(ch) - ord("0")
        if sign == 1 and number > (_LONG_MAX - digit) // 10:
            return _to_int32(_LONG_MAX)
        if sign == -1 and -number < _trunc_div(_LONG_MIN + digit, 10):
            return _to_int32(_LONG_MIN)
        number = number * 10 + digit
    return _to_int32(number * sign)


def byte_to_signals(value: int) -> list[int]:
    """Return the eight signals encoding ``value``, most significant bit first."""
    return [
        signal.SIGUSR2 if value >> shift & 1 else signal.SIGUSR1
        for shift in range(7, -1, -1)
    ]


def send_message(pid: int, message: str | bytes) -> None:
    """Send every byte of ``message`` to ``pid``; raises OSError if a signal fails."""
    data = message.encode() if isinstance(message, str) else bytes(message)
    for value in data:
        for signum in byte_to_signals(value):
            os.kill(pid, signum)
            time.sleep(_BIT_DELAY)
        time.sleep(_BYTE_DELAY)


def _error() -> int:
    sys.stderr.write("Error\n")
    sys.stderr.flush()
    return 1


def main(argv: list[str] | None = None) -> int:
    """Usage: client PID MESSAGE."""
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) != 2:
        return _error()
    pid = parse_pid(argv[0])
    try:
        send_message(pid, os.fsencode(argv[1]))
    except OSError:
        return _error()
    return 0


if __name__ == "__main__":
    sys.exit(main())