"""Server that rebuilds bytes from SIGUSR1/SIGUSR2 bit signals and prints them."""

from __future__ import annotations

import os
import signal
import sys
from dataclasses import dataclass

from minitalk.printf import printf


@dataclass
class BitDecoder:
    """Accumulates bits, most significant first: SIGUSR2 is 1, anything else 0."""

    byte: int = 0
    bits: int = 0

    def feed(self, signum: int) -> int | None:
        """Add one bit; return the completed byte value after the eighth bit."""
        if signum == signal.SIGUSR2:
            self.byte |= 1 << (7 - self.bits)
        self.bits += 1
        if self.bits < 8:
            return None
        value = self.byte
        self.byte = 0
        self.bits = 0
        return value


def _emit(value: int) -> None:
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is None:
        sys.stdout.write(chr(value))
        sys.stdout.flush()
        return
    sys.stdout.flush()
    buffer.write(bytes([value]))
    buffer.flush()


def _error_exit() -> None:
    sys.stderr.write("Error\n")
    sys.stderr.flush()
    sys.exit(1)


def run_server() -> None:
    """Print this process's PID, then decode incoming signals forever."""
    printf("PID:%d\n", os.getpid())
    decoder = BitDecoder()

    def handle(signum, _frame):
        value = decoder.feed(signum)
        if value is not None:
            _emit(value)

    try:
        signal.signal(signal.SIGUSR1, handle)
        signal.signal(signal.SIGUSR2, handle)
    except (OSError, ValueError, AttributeError):
        _error_exit()
    while True:
        signal.pause()


def main(argv: list[str] | None = None) -> int:
    """Start the server when called with no arguments."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        run_server()
    return 0


if __name__ == "__main__":
    sys.exit(main())