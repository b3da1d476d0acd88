"""A small printf supporting the conversions %d %i %u %x %X %c %s %p and %%."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterator
from typing import Any

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF
_PIECE_PATTERN = re.compile(r"[^%]+|%(.?)", re.DOTALL)


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _format_char(value: Any) -> str:
    if isinstance(value, int):
        return chr(value & 0xFF)
    if isinstance(value, (bytes, bytearray)) and len(value) == 1:
        return chr(value[0])
    if isinstance(value, str) and len(value) == 1:
        return value
    raise TypeError(f"%c requires an int or a single character, not {value!r}")


def _format_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode("latin-1")
    if not isinstance(value, str):
        raise TypeError(f"%s requires a string, not {type(value).__name__}")
    return value.split("\0", 1)[0]


def _format_pointer(value: Any) -> str:
    address = 0 if value is None else int(value) & _POINTER_MASK
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec in ("d", "i"):
        return str(_to_int32(int(_next_arg(args))))
    if spec == "u":
        return str(int(_next_arg(args)) & _UINT_MASK)
    if spec in ("x", "X"):
        return format(int(_next_arg(args)) & _UINT_MASK, spec)
    if spec == "c":
        return _format_char(_next_arg(args))
    if spec == "s":
        return _format_string(_next_arg(args))
    if spec == "p":
        return _format_pointer(_next_arg(args))
    if spec == "%":
        return "%"
    # Unknown conversions are consumed and produce nothing.
    return ""


def format_string(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args`` and return the resulting text."""
    if fmt is None:
        raise TypeError("format string must not be None")
    arg_iter = iter(args)
    pieces: list[str] = []
    for match in _PIECE_PATTERN.finditer(fmt):
        piece = match.group(0)
        if not piece.startswith("%"):
            pieces.append(piece)
            continue
        spec = match.group(1)
        if not spec:
            break
        pieces.append(_convert(spec, arg_iter))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length.

    Returns -1 when ``fmt`` is None.
    """
    if fmt is None:
        return -1
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)