"""A small printf: %c %s %d %i %u %x %X %p and %%, with C integer widths."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

_ARG_SPECIFIERS = frozenset("csdixXpu")


def _int32(n: int) -> int:
    n &= 0xFFFFFFFF
    return n - (1 << 32) if n & 0x80000000 else n


def _uint32(n: int) -> int:
    return n & 0xFFFFFFFF


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _pointer(value: Any) -> str:
    address = 0 if value is None else int(value) & 0xFFFFFFFFFFFFFFFF
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in _ARG_SPECIFIERS:
        return spec
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in "di":
        return str(_int32(int(value)))
    if spec == "u":
        return str(_uint32(int(value)))
    if spec == "x":
        return format(_uint32(int(value)), "x")
    if spec == "X":
        return format(_uint32(int(value)), "X")
    return _pointer(value)


def format_message(fmt: str, *args: Any) -> str:
    """Expand the directives of fmt with args and return the text.

    An unknown specifier stands for itself and consumes no argument.
    Extra arguments are ignored; too few raise TypeError, and a '%' at the
    very end of fmt raises ValueError.
    """
    values = iter(args)
    chars = iter(fmt)
    parts: list[str] = []
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with an incomplete directive")
        parts.append(_convert(spec, values))
    return "".join(parts)


def print_formatted(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the expanded fmt to stream (standard output by default).

    Returns the number of characters written.
    """
    text = format_message(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)


def write_number(n: int, stream: Optional[TextIO] = None) -> int:
    """Write n, taken as a 32-bit signed integer, in decimal to stream.

    Returns the number of characters written.
    """
    text = str(_int32(int(n)))
    (sys.stdout if stream is None else stream).write(text)
    return len(text)