"""Turning bytes into signal-sized bits and back again."""

from __future__ import annotations

from typing import Optional, Union

BITS_PER_BYTE = 8
TERMINATOR = b"\0"


def byte_bits(byte: int) -> tuple[int, ...]:
    """Return the eight bits of a byte, most significant first."""
    if not 0 <= byte <= 0xFF:
        raise ValueError("byte must lie between 0 and 255")
    return tuple((byte >> shift) & 1 for shift in range(BITS_PER_BYTE - 1, -1, -1))


def message_bytes(message: Union[str, bytes]) -> bytes:
    """Return the bytes that carry a message, NUL terminator included.

    Text is encoded as UTF-8. A message may not hold a NUL of its own,
    since that would end it early on the receiving side.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    if TERMINATOR in data:
        raise ValueError("message must not contain a NUL byte")
    return data + TERMINATOR


class BitAssembler:
    """Collect bits, most significant first, into whole bytes."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    def push(self, bit: int) -> Optional[int]:
        """Add one bit; return the byte once eight bits are in, else None."""
        if bit not in (0, 1):
            raise ValueError("bit must be 0 or 1")
        self._value = (self._value << 1) | int(bit)
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._value
        self._value = 0
        self._count = 0
        return byte