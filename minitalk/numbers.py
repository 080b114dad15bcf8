"""Integer parsing and formatting with the library's rules."""

from __future__ import annotations

_SPACE = " \t\n\v\f\r"


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading blanks (space and '\\t' through '\\r') are skipped, one optional
    sign is taken, and digits are read until the first non-digit. Two signs
    in a row give 0, as does text with no digits.
    """
    rest = text.lstrip(_SPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
        if rest[:1] in ("-", "+"):
            return 0
    result = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return sign * result


def itoa(n: int) -> str:
    """Format an integer as decimal text, with a leading '-' if negative."""
    return str(n)