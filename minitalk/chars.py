"""ASCII character classification and case mapping.

Every function accepts either an integer code or a one-character string.
The case mappers return a value of the same type they were given.
"""

from __future__ import annotations

from typing import Union

Char = Union[int, str]


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return c


def isdigit(c: Char) -> bool:
    """True for '0' through '9'."""
    return ord("0") <= _code(c) <= ord("9")


def isalpha(c: Char) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isalnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: Char) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def isprint(c: Char) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def _mapped(c: Char, code: int) -> Char:
    return chr(code) if isinstance(c, str) else code


def toupper(c: Char) -> Char:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _mapped(c, code)


def tolower(c: Char) -> Char:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _mapped(c, code)