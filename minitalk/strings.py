"""String and byte-buffer helpers with the library's rules.

The searching functions return the position of what they found, or None
where nothing was found. A search for the NUL character finds the
position just past the end of the text, where a terminator would sit.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional

_NUL = "\0"


def split(text: str, sep: str) -> list[str]:
    """Split text on every occurrence of the single character sep.

    Empty pieces, from leading, trailing or repeated separators, are dropped.
    """
    return [piece for piece in text.split(sep) if piece]


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text from position start.

    A start at or past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strtrim(text: str, chars: str) -> str:
    """Remove every character found in chars from both ends of text."""
    return text.strip(chars)


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find needle lying wholly within the first length characters of haystack.

    An empty needle is found at position 0.
    """
    if not needle:
        return 0
    if length <= 0:
        return None
    index = haystack.find(needle, 0, length)
    return index if index >= 0 else None


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most n characters of a and b.

    Comparison stops at the first difference or at the end of either text;
    the result is the difference of the character codes found there.
    """
    for ca, cb in zip_longest(a[:n], b[:n], fillvalue=_NUL):
        if ca == _NUL or cb == _NUL or ca != cb:
            return ord(ca) - ord(cb)
    return 0


def strchr(text: str, c: str) -> Optional[int]:
    """Return the position of the first c in text.

    Searching for NUL gives the length of the text when no NUL is present.
    """
    index = text.find(c)
    if index >= 0:
        return index
    return len(text) if c == _NUL else None


def strrchr(text: str, c: str) -> Optional[int]:
    """Return the position of the last c in text.

    Searching for NUL gives the length of the text.
    """
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return index if index >= 0 else None


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text and the full length of src, so a result length
    of size or more means the copy was truncated.
    """
    if size <= 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dest within a buffer of size characters.

    Returns the resulting text and the length the full result would have
    had. When size does not exceed the length of dest, nothing is appended
    and the length returned is size plus the length of src.
    """
    if size <= len(dest):
        return dest, len(src) + size
    room = size - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)


def strjoin(a: str, b: str) -> str:
    """Return a followed by b."""
    return a + b


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) applied to each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    text: MutableSequence,
    func: Optional[Callable[[int, object], object]],
) -> None:
    """Apply func(index, item) to each item of a mutable sequence in place.

    A value returned by func replaces the item; None leaves it unchanged.
    Nothing happens when func is None.
    """
    if func is None:
        return
    for index, item in enumerate(list(text)):
        replacement = func(index, item)
        if replacement is not None:
            text[index] = replacement


def memchr(data: bytes, c: int, n: int) -> Optional[int]:
    """Return the position of the first byte equal to c within data[:n]."""
    index = bytes(data).find(c & 0xFF, 0, max(n, 0))
    return index if index >= 0 else None


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first n bytes of a and b.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if n > len(a) or n > len(b):
        raise ValueError("n exceeds the length of a buffer")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0