"""String helpers with C-library style semantics, returning Python values."""

from __future__ import annotations

from collections.abc import Callable
from itertools import islice, zip_longest

_TERMINATOR = "\0"


def _char(c: int | str) -> str:
    """Return ``c`` as a one-character string, given a code or a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    if not 0 <= c <= 0x10FFFF:
        raise ValueError(f"character code out of range: {c}")
    return chr(c)


def _non_negative(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _codes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def split(text: str, sep: int | str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    return [word for word in text.split(_char(sep)) if word]


def strtrim(text: str, chars: str) -> str:
    """Remove every leading and trailing character that appears in ``chars``."""
    return text.strip(chars) if chars else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or beyond the end gives an empty string.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> str | None:
    """Find ``needle`` wholly inside the first ``length`` characters of ``haystack``.

    Returns the rest of ``haystack`` from the match, or None. An empty needle
    matches at the start.
    """
    _non_negative("length", length)
    index = haystack[:length].find(needle)
    return None if index < 0 else haystack[index:]


def strncmp(s1: str | bytes, s2: str | bytes, n: int) -> int:
    """Compare at most ``n`` bytes as unsigned values.

    Returns 0 when equal, otherwise the difference of the first differing
    bytes. Text is compared by its UTF-8 bytes; a shorter string compares as
    if padded with zero bytes.
    """
    _non_negative("n", n)
    pairs = zip_longest(_codes(s1), _codes(s2), fillvalue=0)
    for a, b in islice(pairs, n):
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strchr(text: str, c: int | str) -> str | None:
    """Return ``text`` from the first occurrence of ``c``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    index = text.find(ch)
    if index < 0:
        return "" if ch == _TERMINATOR else None
    return text[index:]


def strrchr(text: str, c: int | str) -> str | None:
    """Return ``text`` from the last occurrence of ``c``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == _TERMINATOR:
        return ""
    index = text.rfind(ch)
    return None if index < 0 else text[index:]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character of ``text``."""
    return "".join(func(index, ch) for index, ch in enumerate(text))