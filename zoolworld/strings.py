"""String searching, comparison, splitting and slicing helpers.

Strings are plain Python ``str`` values. Where a search or comparison
reaches the end of a string, the end behaves like a terminating
character of code 0, which sorts before every other character.
"""

from __future__ import annotations

from collections.abc import Callable

_TERMINATOR = "\0"


def _single_char(c: str, name: str = "c") -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"{name} must be a single character, got {c!r}")
    return c


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def split(text: str, sep: str) -> list[str]:
    """Split text on a separator character, dropping empty pieces."""
    _single_char(sep, "sep")
    return [word for word in text.split(sep) if word]


def find_char(text: str, c: str) -> int | None:
    """Index of the first occurrence of c in text, or None.

    Searching for the terminator character finds the end of the string.
    """
    _single_char(c)
    if c == _TERMINATOR and _TERMINATOR not in text:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def rfind_char(text: str, c: str) -> int | None:
    """Index of the last occurrence of c in text, or None.

    Searching for the terminator character finds the end of the string.
    """
    _single_char(c)
    if c == _TERMINATOR:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def _difference(s1: str, s2: str) -> int:
    for a, b in zip(s1, s2):
        if a != b:
            return ord(a) - ord(b)
    if len(s1) > len(s2):
        return ord(s1[len(s2)])
    if len(s2) > len(s1):
        return -ord(s2[len(s1)])
    return 0


def compare(s1: str, s2: str) -> int:
    """Compare two strings.

    Returns 0 when they are equal, otherwise the difference between the
    codes of the first pair of characters that differ.
    """
    return _difference(s1, s2)


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most the first n characters of two strings, as compare does."""
    _non_negative(n, "n")
    return _difference(s1[:n], s2[:n])


def find_within(big: str, little: str, length: int) -> int | None:
    """Index of the first occurrence of little lying wholly within big[:length].

    An empty needle is found at index 0.
    """
    _non_negative(length, "length")
    if not little:
        return 0
    index = big.find(little, 0, length)
    return None if index < 0 else index


def trim(text: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in charset."""
    return text.strip(charset)


def substring(text: str, start: int, length: int) -> str:
    """Up to length characters of text from start; empty if start is past the end."""
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start > len(text):
        return ""
    return text[start:start + length]


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) applied to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))