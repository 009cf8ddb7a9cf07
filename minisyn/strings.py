"""Small string helpers used by the shell front end."""

from __future__ import annotations

import re
from itertools import zip_longest

_WHITESPACE = " \f\n\r\t\v"
_NUMBER = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping leading whitespace.

    Anything after the digits is ignored; text without digits gives 0.
    """
    match = _NUMBER.match(text)
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def itoa(number: int) -> str:
    """Render an integer in decimal."""
    return str(number)


def split_words(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def trim(text: str, chars: str) -> str:
    """Remove characters found in ``chars`` from both ends of ``text``."""
    return text.strip(chars) if chars else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def find_within(haystack: str, needle: str, limit: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``limit`` characters.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    if not needle:
        return 0
    index = haystack.find(needle, 0, max(limit, 0))
    return None if index < 0 else index


def compare_prefix(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` bytes of two strings.

    Returns the difference of the first differing bytes (the end of a
    string counting as 0), or 0 if the compared prefixes are equal.
    """
    left = first.encode()[:max(count, 0)]
    right = second.encode()[:max(count, 0)]
    for a, b in zip_longest(left, right, fillvalue=0):
        if a != b or a == 0:
            return a - b
    return 0


def same(first: str | None, second: str | None) -> bool:
    """True when both strings are present and equal."""
    if first is None or second is None:
        return False
    return first == second


def is_space(char: str) -> bool:
    """True for space, form feed, newline, carriage return and tabs."""
    return len(char) == 1 and char in _WHITESPACE


def join(first: str | None, second: str | None) -> str:
    """Concatenate two strings, treating a missing one as empty."""
    return (first or "") + (second or "")