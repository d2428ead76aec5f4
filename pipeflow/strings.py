"""String helpers with C string semantics on Python text.

A string ends at its first NUL character, if it has one. Positions are
returned as indices, or ``None`` where nothing was found.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional, Union

Char = Union[str, int]

_WHITESPACE = " \t\n\v\f\r"
_INT_MIN_TEXT = "-2147483648"


def _terminated(text: str) -> str:
    """The part of ``text`` before its first NUL character."""
    end = text.find("\0")
    return text if end < 0 else text[:end]


def _char(c: Char) -> str:
    """A one-character string for ``c``; integers keep only their low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return chr(c & 0xFF)


def _non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way a 32-bit C ``atoi`` does.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Results outside the 32-bit range wrap around.
    """
    text = _terminated(text)
    if text.startswith(_INT_MIN_TEXT):
        return -2147483648
    body = text.lstrip(_WHITESPACE)
    sign = 1
    if body[:1] in ("+", "-"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    digits = []
    for ch in body:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    result = int("".join(digits)) if digits else 0
    return _wrap_int32(sign * result)


def itoa(n: int) -> str:
    """Decimal text of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)


def strchr(text: str, c: Char) -> Optional[int]:
    """Index of the first ``c`` in ``text``; searching for NUL finds the end."""
    text = _terminated(text)
    target = _char(c)
    if target == "\0":
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, c: Char) -> Optional[int]:
    """Index of the last ``c`` in ``text``; searching for NUL finds the end."""
    text = _terminated(text)
    target = _char(c)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; the difference of the first mismatch."""
    _non_negative(n, "n")
    a = _terminated(a)
    b = _terminated(b)
    for i in range(n):
        left = ord(a[i]) if i < len(a) else 0
        right = ord(b[i]) if i < len(b) else 0
        if left != right or left == 0:
            return left - right
    return 0


def strnstr(haystack: str, needle: str, size: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``size`` characters."""
    _non_negative(size, "size")
    needle = _terminated(needle)
    if not needle:
        return 0
    index = _terminated(haystack)[:size].find(needle)
    return None if index < 0 else index


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``; empty past the end."""
    _non_negative(start, "start")
    _non_negative(length, "length")
    text = _terminated(text)
    if start >= len(text):
        return ""
    return text[start:start + length]


def join(a: str, b: str) -> str:
    """``a`` followed by ``b``."""
    return _terminated(a) + _terminated(b)


def strtrim(text: str, chars: str) -> str:
    """``text`` without the characters of ``chars`` at either end."""
    chars = _terminated(chars)
    text = _terminated(text)
    if not chars:
        return text
    return text.strip(chars)


def split(text: str, sep: Char) -> list[str]:
    """The non-empty pieces of ``text`` between occurrences of ``sep``."""
    text = _terminated(text)
    separator = _char(sep)
    if separator == "\0":
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """A new string built from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(_terminated(text)))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]) -> None:
    """Call ``func(index, char)`` on each character, in place.

    A character is replaced by what ``func`` returns, unless it returns
    ``None``. Iteration stops at a NUL character.
    """
    for index, ch in enumerate(chars):
        if ch == "\0":
            break
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement