"""A small printf supporting the conversions c, s, d, i, u, x, X, p and %.

Integers are treated as C values: ``%d`` and ``%i`` as signed 32-bit,
``%u``, ``%x`` and ``%X`` as unsigned 32-bit, ``%p`` as an unsigned 64-bit
address. An unknown conversion, and a lone ``%`` at the end of the format,
produce no output and consume no argument.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any, Optional, Union

Char = Union[str, int]

_HEX_DIGITS = "0123456789abcdef"


def _require_int(n: Any) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return n


def _to_int32(n: int) -> int:
    n &= 0xFFFFFFFF
    return n - 0x100000000 if n >= 0x80000000 else n


def _hex(n: int) -> str:
    digits = []
    while True:
        n, rest = divmod(n, 16)
        digits.append(_HEX_DIGITS[rest])
        if n == 0:
            break
    return "".join(reversed(digits))


def format_char(c: Char) -> str:
    """One character; an integer keeps only its low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(_require_int(c) & 0xFF)


def format_str(value: Optional[str]) -> str:
    """The string up to its first NUL, or ``(null)`` for ``None``."""
    if value is None:
        return "(null)"
    end = value.find("\0")
    return value if end < 0 else value[:end]


def format_int(n: int) -> str:
    """Decimal form of ``n`` taken as a signed 32-bit integer."""
    return str(_to_int32(_require_int(n)))


def format_unsigned(n: int) -> str:
    """Decimal form of ``n`` taken as an unsigned 32-bit integer."""
    return str(_require_int(n) & 0xFFFFFFFF)


def format_hex(n: int, upper: bool = False) -> str:
    """Hexadecimal form of ``n`` taken as an unsigned 32-bit integer."""
    text = _hex(_require_int(n) & 0xFFFFFFFF)
    return text.upper() if upper else text


def format_pointer(address: Optional[int]) -> str:
    """``0x`` and the lower-case hex address, or ``(nil)`` for a null address."""
    if address is None:
        return "(nil)"
    value = _require_int(address) & 0xFFFFFFFFFFFFFFFF
    if value == 0:
        return "(nil)"
    return "0x" + _hex(value)


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)

    def take(spec: str) -> Any:
        try:
            return next(remaining)
        except StopIteration:
            raise ValueError(f"not enough arguments for %{spec}") from None

    chars = iter(format_str(fmt))
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, "")
        if spec == "c":
            yield format_char(take(spec))
        elif spec == "s":
            yield format_str(take(spec))
        elif spec in ("d", "i"):
            yield format_int(take(spec))
        elif spec in ("x", "X"):
            yield format_hex(take(spec), upper=spec == "X")
        elif spec == "p":
            yield format_pointer(take(spec))
        elif spec == "u":
            yield format_unsigned(take(spec))
        elif spec == "%":
            yield "%"


def sprintf(fmt: str, *args: Any) -> str:
    """The text that ``printf`` would write for ``fmt`` and ``args``."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, fd: int = 1) -> int:
    """Write the formatted text to ``fd`` and return its length in characters."""
    text = sprintf(fmt, *args)
    if fd >= 0:
        view = memoryview(text.encode("utf-8"))
        while view:
            view = view[os.write(fd, view):]
    return len(text)