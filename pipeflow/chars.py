"""Character classification and case conversion for single characters.

Every function accepts either a one-character string or an integer code.
Case conversions hand back the same kind of value they were given.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]


def _code(c: Char) -> int:
    """Return the integer code of ``c``, validating one-character strings."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return c


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def is_alpha(c: Char) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def is_digit(c: Char) -> bool:
    """True for the ASCII digits 0-9."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) < 128


def is_print(c: Char) -> bool:
    """True for printable ASCII characters, space through tilde."""
    return 32 <= _code(c) <= 126


def _wrap_signed(code: int) -> int:
    # Negative values from a signed char are folded into the unsigned range;
    # -1 is left alone so that an end-of-file marker passes through.
    if -128 <= code <= -2:
        return code + 256
    return code


def to_lower(c: Char) -> Char:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _wrap_signed(_code(c))
    if _is_upper(code):
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: Char) -> Char:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _wrap_signed(_code(c))
    if _is_lower(code):
        code -= 32
    return chr(code) if isinstance(c, str) else code