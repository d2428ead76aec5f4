"""Splitting a command line into words.

Words are separated by spaces. A word that begins with a single quote runs
to the next single quote, which is dropped along with the opening one; no
other quoting or escaping is recognised. Trailing spaces after the last
word yield one final empty word.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

_WORD = re.compile(r" *('[^']*'?|[^ ]*)")


def _terminated(text: str) -> str:
    end = text.find("\0")
    return text if end < 0 else text[:end]


def _word_starts(text: str) -> Iterator[int]:
    position = 0
    while position < len(text):
        match = _WORD.match(text, position)
        yield match.start(1)
        position = match.end()


def count_words(text: str) -> int:
    """Number of words ``split_command`` finds in ``text``."""
    return sum(1 for _ in _word_starts(_terminated(text)))


def build_word(text: str) -> str:
    """The word at the start of ``text``, without its surrounding quotes."""
    text = _terminated(text)
    if text.startswith("'"):
        return text[1:].split("'", 1)[0]
    return text.split(" ", 1)[0]


def split_command(text: str) -> list[str]:
    """The words of the command line ``text``, in order."""
    text = _terminated(text)
    return [build_word(text[start:]) for start in _word_starts(text)]