"""Shell-style command pipelines between files, with here-document input, plus string, character, line-reading and printf helpers."""

__version__ = "1.0.0"