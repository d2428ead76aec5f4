import io
import os

import pytest

from pipeflow.heredoc import is_limiter, read_here_doc
from pipeflow.linereader import LineReader


@pytest.mark.parametrize(
    "line, limiter, expected",
    [
        ("EOF\n", "EOF", True),
        ("EOF", "EOF", False),
        ("EOFX", "EOF", False),
        ("EOX\n", "EOF", False),
        ("EOF \n", "EOF", False),
        ("\n", "", True),
        ("", "", False),
    ],
)
def test_is_limiter(line, limiter, expected):
    assert is_limiter(line, limiter) is expected


def test_read_until_limiter(capsys):
    stream = io.StringIO("a\nb\nEOF\nc\n")
    assert read_here_doc(stream, "EOF") == "a\nb\n"
    assert capsys.readouterr().out == ">" * 3
    assert stream.read() == "c\n"


def test_read_until_end_of_input(capsys):
    stream = io.StringIO("one\ntwo")
    assert read_here_doc(stream, "EOF") == "one\ntwo"
    assert capsys.readouterr().out == ">" * 3


def test_limiter_without_newline_is_data(capsys):
    stream = io.StringIO("x\nEOF")
    assert read_here_doc(stream, "EOF", prompt=None) == "x\nEOF"
    assert capsys.readouterr().out == ""


def test_custom_prompt(capsys):
    stream = io.StringIO("END\n")
    assert read_here_doc(stream, "END", prompt="heredoc> ") == ""
    assert capsys.readouterr().out == "heredoc> "


def test_reads_from_line_reader(capsys):
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, b"hello\nworld\nSTOP\nafter\n")
        os.close(write_fd)
        reader = LineReader(read_fd)
        assert read_here_doc(reader, "STOP", prompt="") == "hello\nworld\n"
        assert reader.read_line() == "after\n"
    finally:
        os.close(read_fd)
    assert capsys.readouterr().out == ""