"""Running a chain of commands between an input file and an output file.

The first command reads the input file, or a here-document collected from
standard input, and each command's output feeds the next one. The last
command writes to the output file, which is truncated, or appended to in
here-document mode.
"""

from __future__ import annotations

import os
import subprocess
import sys
import tempfile
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import IO, Any, Optional, TextIO

from pipeflow.command import split_command
from pipeflow.heredoc import read_here_doc
from pipeflow.paths import find_command

HERE_DOC = "here_doc"
PROGRAM = "pipeflow"

_USAGE = f"Wrong input\nUsage : {PROGRAM} in cmd1 ... cmdN out\n"
_HERE_DOC_USAGE = 'Wrong input\nusage : here_doc LIMIT "cmd1" ... "cmdN" out\n'


class UsageError(Exception):
    """The command-line arguments do not describe a pipeline."""

    def __init__(self, message: str, status: int = 1, to_stderr: bool = False) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.to_stderr = to_stderr


@dataclass
class Pipeline:
    """Commands to run in a chain, with where their input and output go.

    When ``limiter`` is set the input is a here-document ending at that
    limiter, and ``infile`` is not used.
    """

    commands: list[str]
    outfile: str
    infile: Optional[str] = None
    limiter: Optional[str] = None
    _devnull: list[IO[bytes]] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.commands:
            raise ValueError("a pipeline needs at least one command")
        if self.limiter is None and self.infile is None:
            raise ValueError("a pipeline needs an input file or a limiter")

    @property
    def here_doc(self) -> bool:
        """True when the input is a here-document."""
        return self.limiter is not None

    def run(
        self,
        env: Optional[Mapping[str, str]] = None,
        stdin: Any = None,
        stderr: Optional[TextIO] = None,
    ) -> list[int]:
        """Run the commands and return the exit codes of those that started."""
        env = os.environ if env is None else env
        stdin = sys.stdin if stdin is None else stdin
        stderr = sys.stderr if stderr is None else stderr

        processes: list[subprocess.Popen] = []
        middle = list(self.commands[:-1])
        current = self._open_input(stdin, stderr)
        if current is None:
            # An unreadable input file drops the first command.
            current = open(os.devnull, "rb")
            middle = middle[1:]
        try:
            for command in middle:
                process = _spawn(command, env, current, subprocess.PIPE, stderr)
                current.close()
                if process is None:
                    current = open(os.devnull, "rb")
                else:
                    processes.append(process)
                    current = process.stdout
            output = self._open_output(stderr)
            if output is not None:
                try:
                    process = _spawn(self.commands[-1], env, current, output, stderr)
                finally:
                    os.close(output)
                if process is not None:
                    processes.append(process)
        finally:
            current.close()
        return [process.wait() for process in processes]

    def _open_input(self, stdin: Any, stderr: TextIO) -> Optional[IO[bytes]]:
        if self.limiter is not None:
            text = read_here_doc(stdin, self.limiter)
            buffer = tempfile.TemporaryFile()
            buffer.write(text.encode("utf-8"))
            buffer.seek(0)
            return buffer
        try:
            return open(self.infile, "rb")
        except OSError:
            stderr.write("Failed to open infile\n")
            return None

    def _open_output(self, stderr: TextIO) -> Optional[int]:
        mode = os.O_APPEND if self.here_doc else os.O_TRUNC
        try:
            return os.open(self.outfile, os.O_WRONLY | os.O_CREAT | mode, 0o644)
        except OSError:
            stderr.write("Failed to access or create file\n")
            return None


def _not_found(words: Sequence[str], stderr: TextIO) -> None:
    name = f"{words[0]} " if words else ""
    stderr.write(f"/!\\ Command {name}not found /!\\\n")


def _spawn(
    command: str,
    env: Mapping[str, str],
    stdin: IO[bytes],
    stdout: Any,
    stderr: TextIO,
) -> Optional[subprocess.Popen]:
    words = split_command(command)
    path = find_command(words[0] if words else None, env)
    if path is None:
        _not_found(words, stderr)
        return None
    try:
        return subprocess.Popen(
            words, executable=path, env=dict(env), stdin=stdin, stdout=stdout
        )
    except OSError:
        _not_found(words, stderr)
        return None


def parse_arguments(args: Sequence[str]) -> Pipeline:
    """Build a pipeline from ``infile cmd1 ... cmdN outfile``.

    With ``here_doc LIMIT cmd1 ... cmdN outfile`` the input is a
    here-document ending at ``LIMIT``.
    """
    args = list(args)
    if len(args) < 4:
        raise UsageError(_USAGE, status=1)
    if args[0] == HERE_DOC:
        if len(args) < 5:
            raise UsageError(_HERE_DOC_USAGE, status=0, to_stderr=True)
        return Pipeline(commands=args[2:-1], outfile=args[-1], limiter=args[1])
    return Pipeline(commands=args[1:-1], outfile=args[-1], infile=args[0])


def run_pipeline(
    pipeline: Pipeline,
    env: Optional[Mapping[str, str]] = None,
    stdin: Any = None,
    stderr: Optional[TextIO] = None,
) -> list[int]:
    """Run ``pipeline`` and return the exit codes of the commands that started."""
    return pipeline.run(env, stdin, stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point; returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        pipeline = parse_arguments(args)
    except UsageError as error:
        stream = sys.stderr if error.to_stderr else sys.stdout
        stream.write(error.message)
        stream.flush()
        return error.status
    run_pipeline(pipeline)
    return 0