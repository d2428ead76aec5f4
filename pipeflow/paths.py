"""Locating an executable from a command name and an environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Optional

Env = Optional[Mapping[str, str]]

_FALLBACK_DIRECTORY = "/usr/bin/"


def add_slash(path: str) -> str:
    """``path`` with a slash appended."""
    return path + "/"


def is_executable(path: str) -> bool:
    """True if ``path`` exists and may be executed."""
    return os.access(path, os.F_OK) and os.access(path, os.X_OK)


def has_path_variable(env: Env) -> bool:
    """True if the environment defines ``PATH``."""
    return bool(env) and "PATH" in env


def path_directories(env: Env) -> list[str]:
    """The non-empty directories listed in ``PATH``, in order."""
    if not has_path_variable(env):
        return []
    return [directory for directory in env["PATH"].split(":") if directory]


def search_path(name: str, env: Env) -> Optional[str]:
    """The first ``PATH`` entry holding ``name``, if it is executable.

    The search stops at the first directory where ``name`` exists: when that
    file is not executable, nothing is found.
    """
    for directory in path_directories(env):
        candidate = add_slash(directory) + name
        if os.access(candidate, os.F_OK):
            return candidate if os.access(candidate, os.X_OK) else None
    return None


def _try_fallback(name: str) -> Optional[str]:
    candidate = _FALLBACK_DIRECTORY + name
    return candidate if is_executable(candidate) else None


def find_command(name: Optional[str], env: Env) -> Optional[str]:
    """The path to run for the command ``name``, or ``None`` if there is none.

    A name that is itself an executable path is used as given. Otherwise
    ``PATH`` is searched, or ``/usr/bin`` when the environment has no
    ``PATH``. Empty names and names beginning with ``0`` are rejected.
    """
    if not name or name[0] == "0":
        return None
    if is_executable(name):
        return name
    if has_path_variable(env):
        return search_path(name, env)
    return _try_fallback(name)