import os
import stat

import pytest

from pipeflow.paths import (
    add_slash,
    find_command,
    has_path_variable,
    is_executable,
    path_directories,
    search_path,
)


def _make_file(path, executable=True):
    path.write_text("#!/bin/sh\nexit 0\n")
    mode = stat.S_IRUSR | stat.S_IWUSR
    if executable:
        mode |= stat.S_IXUSR
    path.chmod(mode)
    return path


def test_add_slash():
    assert add_slash("/usr/bin") == "/usr/bin/"
    assert add_slash("") == "/"


def test_is_executable(tmp_path):
    runnable = _make_file(tmp_path / "run")
    plain = _make_file(tmp_path / "plain", executable=False)
    assert is_executable(str(runnable)) is True
    assert is_executable(str(plain)) is False
    assert is_executable(str(tmp_path / "missing")) is False


@pytest.mark.parametrize(
    "env, expected",
    [({"PATH": "/bin"}, True), ({"HOME": "/home"}, False), ({}, False), (None, False)],
)
def test_has_path_variable(env, expected):
    assert has_path_variable(env) is expected


def test_path_directories_skips_empty_entries():
    assert path_directories({"PATH": "/a::/b:"}) == ["/a", "/b"]


def test_path_directories_without_path():
    assert path_directories({}) == []
    assert path_directories(None) == []


def test_search_path_finds_in_order(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    _make_file(second / "tool")
    env = {"PATH": f"{first}:{second}"}
    assert search_path("tool", env) == f"{second}/tool"


def test_search_path_stops_at_non_executable(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    _make_file(first / "tool", executable=False)
    _make_file(second / "tool")
    env = {"PATH": f"{first}:{second}"}
    assert search_path("tool", env) is None


def test_search_path_missing(tmp_path):
    assert search_path("tool", {"PATH": str(tmp_path)}) is None


def test_find_command_rejects_empty_and_zero():
    assert find_command("", {"PATH": "/bin"}) is None
    assert find_command(None, {"PATH": "/bin"}) is None
    assert find_command("0tool", {"PATH": "/bin"}) is None


def test_find_command_uses_given_path(tmp_path):
    runnable = _make_file(tmp_path / "run")
    assert find_command(str(runnable), {}) == str(runnable)


def test_find_command_searches_path(tmp_path):
    _make_file(tmp_path / "tool")
    assert find_command("tool", {"PATH": str(tmp_path)}) == f"{tmp_path}/tool"


def test_find_command_relative_in_cwd(tmp_path, monkeypatch):
    _make_file(tmp_path / "local")
    monkeypatch.chdir(tmp_path)
    assert find_command("local", {"PATH": "/nonexistent"}) == "local"


def test_find_command_without_path_falls_back(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    name = "pipeflow-missing-command"
    assert find_command(name, {}) is None
    assert not os.path.exists("/usr/bin/" + name)