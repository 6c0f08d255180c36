"""Tests for the directory alias capability."""

import os
import subprocess

import pytest

from plugin_deploy.api.exceptions import LinkCreationError
from plugin_deploy.core import linker
from plugin_deploy.core.linker import (
    JunctionAlias,
    SymlinkAlias,
    alias_points_to,
    get_directory_alias,
    is_directory_alias,
    read_alias_target,
)


@pytest.mark.parametrize("platform, expected", [
    ("win32", JunctionAlias),
    ("linux", SymlinkAlias),
    ("darwin", SymlinkAlias),
])
def test_platform_selection(platform, expected):
    assert type(get_directory_alias(platform)) is expected


def test_symlink_alias_creates_directory_link(tmp_path):
    source = tmp_path / "dist"
    source.mkdir()
    (source / "main.js").write_text("x")
    link = tmp_path / "plugin"

    SymlinkAlias().create(link, source)

    assert is_directory_alias(link)
    assert (link / "main.js").read_text() == "x"
    assert alias_points_to(link, source)


def test_symlink_alias_failure_raises(tmp_path):
    source = tmp_path / "dist"
    source.mkdir()
    link = tmp_path / "plugin"
    link.mkdir()

    with pytest.raises(LinkCreationError) as exc_info:
        SymlinkAlias().create(link, source)

    assert exc_info.value.link_path == link
    assert exc_info.value.error_code == "PD004"


def test_relative_link_target_resolved_against_link_parent(tmp_path):
    source = tmp_path / "project" / "dist"
    source.mkdir(parents=True)
    plugins = tmp_path / "vault" / "plugins"
    plugins.mkdir(parents=True)
    link = plugins / "sample"
    os.symlink(os.path.join("..", "..", "project", "dist"), link, target_is_directory=True)

    assert read_alias_target(link) == source
    assert alias_points_to(link, source)


def test_read_alias_target_of_plain_directory(tmp_path):
    assert read_alias_target(tmp_path) is None
    assert not alias_points_to(tmp_path, tmp_path)


def test_broken_link_points_nowhere(tmp_path):
    dist = tmp_path / "dist"
    dist.mkdir()
    link = tmp_path / "plugin"
    os.symlink(tmp_path / "gone", link, target_is_directory=True)

    assert is_directory_alias(link)
    assert not alias_points_to(link, dist)


def test_junction_alias_runs_mklink(tmp_path, monkeypatch):
    calls = []

    def fake_run(cmd, **kwargs):
        calls.append(cmd)
        return subprocess.CompletedProcess(cmd, 0, stdout="Junction created", stderr="")

    monkeypatch.setattr(linker.subprocess, "run", fake_run)

    JunctionAlias().create(tmp_path / "plugin", tmp_path / "dist")

    assert calls == [[
        "cmd", "/c", "mklink", "/J", str(tmp_path / "plugin"), str(tmp_path / "dist")
    ]]


def test_junction_alias_failure_has_no_fallback(tmp_path, monkeypatch):
    def fake_run(cmd, **kwargs):
        return subprocess.CompletedProcess(cmd, 1, stdout="", stderr="Access is denied.")

    monkeypatch.setattr(linker.subprocess, "run", fake_run)

    with pytest.raises(LinkCreationError, match="Access is denied"):
        JunctionAlias().create(tmp_path / "plugin", tmp_path / "dist")

    assert not (tmp_path / "plugin").exists()


def test_junction_alias_missing_cmd(tmp_path, monkeypatch):
    def fake_run(cmd, **kwargs):
        raise FileNotFoundError(2, "No such file or directory", "cmd")

    monkeypatch.setattr(linker.subprocess, "run", fake_run)

    with pytest.raises(LinkCreationError):
        JunctionAlias().create(tmp_path / "plugin", tmp_path / "dist")
