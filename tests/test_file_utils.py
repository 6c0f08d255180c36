"""Tests for copy and removal helpers."""

import os
import shutil

import pytest

from plugin_deploy.api.exceptions import CopyError, FilesystemError
from plugin_deploy.utils import file_utils
from plugin_deploy.utils.file_utils import (
    copy_tree,
    ensure_file,
    list_entries,
    remove_path,
)


def _tree(root):
    return {
        str(p.relative_to(root)): p.read_bytes()
        for p in sorted(root.rglob("*")) if p.is_file()
    }


def test_copy_tree_nested(tmp_path):
    src = tmp_path / "src"
    (src / "a" / "b" / "c").mkdir(parents=True)
    (src / "top.bin").write_bytes(bytes(range(256)))
    (src / "a" / "mid.txt").write_text("mid")
    (src / "a" / "b" / "c" / "deep.json").write_text('{"k": 1}')
    (src / "a" / "empty").mkdir()

    copied = copy_tree(src, tmp_path / "dst")

    assert _tree(tmp_path / "dst") == _tree(src)
    assert (tmp_path / "dst" / "a" / "empty").is_dir()
    assert len(copied) == 3


def test_copy_tree_empty_source(tmp_path):
    src = tmp_path / "src"
    src.mkdir()

    assert copy_tree(src, tmp_path / "dst") == []
    assert (tmp_path / "dst").is_dir()
    assert list_entries(tmp_path / "dst") == []


def test_copy_tree_reports_failing_entry(tmp_path, monkeypatch):
    src = tmp_path / "src"
    src.mkdir()
    (src / "ok.txt").write_text("ok")
    (src / "bad.txt").write_text("bad")

    real_copy2 = shutil.copy2

    def failing_copy2(s, d, **kwargs):
        if os.path.basename(s) == "bad.txt":
            raise PermissionError(13, "Permission denied", str(s))
        return real_copy2(s, d, **kwargs)

    monkeypatch.setattr(file_utils.shutil, "copy2", failing_copy2)

    with pytest.raises(CopyError) as exc_info:
        copy_tree(src, tmp_path / "dst")

    assert exc_info.value.path == src / "bad.txt"
    assert "Permission denied" in str(exc_info.value)


def test_copy_tree_missing_source(tmp_path):
    with pytest.raises(CopyError):
        copy_tree(tmp_path / "nope", tmp_path / "dst")


def test_remove_link_keeps_its_target(tmp_path):
    real = tmp_path / "real"
    real.mkdir()
    (real / "keep.txt").write_text("keep")
    link = tmp_path / "link"
    link.symlink_to(real, target_is_directory=True)

    remove_path(link)

    assert not os.path.lexists(link)
    assert (real / "keep.txt").read_text() == "keep"


def test_remove_tree_with_broken_link(tmp_path):
    tree = tmp_path / "tree"
    (tree / "sub").mkdir(parents=True)
    (tree / "sub" / "file").write_text("x")
    os.symlink(tmp_path / "gone", tree / "sub" / "dangling")

    remove_path(tree)

    assert not tree.exists()


def test_remove_missing_path_is_fine(tmp_path):
    remove_path(tmp_path / "never-existed")


def test_remove_failure_raises(tmp_path, monkeypatch):
    tree = tmp_path / "tree"
    tree.mkdir()

    def failing_rmtree(path, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr(file_utils.shutil, "rmtree", failing_rmtree)

    with pytest.raises(FilesystemError, match="Permission denied"):
        remove_path(tree)


def test_ensure_file_only_creates_once(tmp_path):
    marker = tmp_path / ".hotreload"

    assert ensure_file(marker) is True
    assert marker.read_bytes() == b""
    marker.write_text("kept")
    assert ensure_file(marker) is False
    assert marker.read_text() == "kept"
