# plugin_deploy/utils/file_utils.py
"""File operation utilities"""

import os
import shutil
from pathlib import Path
from typing import List

from ..api.exceptions import CopyError, FilesystemError


def is_link(path: Path) -> bool:
    """
    Check if path is a symbolic link or a Windows directory junction

    Args:
        path: Path to check (the entry itself, not what it points to)

    Returns:
        True if path is a link of either kind
    """
    if os.path.islink(path):
        return True
    isjunction = getattr(os.path, 'isjunction', None)
    return bool(isjunction and isjunction(path))


def remove_path(path: Path) -> None:
    """
    Forcefully remove a link, file or directory tree

    Links are removed without touching what they point to. A path that is
    already gone is not an error.

    Args:
        path: Path to remove

    Raises:
        FilesystemError: If removal fails
    """
    try:
        if is_link(path):
            if os.name == 'nt' and os.path.isdir(path):
                os.rmdir(path)
            else:
                os.unlink(path)
        elif path.is_dir():
            shutil.rmtree(path)
        elif path.exists():
            path.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        raise FilesystemError(f"Failed to remove {path}", e) from e


def ensure_dir(directory: Path) -> Path:
    """
    Ensure directory exists

    Raises:
        FilesystemError: If the directory cannot be created
    """
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError(f"Failed to create directory {directory}", e) from e
    return directory


def ensure_parent_dir(file_path: Path) -> Path:
    """
    Ensure parent directory exists

    Args:
        file_path: File path

    Returns:
        Parent directory path
    """
    return ensure_dir(file_path.parent)


def ensure_file(file_path: Path) -> bool:
    """
    Create an empty file if it does not exist yet

    Returns:
        True if the file was created
    """
    if file_path.exists():
        return False
    try:
        file_path.touch()
    except OSError as e:
        raise FilesystemError(f"Failed to create {file_path}", e) from e
    return True


def copy_file(src: Path, dst: Path) -> None:
    """
    Copy a single file, overwriting dst

    Raises:
        FilesystemError: If the copy fails
    """
    try:
        shutil.copyfile(src, dst)
    except OSError as e:
        raise FilesystemError(f"Failed to copy {src} to {dst}", e) from e


def copy_tree(src: Path, dst: Path) -> List[Path]:
    """
    Recursively copy the contents of src into dst

    dst is created if needed. Every file is copied byte for byte and
    nested directories keep their relative layout.

    Args:
        src: Source directory
        dst: Destination directory

    Returns:
        List of copied file paths (destination side)

    Raises:
        CopyError: On the first entry that cannot be copied
    """
    copied = []

    try:
        dst.mkdir(parents=True, exist_ok=True)
        entries = sorted(os.scandir(src), key=lambda e: e.name)
    except OSError as e:
        raise CopyError(src, e) from e

    for entry in entries:
        src_path = Path(entry.path)
        dst_path = dst / entry.name

        try:
            is_dir = entry.is_dir()
        except OSError as e:
            raise CopyError(src_path, e) from e

        if is_dir:
            copied.extend(copy_tree(src_path, dst_path))
            continue

        try:
            shutil.copy2(src_path, dst_path)
        except OSError as e:
            raise CopyError(src_path, e) from e
        copied.append(dst_path)

    return copied


def list_entries(directory: Path) -> List[str]:
    """
    List top-level entry names in a directory

    Returns:
        Sorted names, empty if the directory does not exist
    """
    if not directory.is_dir():
        return []
    return sorted(p.name for p in directory.iterdir())
