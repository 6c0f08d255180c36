"""Utility functions for plugin-deploy"""

from .file_utils import (
    is_link,
    remove_path,
    ensure_dir,
    ensure_parent_dir,
    ensure_file,
    copy_file,
    copy_tree,
    list_entries,
)

__all__ = [
    "is_link",
    "remove_path",
    "ensure_dir",
    "ensure_parent_dir",
    "ensure_file",
    "copy_file",
    "copy_tree",
    "list_entries",
]
