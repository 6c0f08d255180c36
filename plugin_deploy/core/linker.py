"""Directory alias creation (symbolic links and junctions)"""

import logging
import os
import subprocess
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Type

from ..api.exceptions import LinkCreationError
from ..utils.file_utils import is_link


def is_directory_alias(path: Path) -> bool:
    """Check if path is a directory alias of any supported kind"""
    return is_link(path)


def read_alias_target(link_path: Path) -> Optional[Path]:
    """Return the absolute path an alias points to

    A relative link target is resolved against the link's own parent
    directory. Returns None if link_path is not an alias.
    """
    if not is_directory_alias(link_path):
        return None

    try:
        raw_target = Path(os.readlink(link_path))
    except OSError:
        return None

    if not raw_target.is_absolute():
        raw_target = link_path.parent / raw_target

    return Path(os.path.normpath(raw_target))


def alias_points_to(link_path: Path, directory: Path) -> bool:
    """Check if link_path is an alias resolving to directory"""
    target = read_alias_target(link_path)
    if target is None:
        return False
    return os.path.normcase(target.resolve()) == os.path.normcase(directory.resolve())


class DirectoryAlias(ABC):
    """Capability to make one path resolve to another directory"""

    name = "alias"

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    def create(self, link_path: Path, target_dir: Path) -> Path:
        """Create link_path pointing at target_dir

        Args:
            link_path: Path of the alias to create; must not exist
            target_dir: Existing directory the alias resolves to

        Returns:
            The created alias path

        Raises:
            LinkCreationError: On any platform or permission failure
        """
        self.logger.debug(f"Creating {self.name}: {link_path} -> {target_dir}")
        self._do_create(link_path, target_dir)
        return link_path

    @abstractmethod
    def _do_create(self, link_path: Path, target_dir: Path) -> None:
        """Actual alias creation to be implemented by subclasses"""
        pass


class SymlinkAlias(DirectoryAlias):
    """Plain directory symbolic link (POSIX)"""

    name = "symlink"

    def _do_create(self, link_path: Path, target_dir: Path) -> None:
        try:
            os.symlink(target_dir, link_path, target_is_directory=True)
        except OSError as e:
            raise LinkCreationError(link_path, target_dir, str(e)) from e


class JunctionAlias(DirectoryAlias):
    """Directory junction (Windows), created without elevated privileges"""

    name = "junction"

    def _do_create(self, link_path: Path, target_dir: Path) -> None:
        cmd = ["cmd", "/c", "mklink", "/J", str(link_path), str(target_dir)]

        try:
            result = subprocess.run(cmd, capture_output=True, text=True)
        except OSError as e:
            raise LinkCreationError(link_path, target_dir, str(e)) from e

        if result.returncode != 0:
            reason = (result.stderr or result.stdout).strip() or \
                f"mklink exited with code {result.returncode}"
            raise LinkCreationError(link_path, target_dir, reason)


_ALIASES: Dict[str, Type[DirectoryAlias]] = {
    "win32": JunctionAlias,
}


def get_directory_alias(platform: Optional[str] = None) -> DirectoryAlias:
    """Select the alias implementation for a platform

    Args:
        platform: sys.platform style name (defaults to the running platform)

    Returns:
        DirectoryAlias instance
    """
    platform = platform or sys.platform
    return _ALIASES.get(platform, SymlinkAlias)()
