"""Path resolution module for plugin-deploy"""

import os
import re
from pathlib import Path
from typing import Optional, Union

from ..constants import (
    DEFAULT_DIST_DIR,
    DEFAULT_ENV_FILE,
    DEFAULT_MANIFEST_FILE,
)


_VARIABLE_PATTERN = re.compile(r"\$\{(\w+)\}|\$(\w+)")


class PathResolver:
    """Resolves paths within a plugin project"""

    def __init__(self,
                 project_root: Union[str, Path, None] = None,
                 env_file: Union[str, Path, None] = None,
                 manifest_file: Union[str, Path, None] = None,
                 output_dir: Union[str, Path, None] = None):
        """Initialize path resolver

        Args:
            project_root: Root directory of the project (defaults to cwd)
            env_file: Override for the configuration file location
            manifest_file: Override for the plugin descriptor location
            output_dir: Override for the build output directory
        """
        self.project_root = Path(project_root or Path.cwd()).resolve()
        self._env_file = env_file
        self._manifest_file = manifest_file
        self._output_dir = output_dir

    def resolve(self, path: Union[str, Path]) -> Path:
        """Resolve a path relative to project root

        Args:
            path: Path to resolve (can be relative or absolute)

        Returns:
            Resolved absolute path
        """
        path = Path(path)

        if path.is_absolute():
            return path

        return (self.project_root / path).resolve()

    def get_env_file(self) -> Path:
        """Get configuration (.env) file path"""
        return self.resolve(self._env_file or DEFAULT_ENV_FILE)

    def get_manifest_path(self) -> Path:
        """Get plugin descriptor path"""
        return self.resolve(self._manifest_file or DEFAULT_MANIFEST_FILE)

    def get_dist_dir(self) -> Path:
        """Get build output directory path"""
        return self.resolve(self._output_dir or DEFAULT_DIST_DIR)

    def expand_path(self, path: str, variables: Optional[dict] = None) -> Path:
        """Expand a path with variables and user home

        Args:
            path: Path string to expand
            variables: Mapping used for $VAR substitution

        Returns:
            Expanded absolute path
        """
        if variables:
            def substitute(match):
                name = match.group(1) or match.group(2)
                value = variables.get(name)
                # Unknown names stay as written
                return match.group(0) if value is None else value

            path = _VARIABLE_PATTERN.sub(substitute, path)

        path = os.path.expanduser(path)

        return Path(os.path.normpath(self.resolve(path)))
