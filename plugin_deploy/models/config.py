"""Configuration data models"""

import json
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from ..api.exceptions import ConfigurationError, ManifestError
from ..constants import (
    MODE_ALIASES,
    MODE_TOKEN_COPY,
    MODE_TOKEN_LINK,
    MANIFEST_ID_FIELD,
)


class DeploymentMode(Enum):
    """How the output directory is materialized at the target"""
    LINK = MODE_TOKEN_LINK
    COPY = MODE_TOKEN_COPY

    @classmethod
    def parse(cls, token: Optional[str]) -> 'DeploymentMode':
        """Parse a command line token into a mode

        Args:
            token: Raw token, e.g. "dev" or "build"

        Returns:
            Matching DeploymentMode

        Raises:
            ConfigurationError: If the token is missing or not recognized
        """
        valid = f'"{MODE_TOKEN_LINK}" or "{MODE_TOKEN_COPY}"'
        if not token:
            raise ConfigurationError(f"Missing deployment mode, use {valid}")

        normalized = MODE_ALIASES.get(token, token)
        try:
            return cls(normalized)
        except ValueError:
            raise ConfigurationError(
                f'Unsupported deployment mode: "{token}", use {valid}'
            ) from None

    @property
    def label(self) -> str:
        """Human readable name"""
        return "link" if self is DeploymentMode.LINK else "copy"


def _is_plain_name(name: str) -> bool:
    """Check that name is exactly one path component"""
    if name != name.strip() or name in (".", ".."):
        return False
    separators = {"/", "\\", os.sep, os.altsep} - {None}
    return not any(sep in name for sep in separators)


@dataclass(frozen=True)
class PluginManifest:
    """Typed view of the plugin descriptor (manifest.json)"""

    id: str
    name: Optional[str] = None
    version: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, source: Optional[Path] = None) -> 'PluginManifest':
        """Create from parsed descriptor data

        Raises:
            ManifestError: If data is not an object or the id is empty
                or not a single directory name
        """
        if not isinstance(data, dict):
            raise ManifestError(
                f"Plugin descriptor must be a JSON object: {source}", source
            )

        plugin_id = data.get(MANIFEST_ID_FIELD)
        if not isinstance(plugin_id, str) or not plugin_id.strip():
            raise ManifestError(
                f"Plugin descriptor has no '{MANIFEST_ID_FIELD}' field: {source}",
                source
            )

        if not _is_plain_name(plugin_id):
            raise ManifestError(
                f"Plugin id must be a single directory name, got {plugin_id!r}: {source}",
                source
            )

        return cls(
            id=plugin_id,
            name=data.get("name"),
            version=data.get("version"),
        )

    @classmethod
    def load(cls, manifest_path: Path) -> 'PluginManifest':
        """Load descriptor from file

        Raises:
            ManifestError: If the file is missing or cannot be parsed
        """
        if not manifest_path.is_file():
            raise ManifestError(
                f"Plugin descriptor not found, cannot determine plugin id: {manifest_path}",
                manifest_path
            )

        try:
            with open(manifest_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ManifestError(
                f"Cannot parse plugin descriptor {manifest_path}: {e}",
                manifest_path
            ) from e

        return cls.from_dict(data, manifest_path)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {"id": self.id}
        if self.name:
            data["name"] = self.name
        if self.version:
            data["version"] = self.version
        return data


@dataclass(frozen=True)
class DeployConfig:
    """Everything one deployment run needs, assembled once up front"""

    mode: DeploymentMode
    project_root: Path
    output_dir: Path
    install_root: Path
    manifest: PluginManifest

    @property
    def plugin_id(self) -> str:
        return self.manifest.id

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "mode": self.mode.value,
            "project_root": str(self.project_root),
            "output_dir": str(self.output_dir),
            "install_root": str(self.install_root),
            "manifest": self.manifest.to_dict(),
        }
