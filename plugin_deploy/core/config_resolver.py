"""Deployment configuration resolution"""

import logging
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values

from .path_resolver import PathResolver
from ..api.exceptions import ConfigurationError
from ..constants import ENV_INSTALL_ROOT
from ..models.config import DeployConfig, DeploymentMode, PluginManifest


class ConfigResolver:
    """Builds the DeployConfig for one run

    All inputs come from the mode token and the project files located by
    the PathResolver. The process environment is not consulted.
    """

    def __init__(self, path_resolver: PathResolver):
        self.path_resolver = path_resolver
        self.logger = logging.getLogger(self.__class__.__name__)

    def resolve(self, mode_token: Optional[str]) -> Optional[DeployConfig]:
        """Resolve the full deployment configuration

        Args:
            mode_token: Raw mode argument from the caller

        Returns:
            DeployConfig, or None if the configuration file does not exist
            and deployment is intentionally skipped

        Raises:
            ConfigurationError: On an invalid mode, missing install root or
                invalid plugin descriptor
        """
        mode = DeploymentMode.parse(mode_token)

        env_file = self.path_resolver.get_env_file()
        if not env_file.is_file():
            self.logger.info(f"No configuration file at {env_file}")
            return None

        install_root = self.resolve_install_root()
        manifest = self.load_manifest()

        config = DeployConfig(
            mode=mode,
            project_root=self.path_resolver.project_root,
            output_dir=self.path_resolver.get_dist_dir(),
            install_root=install_root,
            manifest=manifest,
        )
        self.logger.debug(f"Resolved configuration: {config.to_dict()}")
        return config

    def resolve_install_root(self) -> Path:
        """Read the install root from the configuration file

        Raises:
            ConfigurationError: If the value is missing or empty
        """
        env_file = self.path_resolver.get_env_file()
        values = dotenv_values(env_file, interpolate=False)

        raw_value = (values.get(ENV_INSTALL_ROOT) or "").strip()
        if not raw_value:
            raise ConfigurationError(
                f"{ENV_INSTALL_ROOT} is not set, add "
                f"{ENV_INSTALL_ROOT}=/path/to/your/vault to {env_file}"
            )

        return self.path_resolver.expand_path(raw_value, values)

    def load_manifest(self) -> PluginManifest:
        """Load the plugin descriptor

        Raises:
            ManifestError: If the descriptor is missing or invalid
        """
        return PluginManifest.load(self.path_resolver.get_manifest_path())
