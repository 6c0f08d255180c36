"""Install location computation"""

import logging
import os
from pathlib import Path

from ..api.exceptions import ConfigurationError
from ..constants import HOST_CONFIG_DIR, PLUGINS_DIR
from ..models.config import DeployConfig
from ..models.plan import TargetLocation


def canonical_path(path: Path) -> Path:
    """Canonicalize path without following the final component

    Parent directories are fully resolved, so symbolic structure above the
    entry is collapsed, but an existing link at path itself is kept as is.
    """
    path = Path(os.path.abspath(path))
    return path.parent.resolve() / path.name


class TargetLocator:
    """Computes where a plugin is installed"""

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    def get_plugins_dir(self, config: DeployConfig) -> Path:
        """Directory holding all plugins of the host application"""
        return config.install_root / HOST_CONFIG_DIR / PLUGINS_DIR

    def locate(self, config: DeployConfig) -> TargetLocation:
        """Compute the target path for this plugin

        Args:
            config: Resolved deployment configuration

        Returns:
            TargetLocation; identical is True when the target is the output
            directory itself and nothing must be done

        Raises:
            ConfigurationError: If one of the two paths lies inside the other
        """
        target_path = Path(os.path.normpath(
            self.get_plugins_dir(config) / config.plugin_id
        ))
        output_dir = config.output_dir

        identical = os.path.normcase(canonical_path(target_path)) == \
            os.path.normcase(canonical_path(output_dir))

        if identical:
            self.logger.info(f"Target {target_path} is the output directory")
        else:
            self._check_not_nested(target_path, output_dir)

        return TargetLocation(
            target_path=target_path,
            output_dir=output_dir,
            identical=identical,
        )

    def _check_not_nested(self, target_path: Path, output_dir: Path) -> None:
        """Refuse layouts where clearing the target touches the output or vice versa"""
        target = os.path.normcase(canonical_path(target_path))
        output = os.path.normcase(canonical_path(output_dir))

        if _is_ancestor(target, output):
            raise ConfigurationError(
                f"Output directory {output_dir} lies inside the install "
                f"target {target_path}"
            )
        if _is_ancestor(output, target):
            raise ConfigurationError(
                f"Install target {target_path} lies inside the output "
                f"directory {output_dir}"
            )


def _is_ancestor(parent: str, child: str) -> bool:
    """True when child is strictly below parent"""
    try:
        return parent != child and os.path.commonpath([parent, child]) == parent
    except ValueError:
        # Different drives
        return False
