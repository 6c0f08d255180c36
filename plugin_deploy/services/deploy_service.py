"""Deploy service: materializes the output directory at the target"""

import logging
from pathlib import Path
from typing import List, Optional

from ..core.linker import DirectoryAlias, get_directory_alias
from ..models.config import DeploymentMode
from ..models.plan import TargetLocation
from ..utils.file_utils import copy_tree, list_entries


class DeployService:
    """Applies the link or copy strategy to a cleared target path"""

    def __init__(self, alias: Optional[DirectoryAlias] = None):
        """Initialize deploy service

        Args:
            alias: Directory alias implementation (defaults to the one for
                the running platform)
        """
        self.alias = alias or get_directory_alias()
        self.logger = logging.getLogger(self.__class__.__name__)

    def deploy(self, location: TargetLocation, mode: DeploymentMode) -> List[str]:
        """Deploy according to mode

        Args:
            location: Target and output paths
            mode: Deployment mode

        Returns:
            Sorted top-level entry names now present at the target

        Raises:
            LinkCreationError: Link mode failure
            CopyError: Copy mode failure
        """
        if mode == DeploymentMode.LINK:
            return self.deploy_link(location)
        return self.deploy_copy(location)

    def deploy_link(self, location: TargetLocation) -> List[str]:
        """Create a directory alias from the target to the output directory"""
        self.alias.create(location.target_path, location.output_dir)
        self.logger.info(
            f"Linked {location.target_path} -> {location.output_dir} ({self.alias.name})"
        )
        return list_entries(location.target_path)

    def deploy_copy(self, location: TargetLocation) -> List[str]:
        """Copy the whole output tree into the target directory"""
        copied: List[Path] = copy_tree(location.output_dir, location.target_path)
        self.logger.info(
            f"Copied {len(copied)} file(s) from {location.output_dir} "
            f"to {location.target_path}"
        )
        return list_entries(location.target_path)
