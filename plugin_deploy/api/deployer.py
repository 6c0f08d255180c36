"""Deployer API: runs one deployment from configuration to result"""

import logging
from pathlib import Path
from typing import Optional, Union

from .exceptions import PluginDeployError
from ..constants import MSG_ENV_MISSING, MSG_IDENTICAL_PATH
from ..core import (
    ConfigResolver,
    DirectoryAlias,
    PathResolver,
    StateReconciler,
    TargetLocator,
)
from ..models import (
    DeployResult,
    DeployStage,
    NoopReason,
    OperationStatus,
)
from ..services import DeployService
from ..utils.file_utils import list_entries


class Deployer:
    """Deployer class for plugin deployment

    Runs the resolver, locator, reconciler and deploy service in order.
    Errors raised by any step are captured on the returned DeployResult,
    which is the only thing callers need to inspect.
    """

    def __init__(self,
                 project_root: Union[str, Path, None] = None,
                 env_file: Union[str, Path, None] = None,
                 manifest_file: Union[str, Path, None] = None,
                 output_dir: Union[str, Path, None] = None,
                 alias: Optional[DirectoryAlias] = None):
        """
        Initialize deployer

        Args:
            project_root: Plugin project root (defaults to cwd)
            env_file: Configuration file override
            manifest_file: Plugin descriptor override
            output_dir: Build output directory override
            alias: Directory alias implementation for link mode
        """
        self.path_resolver = PathResolver(
            project_root,
            env_file=env_file,
            manifest_file=manifest_file,
            output_dir=output_dir,
        )
        self.config_resolver = ConfigResolver(self.path_resolver)
        self.target_locator = TargetLocator()
        self.deploy_service = DeployService(alias)
        self.logger = logging.getLogger(self.__class__.__name__)

    def deploy(self, mode: Optional[str]) -> DeployResult:
        """
        Deploy the plugin output directory

        Args:
            mode: Mode token ("dev"/"link" or "build"/"copy")

        Returns:
            DeployResult: status SUCCESS, SKIPPED (no-op) or FAILED
        """
        result = DeployResult(status=OperationStatus.IN_PROGRESS)

        try:
            config = self.config_resolver.resolve(mode)
            if config is None:
                env_file = self.path_resolver.get_env_file()
                return result.finish_noop(
                    NoopReason.ENV_MISSING,
                    MSG_ENV_MISSING.format(env_file=env_file)
                )

            result.mode = config.mode
            result.plugin_id = config.plugin_id
            result.output_dir = config.output_dir
            result.advance(DeployStage.CONFIGURED)

            location = self.target_locator.locate(config)
            result.target_path = location.target_path
            result.advance(DeployStage.LOCATED)

            if location.identical:
                return result.finish_noop(NoopReason.IDENTICAL_PATH, MSG_IDENTICAL_PATH)

            plan = StateReconciler(location, config.mode).reconcile()
            result.plan = plan
            for warning in plan.warnings:
                result.add_warning(warning)
            result.advance(DeployStage.RECONCILED)

            if plan.is_reuse:
                result.entries = list_entries(location.target_path)
                return result.finish_noop(
                    NoopReason.LINK_REUSED,
                    f"Link already points to {location.output_dir}"
                )

            result.entries = self.deploy_service.deploy(location, config.mode)
            result.advance(DeployStage.DEPLOYED)
            result.message = f"Deployed {config.plugin_id} ({config.mode.label})"
            result.complete(OperationStatus.SUCCESS)

        except PluginDeployError as e:
            self.logger.debug(f"Deployment failed at {result.stage.value}: {e}")
            result.finish_failed(e.error_code, str(e), error_type=type(e).__name__)

        return result


def deploy(mode: Optional[str],
           project_root: Union[str, Path, None] = None,
           **options) -> DeployResult:
    """
    Convenience function for a single deployment

    Args:
        mode: Mode token ("dev" or "build")
        project_root: Plugin project root
        **options: Other Deployer options

    Returns:
        DeployResult
    """
    return Deployer(project_root=project_root, **options).deploy(mode)
