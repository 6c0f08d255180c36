"""Plugin Deploy - Deploy a plugin build into a host application's vault.

Links the build output directory into the vault for live development, or
copies it there for a standalone install, while keeping the plugin's saved
settings across redeploys.
"""

from .__version__ import __version__, __version_info__, __license__

# Exceptions
from .api.exceptions import (
    PluginDeployError,
    ConfigurationError,
    ManifestError,
    FilesystemError,
    LinkCreationError,
    CopyError,
)

# Core API
from .api.deployer import Deployer, deploy

# Data models
from .models import (
    DeploymentMode,
    PluginManifest,
    DeployConfig,
    DeployResult,
    DeployStage,
    NoopReason,
    OperationStatus,
)

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__license__",

    # Main classes
    "Deployer",
    "deploy",

    # Data models
    "DeploymentMode",
    "PluginManifest",
    "DeployConfig",
    "DeployResult",
    "DeployStage",
    "NoopReason",
    "OperationStatus",

    # Exceptions
    "PluginDeployError",
    "ConfigurationError",
    "ManifestError",
    "FilesystemError",
    "LinkCreationError",
    "CopyError",
]
