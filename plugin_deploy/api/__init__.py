"""Public API for plugin-deploy"""

from .exceptions import (
    PluginDeployError,
    ConfigurationError,
    ManifestError,
    FilesystemError,
    LinkCreationError,
    CopyError,
)
from .deployer import Deployer, deploy

__all__ = [
    "Deployer",
    "deploy",
    "PluginDeployError",
    "ConfigurationError",
    "ManifestError",
    "FilesystemError",
    "LinkCreationError",
    "CopyError",
]
