"""Exception definitions for plugin-deploy"""

from pathlib import Path
from typing import Optional, Union

from ..constants import ErrorCode


class PluginDeployError(Exception):
    """Base exception for plugin-deploy"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class ConfigurationError(PluginDeployError):
    """Invalid or missing configuration (mode, install root, descriptor)"""

    def __init__(self, message: str, error_code: str = ErrorCode.CONFIGURATION_ERROR):
        super().__init__(message, error_code)


class ManifestError(ConfigurationError):
    """The plugin descriptor is missing, unparseable or has no identifier"""

    def __init__(self, message: str, manifest_path: Optional[Path] = None):
        super().__init__(message, ErrorCode.MANIFEST_ERROR)
        self.manifest_path = manifest_path


class FilesystemError(PluginDeployError):
    """Failure creating, removing or preserving filesystem entries"""

    def __init__(self, message: str, cause: Optional[OSError] = None):
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message, ErrorCode.FILESYSTEM_ERROR)
        self.cause = cause


class LinkCreationError(PluginDeployError):
    """The directory alias could not be created"""

    def __init__(self, link_path: Union[str, Path], target_path: Union[str, Path],
                 reason: str):
        message = f"Failed to link {link_path} -> {target_path}: {reason}"
        super().__init__(message, ErrorCode.LINK_CREATION_FAILED)
        self.link_path = Path(link_path)
        self.target_path = Path(target_path)


class CopyError(PluginDeployError):
    """A single entry could not be copied into the target directory"""

    def __init__(self, path: Union[str, Path], cause: Optional[OSError] = None):
        message = f"Failed to copy {path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message, ErrorCode.COPY_FAILED)
        self.path = Path(path)
        self.cause = cause
