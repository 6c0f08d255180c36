"""Core functionality for plugin-deploy"""

from .path_resolver import PathResolver
from .config_resolver import ConfigResolver
from .target_locator import TargetLocator, canonical_path
from .state_reconciler import StateReconciler
from .linker import (
    DirectoryAlias,
    SymlinkAlias,
    JunctionAlias,
    get_directory_alias,
    is_directory_alias,
)

__all__ = [
    "PathResolver",
    "ConfigResolver",
    "TargetLocator",
    "canonical_path",
    "StateReconciler",
    "DirectoryAlias",
    "SymlinkAlias",
    "JunctionAlias",
    "get_directory_alias",
    "is_directory_alias",
]
