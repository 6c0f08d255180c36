"""Target inspection and reconcile plan models"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional


class TargetState(Enum):
    """What currently occupies the target path"""
    ABSENT = "absent"
    ALIAS_TO_OUTPUT = "alias_to_output"
    FOREIGN_ALIAS = "foreign_alias"
    FILE = "file"
    DIRECTORY = "directory"


class PlanAction(Enum):
    """Pre-deployment action for the target path"""
    CREATE_PARENT = "create_parent"
    REUSE = "reuse"
    REMOVE = "remove"
    PRESERVE_AND_REMOVE = "preserve_and_remove"


@dataclass(frozen=True)
class TargetLocation:
    """Computed install location for a plugin"""

    target_path: Path
    output_dir: Path
    identical: bool = False


@dataclass
class ReconcilePlan:
    """Outcome of inspecting and clearing the target path"""

    state: TargetState
    action: PlanAction
    alias_target: Optional[Path] = None
    preserved_file: Optional[Path] = None
    warnings: List[str] = field(default_factory=list)

    @property
    def is_reuse(self) -> bool:
        return self.action == PlanAction.REUSE

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            "state": self.state.value,
            "action": self.action.value,
        }
        if self.alias_target:
            data["alias_target"] = str(self.alias_target)
        if self.preserved_file:
            data["preserved_file"] = str(self.preserved_file)
        if self.warnings:
            data["warnings"] = self.warnings
        return data
