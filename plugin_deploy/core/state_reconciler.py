"""Pre-deployment reconciliation of the target path"""

import logging
from pathlib import Path
from typing import Optional

from .linker import alias_points_to, is_directory_alias, read_alias_target
from ..constants import LIVE_MARKER_FILE, USER_DATA_FILE
from ..models.config import DeploymentMode
from ..models.plan import PlanAction, ReconcilePlan, TargetLocation, TargetState
from ..utils.file_utils import (
    copy_file,
    ensure_dir,
    ensure_file,
    ensure_parent_dir,
    remove_path,
)


class StateReconciler:
    """Inspects the target path and clears it for deployment

    Whatever occupies the target is classified first. User data inside a
    previously copied plugin directory is saved into the output directory
    before that directory is removed. A link that already points at the
    output directory is kept in link mode.
    """

    def __init__(self, location: TargetLocation, mode: DeploymentMode):
        self.location = location
        self.mode = mode
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def target_path(self) -> Path:
        return self.location.target_path

    @property
    def output_dir(self) -> Path:
        return self.location.output_dir

    def classify(self) -> TargetState:
        """Classify the entry currently at the target path"""
        target = self.target_path

        if is_directory_alias(target):
            if alias_points_to(target, self.output_dir):
                return TargetState.ALIAS_TO_OUTPUT
            return TargetState.FOREIGN_ALIAS

        if not target.exists():
            return TargetState.ABSENT

        if target.is_dir():
            return TargetState.DIRECTORY

        return TargetState.FILE

    def plan(self, state: Optional[TargetState] = None) -> ReconcilePlan:
        """Decide the pre-deployment action without touching the filesystem"""
        state = state or self.classify()

        if state == TargetState.ABSENT:
            action = PlanAction.CREATE_PARENT
        elif state == TargetState.ALIAS_TO_OUTPUT and self.mode == DeploymentMode.LINK:
            action = PlanAction.REUSE
        elif state == TargetState.DIRECTORY:
            action = PlanAction.PRESERVE_AND_REMOVE
        else:
            action = PlanAction.REMOVE

        plan = ReconcilePlan(state=state, action=action)
        if state in (TargetState.ALIAS_TO_OUTPUT, TargetState.FOREIGN_ALIAS):
            plan.alias_target = read_alias_target(self.target_path)

        return plan

    def reconcile(self) -> ReconcilePlan:
        """Plan and execute the pre-deployment steps

        On return the target path is free (or reusable) and the output
        directory, its live marker and the target's parent directory exist.

        Returns:
            The executed ReconcilePlan

        Raises:
            FilesystemError: If any directory, file or removal step fails
        """
        plan = self.plan()
        self.logger.debug(
            f"Target {self.target_path}: state={plan.state.value}, "
            f"action={plan.action.value}"
        )

        ensure_dir(self.output_dir)

        if plan.action == PlanAction.PRESERVE_AND_REMOVE:
            plan.preserved_file = self.preserve_user_data()
            self._remove_target()

        elif plan.action == PlanAction.REMOVE:
            if plan.state == TargetState.FOREIGN_ALIAS:
                message = (
                    f"Replacing link {self.target_path} that points to "
                    f"{plan.alias_target or 'an unreadable target'}"
                )
                self.logger.warning(message)
                plan.warnings.append(message)
            elif plan.state == TargetState.FILE:
                message = f"Replacing regular file at {self.target_path}"
                self.logger.warning(message)
                plan.warnings.append(message)
            self._remove_target()

        if ensure_file(self.output_dir / LIVE_MARKER_FILE):
            self.logger.info(f"Created live marker in {self.output_dir}")

        ensure_parent_dir(self.target_path)

        return plan

    def preserve_user_data(self) -> Optional[Path]:
        """Copy the user data file from the target into the output directory

        Returns:
            Path of the saved copy, or None if there was nothing to save

        Raises:
            FilesystemError: If the copy fails
        """
        source = self.target_path / USER_DATA_FILE
        if not source.is_file():
            return None

        destination = self.output_dir / USER_DATA_FILE
        copy_file(source, destination)
        self.logger.info(f"Preserved {USER_DATA_FILE} into {self.output_dir}")
        return destination

    def _remove_target(self) -> None:
        self.logger.info(f"Removing {self.target_path}")
        remove_path(self.target_path)
