"""Operation result models"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import DeploymentMode
from .plan import ReconcilePlan
from ..constants import EXIT_FAILURE, EXIT_OK


class OperationStatus(Enum):
    """Operation status"""
    SUCCESS = "success"
    FAILED = "failed"
    SKIPPED = "skipped"
    IN_PROGRESS = "in_progress"


class DeployStage(Enum):
    """Deployment state machine; DEPLOYED, NOOP and FAILED are terminal"""
    START = "start"
    CONFIGURED = "configured"
    LOCATED = "located"
    RECONCILED = "reconciled"
    DEPLOYED = "deployed"
    NOOP = "noop"
    FAILED = "failed"


class NoopReason(Enum):
    """Why a run finished without deploying"""
    ENV_MISSING = "env_missing"
    IDENTICAL_PATH = "identical_path"
    LINK_REUSED = "link_reused"


@dataclass
class ErrorDetail:
    """Detailed error information"""

    code: str
    message: str
    context: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp.isoformat()
        }


@dataclass
class Result:
    """Base result class"""

    status: OperationStatus
    message: str = ""
    errors: List[ErrorDetail] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    start_time: datetime = field(default_factory=datetime.now)
    end_time: Optional[datetime] = None

    @property
    def is_success(self) -> bool:
        """Check if operation was successful"""
        return self.status == OperationStatus.SUCCESS

    @property
    def is_failed(self) -> bool:
        """Check if operation failed"""
        return self.status == OperationStatus.FAILED

    @property
    def duration(self) -> Optional[float]:
        """Get operation duration in seconds"""
        if self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return None

    def add_error(self, code: str, message: str, **context) -> None:
        """Add an error"""
        self.errors.append(ErrorDetail(code=code, message=message, context=context))

    def add_warning(self, message: str) -> None:
        """Add a warning"""
        self.warnings.append(message)

    def complete(self, status: Optional[OperationStatus] = None) -> None:
        """Mark operation as complete"""
        self.end_time = datetime.now()
        if status:
            self.status = status


@dataclass
class DeployResult(Result):
    """Result of a deployment run"""

    stage: DeployStage = DeployStage.START
    noop_reason: Optional[NoopReason] = None
    mode: Optional[DeploymentMode] = None
    plugin_id: Optional[str] = None
    output_dir: Optional[Path] = None
    target_path: Optional[Path] = None
    plan: Optional[ReconcilePlan] = None
    entries: List[str] = field(default_factory=list)

    @property
    def is_noop(self) -> bool:
        return self.stage == DeployStage.NOOP

    @property
    def error(self) -> Optional[str]:
        """First error message, if any"""
        return self.errors[0].message if self.errors else None

    @property
    def exit_code(self) -> int:
        return EXIT_FAILURE if self.is_failed else EXIT_OK

    def advance(self, stage: DeployStage) -> None:
        self.stage = stage

    def finish_noop(self, reason: NoopReason, message: str = "") -> 'DeployResult':
        """Terminate as a successful no-op"""
        self.stage = DeployStage.NOOP
        self.noop_reason = reason
        self.message = message
        self.complete(OperationStatus.SKIPPED)
        return self

    def finish_failed(self, code: str, message: str, **context) -> 'DeployResult':
        """Terminate as failed, keeping the stage that was reached in context"""
        self.add_error(code, message, stage=self.stage.value, **context)
        self.stage = DeployStage.FAILED
        self.message = message
        self.complete(OperationStatus.FAILED)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "status": self.status.value,
            "stage": self.stage.value,
            "message": self.message,
            "noop_reason": self.noop_reason.value if self.noop_reason else None,
            "mode": self.mode.value if self.mode else None,
            "plugin_id": self.plugin_id,
            "output_dir": str(self.output_dir) if self.output_dir else None,
            "target_path": str(self.target_path) if self.target_path else None,
            "plan": self.plan.to_dict() if self.plan else None,
            "entries": self.entries,
            "errors": [e.to_dict() for e in self.errors],
            "warnings": self.warnings,
            "duration": self.duration
        }
