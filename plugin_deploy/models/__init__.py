# plugin_deploy/models/__init__.py
"""Data models for plugin-deploy"""

from .config import DeploymentMode, PluginManifest, DeployConfig
from .plan import TargetState, PlanAction, TargetLocation, ReconcilePlan
from .result import (
    OperationStatus,
    DeployStage,
    NoopReason,
    ErrorDetail,
    Result,
    DeployResult,
)

__all__ = [
    # Config models
    "DeploymentMode",
    "PluginManifest",
    "DeployConfig",

    # Plan models
    "TargetState",
    "PlanAction",
    "TargetLocation",
    "ReconcilePlan",

    # Result models
    "OperationStatus",
    "DeployStage",
    "NoopReason",
    "ErrorDetail",
    "Result",
    "DeployResult",
]
