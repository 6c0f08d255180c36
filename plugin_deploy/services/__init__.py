# plugin_deploy/services/__init__.py
"""Business logic services for plugin-deploy"""

from .deploy_service import DeployService

__all__ = [
    "DeployService",
]
