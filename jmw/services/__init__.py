"""Service layer wiring the decision engine to external collaborators"""

from .config_service import ConfigService, load_config
from .build_service import BuildService
from .deploy_service import DeployService

__all__ = [
    "ConfigService",
    "load_config",
    "BuildService",
    "DeployService",
]
