"""Data models for jmw"""

from .result import (
    Severity,
    RestartAdvice,
    BuildCommand,
    BuildPlan,
    BuildOutcome,
    LocalDeployment,
    InstructionStep,
    RemoteInstructions,
)
from .config import (
    Config,
    ProjectConfig,
    RemoteConfig,
    ClientConfig,
    RestartPattern,
    RestartRuleSet,
    Settings,
)
from .descriptor import BuildDescriptor
from .classification import ModuleClassification, Detection

__all__ = [
    # Configuration
    "Config",
    "ProjectConfig",
    "RemoteConfig",
    "ClientConfig",
    "RestartPattern",
    "RestartRuleSet",
    "Settings",

    # Detection
    "BuildDescriptor",
    "ModuleClassification",
    "Detection",

    # Results
    "Severity",
    "RestartAdvice",
    "BuildCommand",
    "BuildPlan",
    "BuildOutcome",
    "LocalDeployment",
    "InstructionStep",
    "RemoteInstructions",
]
