"""jmw - Java Maven WildFly build and deployment helper.

Detects which configured project and Maven module the current directory
belongs to, builds it with the right Maven invocation, and explains how
to deploy the artifact to a local or remote WildFly.
"""

from .__version__ import __version__, __version_info__, __author__, __license__

# Decision engine
from .core import (
    PathResolver,
    find_descriptor,
    parse_descriptor,
    read_descriptor,
    classify_module,
    detect,
    resolve_profiles,
    synthesize_build,
    determine_restart,
    plan_local_deployment,
    remote_instructions,
)

# Data models
from .models import (
    Config,
    ProjectConfig,
    RestartRuleSet,
    RestartPattern,
    BuildDescriptor,
    ModuleClassification,
    Detection,
    BuildPlan,
    RestartAdvice,
    Severity,
)

# Exceptions
from .api.exceptions import (
    JmwError,
    ConfigError,
    NotInProjectError,
    DescriptorNotFoundError,
    ParseError,
    UnconfiguredModuleError,
    InvalidProfileError,
    BuildExecutionError,
    DeploymentIOError,
)

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__license__",

    # Decision engine
    "PathResolver",
    "find_descriptor",
    "parse_descriptor",
    "read_descriptor",
    "classify_module",
    "detect",
    "resolve_profiles",
    "synthesize_build",
    "determine_restart",
    "plan_local_deployment",
    "remote_instructions",

    # Data models
    "Config",
    "ProjectConfig",
    "RestartRuleSet",
    "RestartPattern",
    "BuildDescriptor",
    "ModuleClassification",
    "Detection",
    "BuildPlan",
    "RestartAdvice",
    "Severity",

    # Exceptions
    "JmwError",
    "ConfigError",
    "NotInProjectError",
    "DescriptorNotFoundError",
    "ParseError",
    "UnconfiguredModuleError",
    "InvalidProfileError",
    "BuildExecutionError",
    "DeploymentIOError",
]
