"""Public exception types for jmw"""

from .exceptions import (
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
