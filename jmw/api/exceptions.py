"""Exception definitions for jmw"""

from typing import Iterable, Optional

from ..constants import ErrorCode


class JmwError(Exception):
    """Base exception for jmw"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ConfigError(JmwError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_ERROR)


class NotInProjectError(JmwError):
    """Current directory is outside every configured project"""

    def __init__(self, path: str, base_paths: Iterable[str] = ()):
        base_paths = list(base_paths)
        message = f"Current directory is not part of any configured project: {path}"
        if base_paths:
            message += "\n\nConfigured base paths:\n" + "\n".join(f"  - {p}" for p in base_paths)
        super().__init__(message, ErrorCode.NOT_IN_PROJECT)
        self.path = path
        self.base_paths = base_paths


class DescriptorNotFoundError(JmwError):
    """No build descriptor found up to the filesystem root"""

    def __init__(self, start_dir: str, descriptor_name: str = "pom.xml"):
        message = f"{descriptor_name} not found in directory tree starting from {start_dir}"
        super().__init__(message, ErrorCode.DESCRIPTOR_NOT_FOUND)
        self.start_dir = start_dir


class ParseError(JmwError):
    """Malformed build descriptor"""

    def __init__(self, message: str, path: Optional[str] = None):
        if path:
            message = f"Failed to parse {path}: {message}"
        super().__init__(message, ErrorCode.DESCRIPTOR_PARSE_ERROR)
        self.path = path


class UnconfiguredModuleError(JmwError):
    """Module is missing from its project's module table"""

    def __init__(self, module_name: str, project_name: str):
        self.module_name = module_name
        self.project_name = project_name
        self.remediation = (
            f"Please add it to the 'modules' section for project '{project_name}':\n"
            f"  modules:\n"
            f"    {module_name}: \"\"  # for normal deployment\n"
            f"    # or\n"
            f"    {module_name}: \"modules/path/main\"  # for global module"
        )
        message = (
            f"Module '{module_name}' is not configured in config.yaml\n\n"
            f"{self.remediation}"
        )
        super().__init__(message, ErrorCode.UNCONFIGURED_MODULE)


class InvalidProfileError(JmwError):
    """Requested profile is outside the project's allowed set"""

    def __init__(self, profile: str, project_name: str, available: Iterable[str]):
        self.profile = profile
        self.project_name = project_name
        self.available = list(available)
        message = (
            f"Invalid profile '{profile}' for project {project_name}. "
            f"Available: {', '.join(self.available)}"
        )
        super().__init__(message, ErrorCode.INVALID_PROFILE)


class BuildExecutionError(JmwError):
    """Build tool process failed"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.BUILD_FAILED)


class DeploymentIOError(JmwError):
    """Deployment copy or command failed"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.DEPLOYMENT_FAILED)
