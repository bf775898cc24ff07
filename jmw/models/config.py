"""Configuration data models"""

import logging
import os
import re
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from .result import Severity
from ..api.exceptions import ConfigError
from ..constants import (
    DEFAULT_COMMAND_TIMEOUT,
    DEFAULT_BUILD_TIMEOUT,
    DEFAULT_MAVEN_COMMAND,
    DESCRIPTOR_FILE,
    WildFlyMode,
)

logger = logging.getLogger(__name__)

_EMPTY: Mapping = MappingProxyType({})


def expand_path(value: str) -> str:
    """Expand ``~`` and normalise a configured path"""
    if not value:
        return value
    return os.path.normpath(os.path.expanduser(value))


@lru_cache(maxsize=None)
def compile_pattern(expression: str) -> Optional["re.Pattern"]:
    """Compile a restart pattern, returning None when it is malformed"""
    try:
        return re.compile(expression)
    except re.error:
        return None


def _require_mapping(value: Any, where: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{where} must be a mapping")
    return value


@dataclass(frozen=True)
class RemoteConfig:
    """Remote WildFly host used for deployment instructions"""

    host: str
    user: str
    wildfly_path: str = ""
    restart_cmd: str = ""

    @property
    def target(self) -> str:
        return f"{self.user}@{self.host}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "host": self.host,
            "user": self.user,
            "wildfly_path": self.wildfly_path,
            "restart_cmd": self.restart_cmd,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], where: str = "remote") -> 'RemoteConfig':
        """Create from dictionary"""
        data = _require_mapping(data, where)
        for key in ("host", "user"):
            if not data.get(key):
                raise ConfigError(f"{where}: {key} is required")
        return cls(
            host=str(data["host"]),
            user=str(data["user"]),
            wildfly_path=expand_path(str(data.get("wildfly_path") or "")),
            restart_cmd=str(data.get("restart_cmd") or ""),
        )


@dataclass(frozen=True)
class ClientConfig:
    """Named remote target of a project"""

    name: str
    remote: Optional[RemoteConfig] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {"remote": self.remote.to_dict() if self.remote else None}

    @classmethod
    def from_dict(cls, name: str, data: Dict[str, Any], where: str) -> 'ClientConfig':
        """Create from dictionary"""
        data = _require_mapping(data, where)
        remote = data.get("remote")
        return cls(
            name=name,
            remote=RemoteConfig.from_dict(remote, f"{where}.remote") if remote else None,
        )


@dataclass(frozen=True)
class ProjectConfig:
    """Configuration for one source tree

    ``modules`` maps a module name to its deployment path: an empty string
    means normal deployment, anything else is the global module path
    relative to the WildFly root.
    """

    name: str
    base_path: str
    wildfly_root: str
    wildfly_mode: WildFlyMode = WildFlyMode.STANDALONE
    server_group: str = ""
    default_profile: str = ""
    available_profiles: Tuple[str, ...] = ()
    profile_overrides: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: _EMPTY)
    skip_tests: bool = False
    remote: Optional[RemoteConfig] = None
    clients: Mapping[str, ClientConfig] = field(default_factory=lambda: _EMPTY)
    default_client: str = ""
    modules: Mapping[str, str] = field(default_factory=lambda: _EMPTY)

    @property
    def is_domain(self) -> bool:
        return self.wildfly_mode is WildFlyMode.DOMAIN

    def get_module_deployment(self, module_name: str) -> Tuple[str, bool, bool]:
        """Look up a module in the module table

        Returns:
            (deployment_path, is_global, exists)
        """
        if module_name not in self.modules:
            return "", False, False

        path = self.modules[module_name]
        if path == "":
            return "", False, True
        return path, True, True

    def get_client(self, name: str) -> ClientConfig:
        """Get a client by name

        Raises:
            ConfigError: If the client is not configured
        """
        if name not in self.clients:
            available = ", ".join(self.clients) or "none"
            raise ConfigError(
                f"Client '{name}' not found. Available clients: {available}"
            )
        return self.clients[name]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            "base_path": self.base_path,
            "default_profile": self.default_profile,
            "available_profiles": list(self.available_profiles),
            "profile_overrides": {k: list(v) for k, v in self.profile_overrides.items()},
            "skip_tests": self.skip_tests,
            "wildfly_root": self.wildfly_root,
            "wildfly_mode": self.wildfly_mode.value,
            "server_group": self.server_group,
            "modules": dict(self.modules),
        }
        if self.remote:
            data["remote"] = self.remote.to_dict()
        if self.clients:
            data["clients"] = {n: c.to_dict() for n, c in self.clients.items()}
        if self.default_client:
            data["default_client"] = self.default_client
        return data

    @classmethod
    def from_dict(cls, name: str, data: Dict[str, Any]) -> 'ProjectConfig':
        """Create from dictionary, validating as it goes

        Raises:
            ConfigError: If a required field is missing or invalid
        """
        where = f"project {name}"
        data = _require_mapping(data, where)

        base_path = expand_path(str(data.get("base_path") or ""))
        if not base_path:
            raise ConfigError(f"{where}: base_path is required")
        if not os.path.isabs(base_path):
            raise ConfigError(f"{where}: base_path must be absolute, got '{base_path}'")

        wildfly_root = expand_path(str(data.get("wildfly_root") or ""))
        if not wildfly_root:
            raise ConfigError(f"{where}: wildfly_root is required")

        try:
            mode = WildFlyMode(data.get("wildfly_mode") or WildFlyMode.STANDALONE.value)
        except ValueError:
            raise ConfigError(f"{where}: wildfly_mode must be 'domain' or 'standalone'")

        server_group = str(data.get("server_group") or "")
        if mode is WildFlyMode.DOMAIN and not server_group:
            raise ConfigError(f"{where}: server_group is required in domain mode")

        available = data.get("available_profiles") or []
        if not isinstance(available, list):
            raise ConfigError(f"{where}: available_profiles must be a list")

        overrides = {}
        for profile, expansion in _require_mapping(
                data.get("profile_overrides"), f"{where}.profile_overrides").items():
            if isinstance(expansion, str):
                expansion = [expansion]
            overrides[str(profile or "")] = tuple(str(p) for p in expansion or [])

        # A bare "module:" entry in YAML means normal deployment
        modules = {
            str(module): "" if path is None else expand_path(str(path))
            for module, path in _require_mapping(data.get("modules"), f"{where}.modules").items()
        }

        clients = {
            str(client): ClientConfig.from_dict(str(client), client_data, f"{where}.clients.{client}")
            for client, client_data in _require_mapping(data.get("clients"), f"{where}.clients").items()
        }
        default_client = str(data.get("default_client") or "")
        if default_client and default_client not in clients:
            raise ConfigError(f"{where}: default_client '{default_client}' is not a configured client")

        remote = data.get("remote")

        return cls(
            name=name,
            base_path=base_path,
            wildfly_root=wildfly_root,
            wildfly_mode=mode,
            server_group=server_group,
            default_profile=str(data.get("default_profile") or ""),
            available_profiles=tuple(str(p) for p in available),
            profile_overrides=MappingProxyType(overrides),
            skip_tests=bool(data.get("skip_tests", False)),
            remote=RemoteConfig.from_dict(remote, f"{where}.remote") if remote else None,
            clients=MappingProxyType(clients),
            default_client=default_client,
            modules=MappingProxyType(modules),
        )


@dataclass(frozen=True)
class RestartPattern:
    """Artifact name pattern with the restart severity it implies"""

    match: str
    severity: Severity
    reason: str = ""

    @property
    def matcher(self) -> Optional["re.Pattern"]:
        """Compiled expression, or None when ``match`` is malformed"""
        return compile_pattern(self.match)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {"match": self.match, "severity": self.severity.value, "reason": self.reason}

    @classmethod
    def from_dict(cls, data: Dict[str, Any], where: str) -> 'RestartPattern':
        """Create from dictionary"""
        data = _require_mapping(data, where)
        if not data.get("match"):
            raise ConfigError(f"{where}: match is required")
        try:
            severity = Severity(str(data.get("severity") or Severity.RECOMMENDED.value).lower())
        except ValueError:
            raise ConfigError(
                f"{where}: severity must be one of "
                f"{', '.join(s.value for s in Severity)}"
            )
        return cls(match=str(data["match"]), severity=severity, reason=str(data.get("reason") or ""))


@dataclass(frozen=True)
class RestartRuleSet:
    """Ordered restart rules; the first matching pattern wins"""

    global_module: bool = False
    patterns: Tuple[RestartPattern, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "global_module": self.global_module,
            "patterns": [p.to_dict() for p in self.patterns],
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'RestartRuleSet':
        """Create from dictionary

        Patterns that are not valid regular expressions are kept but
        reported here, and never match at evaluation time.
        """
        data = _require_mapping(data, "restart_rules")
        patterns_data = data.get("patterns") or []
        if not isinstance(patterns_data, list):
            raise ConfigError("restart_rules.patterns must be a list")

        patterns = []
        for index, item in enumerate(patterns_data):
            pattern = RestartPattern.from_dict(item, f"restart_rules.patterns[{index}]")
            if pattern.matcher is None:
                logger.warning(
                    "Ignoring restart pattern %r: not a valid regular expression",
                    pattern.match,
                )
            patterns.append(pattern)

        return cls(global_module=bool(data.get("global_module", False)), patterns=tuple(patterns))


@dataclass(frozen=True)
class Settings:
    """Tool-wide settings"""

    maven_command: str = DEFAULT_MAVEN_COMMAND
    build_timeout: float = DEFAULT_BUILD_TIMEOUT
    command_timeout: float = DEFAULT_COMMAND_TIMEOUT
    descriptor_name: str = DESCRIPTOR_FILE

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "maven_command": self.maven_command,
            "build_timeout": self.build_timeout,
            "command_timeout": self.command_timeout,
            "descriptor_name": self.descriptor_name,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'Settings':
        """Create from dictionary"""
        data = _require_mapping(data, "settings")
        try:
            return cls(
                maven_command=str(data.get("maven_command") or DEFAULT_MAVEN_COMMAND),
                build_timeout=_timeout(data, "build_timeout", DEFAULT_BUILD_TIMEOUT),
                command_timeout=_timeout(data, "command_timeout", DEFAULT_COMMAND_TIMEOUT),
                descriptor_name=str(data.get("descriptor_name") or DESCRIPTOR_FILE),
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(f"settings: {e}")


def _timeout(data: Dict[str, Any], key: str, default: float) -> float:
    if key not in data:
        return default
    value = data[key]
    if value is None:
        return default
    value = float(value)
    if value <= 0:
        raise ValueError(f"{key} must be positive")
    return value


@dataclass(frozen=True)
class Config:
    """Complete configuration, built once per invocation"""

    projects: Mapping[str, ProjectConfig]
    restart_rules: RestartRuleSet = field(default_factory=RestartRuleSet)
    settings: Settings = field(default_factory=Settings)

    def get_project(self, name: str) -> Optional[ProjectConfig]:
        """Get project configuration by name"""
        return self.projects.get(name)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "settings": self.settings.to_dict(),
            "projects": {name: p.to_dict() for name, p in self.projects.items()},
            "restart_rules": self.restart_rules.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'Config':
        """Create from dictionary

        Raises:
            ConfigError: If the document is incomplete or invalid
        """
        data = _require_mapping(data, "configuration")

        projects_data = _require_mapping(data.get("projects"), "projects")
        if not projects_data:
            raise ConfigError("no projects defined in configuration")

        projects = {
            str(name): ProjectConfig.from_dict(str(name), project_data)
            for name, project_data in projects_data.items()
        }

        return cls(
            projects=MappingProxyType(projects),
            restart_rules=RestartRuleSet.from_dict(data.get("restart_rules")),
            settings=Settings.from_dict(data.get("settings")),
        )
