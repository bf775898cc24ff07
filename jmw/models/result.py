"""Result models for build, restart and deployment decisions"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple


class Severity(Enum):
    """How strongly a server restart is needed after deployment"""
    NONE = "none"
    RECOMMENDED = "recommended"
    REQUIRED = "required"


@dataclass(frozen=True)
class RestartAdvice:
    """Restart recommendation for a deployed artifact"""
    severity: Severity
    reason: str

    @property
    def needs_restart(self) -> bool:
        return self.severity is not Severity.NONE


@dataclass(frozen=True)
class BuildCommand:
    """A single build tool invocation"""
    args: Tuple[str, ...]
    working_dir: Path
    label: str = "build"

    def __str__(self) -> str:
        return " ".join(self.args)


@dataclass(frozen=True)
class BuildPlan:
    """Commands to run for a build, in order

    ``install`` is only present for multi-module jar builds and runs
    after ``primary`` succeeds.
    """
    primary: BuildCommand
    install: Optional[BuildCommand] = None
    profiles: Tuple[str, ...] = ()
    skip_tests: bool = False

    @property
    def commands(self) -> Tuple[BuildCommand, ...]:
        if self.install is None:
            return (self.primary,)
        return (self.primary, self.install)


@dataclass(frozen=True)
class BuildOutcome:
    """Result of running a build plan"""
    executed: bool
    artifact: Optional[Path] = None


@dataclass(frozen=True)
class LocalDeployment:
    """Where and how an artifact is deployed on the local WildFly

    In domain mode ``undeploy`` removes the previous version from the
    server group before ``command`` deploys the artifact.
    """
    artifact: Path
    target_dir: Path
    marker: Optional[Path] = None
    command: Tuple[str, ...] = ()
    undeploy: Tuple[str, ...] = ()

    @property
    def destination(self) -> Path:
        return self.target_dir / self.artifact.name


@dataclass(frozen=True)
class InstructionStep:
    """One numbered step of the remote deployment guide"""
    title: str
    commands: Tuple[str, ...]


@dataclass(frozen=True)
class RemoteInstructions:
    """Copy, redeploy and verify commands for a remote host"""
    target: str
    steps: Tuple[InstructionStep, ...] = field(default_factory=tuple)
    client: Optional[str] = None
