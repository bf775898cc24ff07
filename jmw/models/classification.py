"""Module classification models"""

from dataclasses import dataclass
from pathlib import Path

from .config import ProjectConfig
from .descriptor import BuildDescriptor
from ..constants import TARGET_DIR


@dataclass(frozen=True)
class ModuleClassification:
    """Identity and deployment kind of the module being built

    ``repo_root`` differs from ``module_path`` only when the project's
    base path is itself a Maven build root, in which case the module is
    built from there with a module selector.
    """

    module_name: str
    module_path: Path
    repo_root: Path
    packaging: str
    is_global: bool = False
    deployment_path: str = ""

    @property
    def is_multi_module_build(self) -> bool:
        return self.repo_root != self.module_path

    @property
    def relative_module_path(self) -> str:
        """Module path relative to the repository root, for ``-pl``"""
        return self.module_path.relative_to(self.repo_root).as_posix()

    @property
    def target_dir(self) -> Path:
        return self.module_path / TARGET_DIR


@dataclass(frozen=True)
class Detection:
    """Everything resolved about the current working directory"""

    project_name: str
    project: ProjectConfig
    descriptor_path: Path
    descriptor: BuildDescriptor
    classification: ModuleClassification
