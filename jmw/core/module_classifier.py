"""Module classification"""

import logging
from pathlib import Path
from typing import Union

from .path_resolver import has_descriptor
from ..api.exceptions import UnconfiguredModuleError
from ..constants import DESCRIPTOR_FILE
from ..models.classification import ModuleClassification
from ..models.config import ProjectConfig
from ..models.descriptor import BuildDescriptor

logger = logging.getLogger(__name__)


def classify_module(project_name: str,
                    project: ProjectConfig,
                    descriptor: BuildDescriptor,
                    descriptor_path: Union[str, Path],
                    descriptor_name: str = DESCRIPTOR_FILE) -> ModuleClassification:
    """Classify the module owning ``descriptor_path``

    The module is identified by its artifact id; the directory name is
    only used when the descriptor carries an empty one.

    Args:
        project_name: Name of the resolved project
        project: Resolved project configuration
        descriptor: Parsed descriptor
        descriptor_path: Path of the descriptor file
        descriptor_name: Descriptor file name used to detect a build root

    Returns:
        Module classification

    Raises:
        UnconfiguredModuleError: If the module is absent from the module table
    """
    module_path = Path(descriptor_path).parent
    module_name = descriptor.artifact_id or module_path.name

    deployment_path, is_global, exists = project.get_module_deployment(module_name)
    if not exists:
        raise UnconfiguredModuleError(module_name, project_name)

    base_path = Path(project.base_path)
    if has_descriptor(base_path, descriptor_name):
        repo_root = base_path
    else:
        repo_root = module_path

    classification = ModuleClassification(
        module_name=module_name,
        module_path=module_path,
        repo_root=repo_root,
        packaging=descriptor.packaging,
        is_global=is_global,
        deployment_path=deployment_path,
    )
    logger.debug("Classified %s: global=%s multi-module=%s",
                 module_name, is_global, classification.is_multi_module_build)
    return classification
