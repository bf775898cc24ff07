"""Project and module detection for a working directory"""

from pathlib import Path
from typing import Union

from .descriptor_parser import read_descriptor
from .module_classifier import classify_module
from .path_resolver import PathResolver, find_descriptor
from ..models.classification import Detection
from ..models.config import Config


def detect(cwd: Union[str, Path], config: Config) -> Detection:
    """Resolve the project, descriptor and module classification for ``cwd``

    Raises:
        NotInProjectError, DescriptorNotFoundError, ParseError,
        UnconfiguredModuleError
    """
    project_name, project = PathResolver(config.projects).resolve_project(cwd)

    descriptor_name = config.settings.descriptor_name
    descriptor_path = find_descriptor(cwd, descriptor_name)
    descriptor = read_descriptor(descriptor_path)

    classification = classify_module(
        project_name, project, descriptor, descriptor_path, descriptor_name
    )

    return Detection(
        project_name=project_name,
        project=project,
        descriptor_path=descriptor_path,
        descriptor=descriptor,
        classification=classification,
    )
