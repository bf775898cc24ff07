"""Path resolution module for jmw"""

import logging
import os
from pathlib import Path
from typing import Iterator, Mapping, Tuple, Union

from ..api.exceptions import DescriptorNotFoundError, NotInProjectError
from ..constants import DESCRIPTOR_FILE
from ..models.config import ProjectConfig

logger = logging.getLogger(__name__)


def _normalize(path: Union[str, Path]) -> Path:
    return Path(os.path.abspath(os.path.expanduser(str(path))))


def is_within(path: Union[str, Path], base: Union[str, Path]) -> bool:
    """Check whether ``path`` equals ``base`` or is nested under it

    Compares path segments, so ``/foo-bar`` is not within ``/foo``.
    """
    path_parts = _normalize(path).parts
    base_parts = _normalize(base).parts
    return path_parts[:len(base_parts)] == base_parts


class PathResolver:
    """Resolves the owning project of a directory"""

    def __init__(self, projects: Mapping[str, ProjectConfig]):
        """Initialize path resolver

        Args:
            projects: Configured projects keyed by name
        """
        self.projects = projects

    def resolve_project(self, cwd: Union[str, Path]) -> Tuple[str, ProjectConfig]:
        """Find the project whose base path contains ``cwd``

        When base paths are nested, the deepest one wins. Projects with
        identical base paths keep configuration order.

        Args:
            cwd: Directory to resolve

        Returns:
            (project name, project config)

        Raises:
            NotInProjectError: If no base path contains ``cwd``
        """
        best = None
        best_depth = -1

        for name, project in self.projects.items():
            if not is_within(cwd, project.base_path):
                continue
            depth = len(_normalize(project.base_path).parts)
            if depth > best_depth:
                best, best_depth = (name, project), depth

        if best is None:
            raise NotInProjectError(
                str(_normalize(cwd)),
                [p.base_path for p in self.projects.values()],
            )

        logger.debug("Resolved %s to project %s", cwd, best[0])
        return best


def walk_up(start_dir: Union[str, Path]) -> Iterator[Path]:
    """Yield ``start_dir`` and each of its parents up to the filesystem root"""
    current = _normalize(start_dir)
    while True:
        yield current
        if current.parent == current:
            return
        current = current.parent


def find_descriptor(start_dir: Union[str, Path], descriptor_name: str = DESCRIPTOR_FILE) -> Path:
    """Find the nearest build descriptor walking up the directory tree

    Args:
        start_dir: Directory to start from
        descriptor_name: Descriptor file name

    Returns:
        Absolute path to the descriptor

    Raises:
        DescriptorNotFoundError: If the root is reached without a match
    """
    for directory in walk_up(start_dir):
        candidate = directory / descriptor_name
        if candidate.is_file():
            return candidate

    raise DescriptorNotFoundError(str(start_dir), descriptor_name)


def has_descriptor(directory: Union[str, Path], descriptor_name: str = DESCRIPTOR_FILE) -> bool:
    """Check whether a directory is itself a build root"""
    if not directory:
        return False
    return (Path(directory) / descriptor_name).is_file()
