# jmw/utils/file_utils.py
"""File operation utilities"""

import shutil
from pathlib import Path
from typing import List, Optional, Union

from ..constants import IGNORED_JAR_MARKERS, JAR_EXTENSION, WAR_EXTENSION


def _is_main_jar(name: str) -> bool:
    return name.endswith(JAR_EXTENSION) and not any(m in name for m in IGNORED_JAR_MARKERS)


def list_artifacts(target_dir: Union[str, Path]) -> List[Path]:
    """
    List built jar and war files in a Maven target directory

    Sources and javadoc jars are left out.

    Args:
        target_dir: Maven ``target`` directory

    Returns:
        Sorted artifact paths, empty if the directory does not exist
    """
    target_dir = Path(target_dir)
    if not target_dir.is_dir():
        return []

    return sorted(
        p for p in target_dir.iterdir()
        if p.is_file() and (p.name.endswith(WAR_EXTENSION) or _is_main_jar(p.name))
    )


def find_artifact(target_dir: Union[str, Path]) -> Optional[Path]:
    """
    Find the main artifact of a build

    The first war wins; otherwise the last main jar in name order.

    Args:
        target_dir: Maven ``target`` directory

    Returns:
        Artifact path or None
    """
    artifact = None
    for path in list_artifacts(target_dir):
        if path.name.endswith(WAR_EXTENSION):
            return path
        artifact = path
    return artifact


def copy_file(source: Path, target_dir: Path) -> Path:
    """
    Copy a file into a directory, creating the directory if needed

    Args:
        source: File to copy
        target_dir: Destination directory

    Returns:
        Destination path
    """
    target_dir.mkdir(parents=True, exist_ok=True)
    destination = target_dir / source.name
    shutil.copy2(source, destination)
    return destination


def format_size(size: int) -> str:
    """
    Format file size in human-readable format

    Args:
        size: Size in bytes

    Returns:
        Formatted size string
    """
    for unit in ['B', 'KB', 'MB', 'GB']:
        if size < 1024.0:
            return f"{size:.1f} {unit}"
        size /= 1024.0
    return f"{size:.1f} TB"
