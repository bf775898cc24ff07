# jmw/utils/__init__.py
"""Utility functions for jmw"""

from .file_utils import (
    list_artifacts,
    find_artifact,
    copy_file,
    format_size,
)

from .process_utils import (
    CommandError,
    CommandRunner,
    format_command,
)

__all__ = [
    # File utilities
    "list_artifacts",
    "find_artifact",
    "copy_file",
    "format_size",

    # Process utilities
    "CommandError",
    "CommandRunner",
    "format_command",
]
