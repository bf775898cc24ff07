# jmw/cli/decorators/__init__.py
"""CLI decorators"""

from .project import handle_errors, require_detection, require_project

__all__ = [
    'handle_errors',
    'require_detection',
    'require_project',
]
