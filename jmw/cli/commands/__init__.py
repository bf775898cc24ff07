# jmw/cli/commands/__init__.py
"""CLI commands"""

from . import build
from . import deploy
from . import clients

__all__ = [
    "build",
    "deploy",
    "clients",
]
