# jmw/utils/process_utils.py
"""External process execution"""

import logging
import shlex
import subprocess
from pathlib import Path
from typing import Optional, Sequence, Union

logger = logging.getLogger(__name__)


class CommandError(Exception):
    """An external command could not be run or exited non-zero"""

    def __init__(self, message: str, returncode: Optional[int] = None):
        super().__init__(message)
        self.returncode = returncode


def format_command(args: Sequence[str]) -> str:
    """Render an argument list as a shell-safe command line"""
    return shlex.join(list(args))


class CommandRunner:
    """Runs commands synchronously with output attached to the terminal"""

    def run(self,
            args: Sequence[str],
            cwd: Optional[Union[str, Path]] = None,
            timeout: Optional[float] = None) -> None:
        """
        Run a command to completion

        Args:
            args: Command and arguments
            cwd: Working directory
            timeout: Seconds before the process is killed, None to wait forever

        Raises:
            CommandError: If the command is missing, times out or exits non-zero
        """
        command = format_command(args)
        logger.info("Running %s (cwd=%s)", command, cwd)

        try:
            result = subprocess.run(list(args), cwd=cwd, timeout=timeout)
        except FileNotFoundError:
            raise CommandError(f"command not found: {args[0]}")
        except subprocess.TimeoutExpired:
            raise CommandError(f"'{command}' timed out after {timeout:g}s")
        except OSError as e:
            raise CommandError(f"cannot run '{command}': {e}")

        if result.returncode != 0:
            raise CommandError(
                f"'{command}' exited with status {result.returncode}",
                result.returncode,
            )
