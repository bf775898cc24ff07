# jmw/cli/main.py
"""Main CLI entry point for jmw"""

import sys
import logging
from pathlib import Path
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.logging import RichHandler

from ..__version__ import __version__
from ..constants import APP_NAME, LOG_FORMAT
from ..core import PathResolver, detect
from ..models import Config, Detection, ProjectConfig
from ..services import ConfigService
from ..utils.process_utils import CommandRunner

# Import all commands
from .commands import build, deploy, clients

console = Console()


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Configure rich handler
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ],
        force=True,
    )


class Context:
    """CLI context object with lazy configuration loading

    Configuration is only read when a command needs it, and the project
    and module are only detected by commands that require them.
    """

    def __init__(self, runner: Optional[CommandRunner] = None):
        """Initialize CLI context

        Args:
            runner: Process runner shared by the services
        """
        self.config_path: Optional[str] = None
        self.verbose: bool = False
        self.debug: bool = False
        self.runner = runner or CommandRunner()
        self._config: Optional[Config] = None
        self._project: Optional[Tuple[str, ProjectConfig]] = None
        self._detection: Optional[Detection] = None

    @property
    def cwd(self) -> Path:
        return Path.cwd()

    @property
    def config(self) -> Config:
        """Get configuration (lazy loading)"""
        if self._config is None:
            self._config = ConfigService(self.config_path).load_config()
        return self._config

    @property
    def detection(self) -> Optional[Detection]:
        return self._detection

    @property
    def project(self) -> Optional[Tuple[str, ProjectConfig]]:
        return self._project

    def resolve_project(self) -> Tuple[str, ProjectConfig]:
        """Resolve the project owning the current directory"""
        if self._project is None:
            self._project = PathResolver(self.config.projects).resolve_project(self.cwd)
            if self.debug:
                console.print(f"[dim]Project: {self._project[0]}[/dim]")
        return self._project

    def detect(self) -> Detection:
        """Detect project and module for the current directory"""
        if self._detection is None:
            self._detection = detect(self.cwd, self.config)
            self._project = (self._detection.project_name, self._detection.project)
            if self.debug:
                console.print(f"[dim]Descriptor: {self._detection.descriptor_path}[/dim]")
        return self._detection


@click.group(name=APP_NAME)
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all output except errors')
@click.option('-c', '--config', 'config_path', type=click.Path(dir_okay=False),
              envvar='JMW_CONFIG', help='Configuration file')
@click.version_option(__version__, prog_name=APP_NAME)
@click.pass_context
def cli(ctx, verbose, debug, quiet, config_path):
    """Java Maven WildFly - Interactive build and deployment helper

    Detects the configured project and Maven module of the current
    directory, builds it with the right profiles, and tells you whether
    and how to redeploy it to WildFly.

    \b
    Examples:
      jmw build
      jmw build TEST
      jmw build TEST --client metrocargo
      jmw deploy ./target/myapp.jar
      jmw clients
    """
    # Setup logging
    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        setup_logging(verbose=verbose, debug=debug)

    # Tests may provide a prepared context object
    ctx.ensure_object(Context)
    ctx.obj.config_path = config_path
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug


# Register commands
cli.add_command(build.build)
cli.add_command(deploy.deploy)
cli.add_command(clients.clients)


def main():
    """Main entry point for the CLI application

    This function handles:
    - Keyboard interrupts
    - Unexpected exceptions with proper error display
    """
    try:
        cli(prog_name=APP_NAME)

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    main()
