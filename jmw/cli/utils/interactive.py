"""Interactive utilities for CLI commands"""

from typing import Callable, Optional

from rich.console import Console
from rich.prompt import Confirm

Confirmer = Callable[[str], bool]


class ConsoleConfirmer:
    """Asks the user on the terminal; an empty answer means yes"""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def __call__(self, prompt: str) -> bool:
        return Confirm.ask(f"\n[cyan]{prompt}[/cyan]", default=True, console=self.console)


def always(answer: bool) -> Confirmer:
    """Non-interactive confirmer returning a fixed answer"""
    def confirm(prompt: str) -> bool:
        return answer
    return confirm


def get_confirmer(assume_yes: bool) -> Confirmer:
    """Confirmer for a command, honouring ``--yes``"""
    return always(True) if assume_yes else ConsoleConfirmer()
