"""Project context decorators for CLI commands"""

from functools import wraps
from typing import Callable

import click

from ..utils.output import console, print_error
from ...api.exceptions import JmwError


def handle_errors(func: Callable) -> Callable:
    """Decorator that turns jmw errors into a message and exit status 1

    This is the only place where errors raised by the decision engine and
    the services are shown to the user.

    Args:
        func: Command function to decorate

    Returns:
        Decorated function
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        ctx = click.get_current_context()
        try:
            return func(*args, **kwargs)
        except JmwError as e:
            print_error(str(e))
            if getattr(ctx.obj, 'debug', False):
                console.print(f"[dim]Error code: {e.error_code}[/dim]")
            ctx.exit(1)

    return wrapper


def require_detection(func: Callable) -> Callable:
    """Decorator that ensures the command runs inside a configured module

    This decorator:
    1. Loads the configuration
    2. Resolves the project and module owning the current directory
    3. Stores the detection on the context object

    Errors propagate to :func:`handle_errors`, which must wrap this
    decorator.

    Args:
        func: Command function to decorate

    Returns:
        Decorated function
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        ctx = click.get_current_context()
        ctx.obj.detect()
        return func(*args, **kwargs)

    return wrapper


def require_project(func: Callable) -> Callable:
    """Decorator for commands that need the project but not a module

    Args:
        func: Command function to decorate

    Returns:
        Decorated function
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        ctx = click.get_current_context()
        ctx.obj.resolve_project()
        return func(*args, **kwargs)

    return wrapper
