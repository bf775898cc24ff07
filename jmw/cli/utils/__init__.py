"""CLI utility functions"""

from .interactive import ConsoleConfirmer, always, get_confirmer
from .output import console, print_error, print_warning, print_success, print_info

__all__ = [
    # Confirmation
    'ConsoleConfirmer',
    'always',
    'get_confirmer',

    # Output
    'console',
    'print_error',
    'print_warning',
    'print_success',
    'print_info',
]
