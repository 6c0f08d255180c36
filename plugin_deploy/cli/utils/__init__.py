"""CLI utility functions"""

from .output import (
    console,
    clickable_path,
    format_deploy_result,
    print_error,
    print_warning,
    print_info,
    print_success,
)

__all__ = [
    'console',
    'clickable_path',
    'format_deploy_result',
    'print_error',
    'print_warning',
    'print_info',
    'print_success',
]
