"""Utility modules for yeet.

This module exports commonly used utility functions.
"""

from yeet.utils.formatting import (
    console,
    err_console,
    make_console,
    print_error,
    print_failure,
    print_info,
    print_success,
)

__all__ = [
    "console",
    "err_console",
    "make_console",
    "print_error",
    "print_failure",
    "print_info",
    "print_success",
]
