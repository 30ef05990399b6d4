"""ees entry point support - report the full error chain and exit non-zero."""

from .main_error import MainError, main, report, run_main

__all__ = [
    "MainError",
    "main",
    "report",
    "run_main",
]
