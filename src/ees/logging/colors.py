"""ANSI color codes for terminal output.

All colors use the 256-color palette for better compatibility and consistency.

Usage:
    from ees.logging.colors import RED, RESET

    print(f"{RED}Error:{RESET} something failed")
"""

# Basic colors
RESET = "\033[0m"

# Primary colors for status indication
RED = "\033[38;5;196m"  # Errors - bright red
YELLOW = "\033[38;5;226m"  # Warnings - bright yellow

# Secondary colors for information
LIGHT_BLUE = "\033[38;5;153m"  # Debug - light blue
CYAN = "\033[38;5;51m"  # Info - cyan

# Color aliases for semantic meaning
FAILURE = RED
WARNING = YELLOW
INFO = CYAN
DEBUG = LIGHT_BLUE

__all__ = [
    "RESET",
    "RED",
    "YELLOW",
    "LIGHT_BLUE",
    "CYAN",
    "FAILURE",
    "WARNING",
    "INFO",
    "DEBUG",
]
