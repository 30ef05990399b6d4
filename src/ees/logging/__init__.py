"""ees logging - error chains in structured and colored log output."""

from .colors import (
    CYAN,
    LIGHT_BLUE,
    RED,
    RESET,
    YELLOW,
)
from .logger import (
    ChainFormatter,
    StructuredLogFormatter,
    log_error_chain,
)

__all__ = [
    # Formatters
    "StructuredLogFormatter",
    "ChainFormatter",
    # Helpers
    "log_error_chain",
    # Colors
    "RESET",
    "RED",
    "YELLOW",
    "LIGHT_BLUE",
    "CYAN",
]
