"""Shared enumerations for ees."""

from enum import Enum


class ChainFormat(str, Enum):
    """Error chain render mode."""

    COMPACT = "compact"
    EXPANDED = "expanded"
