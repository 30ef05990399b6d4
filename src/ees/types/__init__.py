"""Shared types for ees.

Import from here rather than submodules:
    from ees.types import ChainFormat, Error, ErrorLike
"""

from .aliases import Error, ErrorLike, ErrorRef
from .enums import ChainFormat

__all__ = [
    # Aliases
    "Error",
    "ErrorRef",
    "ErrorLike",
    # Enums
    "ChainFormat",
]
