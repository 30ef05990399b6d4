"""ees error values - ad-hoc errors, wrapping, and opaque adapters."""

from .context import wrapping
from .errors import CausedError, OpaqueError, PlainError, into_error
from .factory import bail, make_error, make_opaque, make_wrapped_error, to_opaque

__all__ = [
    # Error types
    "PlainError",
    "CausedError",
    "OpaqueError",
    # Constructors
    "make_error",
    "make_wrapped_error",
    "bail",
    "make_opaque",
    "to_opaque",
    "into_error",
    "wrapping",
]
