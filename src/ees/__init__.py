"""ees - easy error handling.

Helpers for building errors on the fly, wrapping them with context, and
printing their full cause chain. There is no error hierarchy of its own:
any exception works, and ``raise ... from ...`` is the cause link.

Usage:
    import ees

    def load(path):
        with ees.wrapping("failed to load {}", path):
            contents = path.read_text()
        if not contents:
            ees.bail("file is empty")
        return contents

    @ees.main
    def cli():
        load(Path("hello world"))
"""

from ees.chain import ErrorChain, iter_chain, render_chain
from ees.config import ReportConfig
from ees.entrypoint import MainError, main, report, run_main
from ees.errors import (
    CausedError,
    OpaqueError,
    PlainError,
    bail,
    into_error,
    make_error,
    make_opaque,
    make_wrapped_error,
    to_opaque,
    wrapping,
)
from ees.types import ChainFormat, Error, ErrorLike, ErrorRef

__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Types
    "Error",
    "ErrorRef",
    "ErrorLike",
    "ChainFormat",
    # Errors
    "PlainError",
    "CausedError",
    "OpaqueError",
    "make_error",
    "make_wrapped_error",
    "bail",
    "make_opaque",
    "to_opaque",
    "into_error",
    "wrapping",
    # Chain rendering
    "ErrorChain",
    "iter_chain",
    "render_chain",
    # Entry point
    "MainError",
    "ReportConfig",
    "main",
    "report",
    "run_main",
]
