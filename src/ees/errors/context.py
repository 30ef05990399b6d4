"""Context manager for adding context to errors raised in a block."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from .factory import make_wrapped_error


@contextmanager
def wrapping(template: str, *args: Any, **kwargs: Any) -> Iterator[None]:
    """Re-raise any exception from the block wrapped in a CausedError.

    Usage:
        with wrapping("failed to load {}", path):
            data = path.read_text()

    Args:
        template: Message, or template for str.format
        *args: Positional template arguments
        **kwargs: Named template arguments
    """
    try:
        yield
    except Exception as e:
        raise make_wrapped_error(e, template, *args, **kwargs) from e
