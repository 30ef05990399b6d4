"""Constructors for building errors on the fly from message templates."""

import logging
from typing import Any, NoReturn

from ees.types import Error, ErrorLike

from .errors import CausedError, OpaqueError, PlainError, into_error

logger = logging.getLogger(__name__)


def _format_message(template: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    """Safe template interpolation.

    Args:
        template: Template string with {} / {0} / {name} placeholders
        args: Positional substitutions
        kwargs: Named substitutions

    Returns:
        The template itself when there is nothing to substitute, the
        formatted text otherwise. A template that cannot be formatted with
        the given arguments is returned as-is.
    """
    if not args and not kwargs:
        return template

    try:
        return template.format(*args, **kwargs)
    except (KeyError, IndexError, ValueError, TypeError, AttributeError) as e:
        logger.debug("Could not format error message %r: %s", template, e)
        return template


def make_error(template: str, *args: Any, **kwargs: Any) -> PlainError:
    """Construct an error from a message template.

    Args:
        template: Message, or template for str.format
        *args: Positional template arguments
        **kwargs: Named template arguments

    Returns:
        PlainError instance
    """
    return PlainError(_format_message(template, args, kwargs))


def make_wrapped_error(
    cause: ErrorLike,
    template: str,
    *args: Any,
    **kwargs: Any,
) -> CausedError:
    """Wrap an error in a new error with additional context.

    Args:
        cause: Error to wrap; any exception, or a message string
        template: Message, or template for str.format
        *args: Positional template arguments
        **kwargs: Named template arguments

    Returns:
        CausedError whose cause is ``cause``
    """
    return CausedError(_format_message(template, args, kwargs), into_error(cause))


def bail(template: str, *args: Any, **kwargs: Any) -> NoReturn:
    """Construct an error on the fly and raise it immediately."""
    raise make_error(template, *args, **kwargs)


def make_opaque(error: Error) -> OpaqueError:
    """Wrap an exception in an OpaqueError without conversion."""
    return OpaqueError(error)


def to_opaque(error: ErrorLike) -> OpaqueError:
    """Re-expose any error-like value as an OpaqueError.

    Useful when handing errors of mixed types to code that expects exactly
    one exception type. Rendering the result gives the same text as
    rendering the original.

    Args:
        error: Error to wrap; any exception, or a message string

    Returns:
        OpaqueError instance
    """
    return make_opaque(into_error(error))
