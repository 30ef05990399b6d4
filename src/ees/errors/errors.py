"""Ad-hoc error types.

Every value handled by ees is an ordinary exception: ``str(error)`` is its
display message and ``error.__cause__`` is the failure that caused it. The
types below are the three concrete shapes the library builds itself.
"""

from ees.types import Error, ErrorLike


class PlainError(Exception):
    """Error carrying only a message. Terminal node of a chain.

    Args:
        message: Human-readable error message.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class CausedError(Exception):
    """Error carrying a message and the error that caused it.

    The cause becomes ``__cause__``, so the standard traceback printer shows
    the same chain that ``ees.chain.render_chain`` walks.

    Args:
        message: Human-readable error message.
        cause: Underlying error, owned by this one.
    """

    def __init__(self, message: str, cause: Error) -> None:
        super().__init__(message, cause)
        self.message = message
        self.cause = cause
        self.__cause__ = cause

    def __str__(self) -> str:
        return self.message


class OpaqueError(Exception):
    """Pass-through wrapper that re-exposes an error under one fixed type.

    Display text, repr and cause are all taken from the wrapped error, so the
    wrapper changes the concrete type without adding a link to the chain.

    Args:
        inner: The error being wrapped.
    """

    def __init__(self, inner: Error) -> None:
        super().__init__(inner)
        self.inner = inner
        # Snapshot for the traceback printer; iter_chain reads through to inner.
        self.__cause__ = inner.__cause__
        self.__suppress_context__ = True

    def __str__(self) -> str:
        return str(self.inner)

    def __repr__(self) -> str:
        return repr(self.inner)


def into_error(value: ErrorLike) -> Error:
    """Convert an error-like value into an owned error.

    Args:
        value: An exception, returned unchanged, or a message string,
            which becomes a PlainError with that exact text

    Returns:
        Exception instance

    Raises:
        TypeError: If value is neither an exception nor a string
    """
    if isinstance(value, BaseException):
        return value
    if isinstance(value, str):
        return PlainError(value)
    msg = f"Cannot convert {type(value).__name__} to an error"
    raise TypeError(msg)
