"""Error chain rendering.

Two layouts are supported:

compact (default)::

    outer: middle: inner

expanded (``f"{chain:#}"``)::

    outer

    Caused by:
        0: middle
        1: inner

A chain with a single cause is shown without an index::

    outer

    Caused by:
        inner
"""

from collections.abc import Iterator

from ees.errors import OpaqueError
from ees.types import ChainFormat, ErrorRef

CAUSED_BY_HEADER = "Caused by:"
SINGLE_CAUSE_INDENT = " " * 4
INDEX_WIDTH = 5

_FORMAT_SPECS = {
    "": ChainFormat.COMPACT,
    "compact": ChainFormat.COMPACT,
    "#": ChainFormat.EXPANDED,
    "expanded": ChainFormat.EXPANDED,
}


def iter_chain(error: ErrorRef) -> Iterator[BaseException]:
    """Walk an error and its causes, outermost first.

    Only explicit causes (``raise ... from ...``) are followed. The walk stops
    early if an error shows up twice, so hand-built cycles cannot loop.

    Args:
        error: Outermost error

    Yields:
        Each error in the chain
    """
    seen: set[int] = set()
    current: BaseException | None = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = _cause_of(current)


def _cause_of(error: BaseException) -> BaseException | None:
    # Opaque wrappers take their cause from the wrapped error at walk time.
    while isinstance(error, OpaqueError):
        error = error.inner
    return error.__cause__


class ErrorChain:
    """Lazy displayable for an error and its causes.

    Nothing is traversed until the chain is formatted. The render mode is
    picked at format time: ``str(chain)`` is compact, ``format(chain, "#")``
    is expanded.
    """

    def __init__(self, error: ErrorRef):
        """Initialize error chain.

        Args:
            error: Outermost error of the chain
        """
        self.error = error

    def __iter__(self) -> Iterator[BaseException]:
        return iter_chain(self.error)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def messages(self) -> list[str]:
        """Display messages of every error in the chain, outermost first."""
        return [str(error) for error in self]

    def render(self, mode: ChainFormat | str = ChainFormat.COMPACT) -> str:
        """Render the chain.

        Args:
            mode: Compact or expanded layout

        Returns:
            Rendered chain text
        """
        messages = self.messages()
        if ChainFormat(mode) == ChainFormat.EXPANDED:
            return _render_expanded(messages)
        return ": ".join(messages)

    def __str__(self) -> str:
        return self.render(ChainFormat.COMPACT)

    def __format__(self, format_spec: str) -> str:
        mode = _FORMAT_SPECS.get(format_spec)
        if mode is None:
            msg = f"Invalid format specifier {format_spec!r} for ErrorChain"
            raise ValueError(msg)
        return self.render(mode)

    def __repr__(self) -> str:
        return f"ErrorChain({self.error!r})"


def _render_expanded(messages: list[str]) -> str:
    outer, causes = messages[0], messages[1:]
    if not causes:
        return outer

    header = f"{outer}\n\n{CAUSED_BY_HEADER}\n"
    if len(causes) == 1:
        return f"{header}{SINGLE_CAUSE_INDENT}{causes[0]}"

    lines = [f"{index:>{INDEX_WIDTH}}: {message}" for index, message in enumerate(causes)]
    return header + "\n".join(lines)


def render_chain(error: ErrorRef) -> ErrorChain:
    """Build a lazy displayable for the full chain of an error.

    Usage:
        print(f"Error: {render_chain(e)}")    # outer: inner
        print(f"Error: {render_chain(e):#}")  # multi-line, with causes listed

    Args:
        error: Outermost error

    Returns:
        ErrorChain instance
    """
    return ErrorChain(error)
