"""Process-exit error reporting for program entry points."""

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from ees.chain import render_chain
from ees.config import ReportConfig
from ees.errors import into_error
from ees.logging.colors import FAILURE, RESET
from ees.logging.logger import log_error_chain
from ees.types import ChainFormat, ErrorLike

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MainError(Exception):
    """Top-level error of a failing program.

    Both ``str()`` and ``repr()`` give the expanded chain of the wrapped
    error, so an unhandled MainError prints with full causal context.

    Args:
        error: Any exception, or a message string
    """

    def __init__(self, error: ErrorLike) -> None:
        if isinstance(error, MainError):
            error = error.error
        inner = into_error(error)
        super().__init__(inner)
        self.error = inner
        self.__suppress_context__ = True

    @classmethod
    def from_error(cls, error: ErrorLike) -> "MainError":
        """Convert any error-like value into a MainError."""
        return cls(error)

    def __str__(self) -> str:
        return render_chain(self.error).render(ChainFormat.EXPANDED)

    def __repr__(self) -> str:
        return str(self)


def report(error: ErrorLike, config: ReportConfig | None = None) -> int:
    """Write a failing run's error to the configured stream.

    Args:
        error: Error that ended the run
        config: Report configuration (defaults to ReportConfig())

    Returns:
        Exit status to terminate with
    """
    config = config or ReportConfig()
    main_error = MainError(error)

    prefix = config.prefix
    if config.colored:
        prefix = f"{FAILURE}{prefix}{RESET}"

    print(f"{prefix}{render_chain(main_error.error).render(config.format)}", file=config.output)
    log_error_chain(
        logger,
        main_error.error,
        f"Reported {type(main_error.error).__name__}, exiting with status {config.exit_code}",
        logging.DEBUG,
    )
    return config.exit_code


def run_main(
    func: Callable[..., T],
    *args: Any,
    config: ReportConfig | None = None,
    **kwargs: Any,
) -> T:
    """Run an entry point, reporting any failure and exiting non-zero.

    Args:
        func: Entry point to call
        *args: Positional arguments for func
        config: Report configuration (defaults to ReportConfig.from_env())
        **kwargs: Keyword arguments for func

    Returns:
        Whatever func returns

    Raises:
        SystemExit: If func raised an Exception
    """
    if config is None:
        config = ReportConfig.from_env()

    try:
        return func(*args, **kwargs)
    except Exception as e:
        raise SystemExit(report(e, config)) from e


def main(
    func: Callable[..., T] | None = None,
    *,
    config: ReportConfig | None = None,
) -> Any:
    """Decorate a program entry point with run_main.

    Usage:
        @ees.main
        def cli() -> None:
            ...

        @ees.main(config=ReportConfig(format=ChainFormat.COMPACT))
        def other() -> None:
            ...
    """

    def decorator(f: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(f)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            return run_main(f, *args, config=config, **kwargs)

        return wrapper

    if func is None:
        return decorator
    return decorator(func)
