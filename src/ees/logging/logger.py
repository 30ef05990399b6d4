"""ees logging - error chains in log output, with OTEL trace context.

Library modules log through ``logging.getLogger(__name__)`` and never install
handlers themselves. Applications that want error chains in their logs attach
one of the formatters below.

Usage:
    import logging

    from ees.logging import ChainFormatter, log_error_chain

    handler = logging.StreamHandler()
    handler.setFormatter(ChainFormatter(colored=True))
    logger = logging.getLogger("worker")
    logger.addHandler(handler)

    try:
        run()
    except Exception as e:
        log_error_chain(logger, e, "Job failed")
"""

import json
import logging
from datetime import UTC, datetime
from typing import Any

from opentelemetry import trace

from ees.chain import render_chain
from ees.logging.colors import CYAN, LIGHT_BLUE, RED, RESET, YELLOW
from ees.types import ChainFormat

# Attributes every LogRecord has; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(
    {
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "pathname", "process", "processName", "relativeCreated",
        "stack_info", "exc_info", "exc_text", "thread", "threadName",
        "message", "taskName",
    }
)

_LEVEL_COLORS = {
    logging.DEBUG: LIGHT_BLUE,
    logging.INFO: CYAN,
    logging.WARNING: YELLOW,
    logging.ERROR: RED,
    logging.CRITICAL: RED,
}


class StructuredLogFormatter(logging.Formatter):
    """JSON formatter with trace context and error chain injection.

    Formats log records as JSON with:
    - timestamp (ISO 8601)
    - level
    - component (logger name)
    - message
    - trace_id / span_id (if a span is recording)
    - error / error_chain (if the record carries an exception)
    - Additional fields from extra
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log string
        """
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "component": record.name,
            "message": record.getMessage(),
        }

        span = trace.get_current_span()
        if span and span.is_recording():
            ctx = span.get_span_context()
            if ctx.is_valid:
                log_data["trace_id"] = format(ctx.trace_id, "032x")
                log_data["span_id"] = format(ctx.span_id, "016x")

        if record.exc_info and record.exc_info[1] is not None:
            chain = render_chain(record.exc_info[1])
            log_data["error"] = str(chain)
            log_data["error_chain"] = chain.messages()

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class ChainFormatter(logging.Formatter):
    """Text formatter that prints the expanded error chain instead of a traceback."""

    def __init__(
        self,
        fmt: str | None = "[%(levelname)s] %(name)s: %(message)s",
        datefmt: str | None = None,
        colored: bool = False,
    ):
        """Initialize formatter.

        Args:
            fmt: Record format string
            datefmt: Date format string
            colored: Wrap each record in its level's ANSI color
        """
        super().__init__(fmt, datefmt)
        self.colored = colored

    def formatException(self, ei: Any) -> str:  # noqa: N802
        """Render the exception's cause chain in expanded layout."""
        if ei[1] is None:
            return super().formatException(ei)
        return render_chain(ei[1]).render(ChainFormat.EXPANDED)

    def format(self, record: logging.LogRecord) -> str:
        """Format record, coloring it by level when enabled."""
        text = super().format(record)
        if not self.colored:
            return text
        return f"{_LEVEL_COLORS.get(record.levelno, RESET)}{text}{RESET}"


def log_error_chain(
    logger: logging.Logger,
    error: BaseException,
    message: str | None = None,
    level: int = logging.ERROR,
) -> None:
    """Log an error with its full cause chain attached as ``error_chain``.

    Args:
        logger: Logger to write to
        error: Error to log
        message: Log message (defaults to the compact chain render)
        level: Logging level
    """
    chain = render_chain(error)
    logger.log(level, message or str(chain), extra={"error_chain": chain.messages()})
