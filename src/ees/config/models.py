"""ees configuration data models."""

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TextIO

from ees.errors import make_wrapped_error
from ees.types import ChainFormat

ENV_FORMAT = "EES_ERROR_FORMAT"
ENV_EXIT_CODE = "EES_EXIT_CODE"
ENV_COLOR = "EES_COLOR"
ENV_NO_COLOR = "NO_COLOR"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class ReportConfig:
    """How a failing entry point reports its error."""

    format: ChainFormat = ChainFormat.EXPANDED
    colored: bool = False
    prefix: str = "Error: "
    exit_code: int = 1
    output: TextIO = field(default_factory=lambda: sys.stderr)

    def __post_init__(self) -> None:
        """Normalize format and validate exit code."""
        self.format = ChainFormat(self.format)
        if self.exit_code == 0:
            msg = "exit_code must be non-zero for a failing run"
            raise ValueError(msg)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ReportConfig":
        """Build configuration from environment variables.

        Reads EES_ERROR_FORMAT (compact/expanded), EES_EXIT_CODE and
        EES_COLOR. A non-empty NO_COLOR turns colors off.

        Args:
            environ: Environment mapping (defaults to os.environ)

        Returns:
            ReportConfig instance

        Raises:
            CausedError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        config = cls()

        if value := env.get(ENV_FORMAT):
            try:
                config.format = ChainFormat(value.strip().lower())
            except ValueError as e:
                raise make_wrapped_error(e, "invalid {}", ENV_FORMAT) from e

        if value := env.get(ENV_EXIT_CODE):
            try:
                exit_code = int(value)
                if exit_code == 0:
                    msg = "exit code must be non-zero"
                    raise ValueError(msg)
            except ValueError as e:
                raise make_wrapped_error(e, "invalid {}", ENV_EXIT_CODE) from e
            config.exit_code = exit_code

        if value := env.get(ENV_COLOR):
            config.colored = value.strip().lower() in _TRUTHY

        if env.get(ENV_NO_COLOR):
            config.colored = False

        return config
