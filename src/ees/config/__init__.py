"""ees configuration."""

from .models import ENV_COLOR, ENV_EXIT_CODE, ENV_FORMAT, ENV_NO_COLOR, ReportConfig

__all__ = [
    "ReportConfig",
    "ENV_FORMAT",
    "ENV_EXIT_CODE",
    "ENV_COLOR",
    "ENV_NO_COLOR",
]
