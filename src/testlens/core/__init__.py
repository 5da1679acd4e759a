"""Core module exports."""

from testlens.core.errors import (
    ConfigError,
    ErrorCode,
    ReportParseError,
    TestLensError,
)
from testlens.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)

__all__ = [
    # Errors
    "TestLensError",
    "ConfigError",
    "ErrorCode",
    "ReportParseError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
]
