"""Config module exports."""

from testlens.config.loader import load_config
from testlens.config.models import (
    LoggingConfig,
    LogOutputConfig,
    TestingConfig,
    TestLensConfig,
)

__all__ = [
    "load_config",
    "TestLensConfig",
    "TestingConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
