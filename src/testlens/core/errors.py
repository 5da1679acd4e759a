"""testlens error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 7xxx: Test

The test pipeline reports failures as data, so only ``ConfigError`` is
expected to reach callers. ``ReportParseError`` is raised by result parsers
and handled inside ``testlens.testing``.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2003

    # Test (7xxx)
    REPORT_NOT_JSON = 7001
    REPORT_INVALID_SHAPE = 7002


@dataclass(frozen=True, slots=True)
class TestLensError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(TestLensError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class ReportParseError(TestLensError):
    """A runner's report could not be mapped to the result model."""

    @classmethod
    def not_json(cls, framework: str, reason: str) -> "ReportParseError":
        return cls(
            code=ErrorCode.REPORT_NOT_JSON,
            message=f"{framework} output is not valid JSON: {reason}",
            details={"framework": framework, "reason": reason},
        )

    @classmethod
    def invalid_shape(cls, framework: str, reason: str) -> "ReportParseError":
        return cls(
            code=ErrorCode.REPORT_INVALID_SHAPE,
            message=f"Unexpected {framework} report structure: {reason}",
            details={"framework": framework, "reason": reason},
        )
