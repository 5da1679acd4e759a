"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (TESTLENS__SECTION__KEY)
3. Repo YAML (.testlens/config.yaml)
4. Global YAML (~/.config/testlens/config.yaml)
5. Built-in defaults (this file)

Examples:
    TESTLENS__LOGGING__LEVEL=DEBUG
    TESTLENS__TESTING__TIMEOUT_SEC=300
    TESTLENS__TESTING__MOCHA_GROUPING=file
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        TESTLENS__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class TestingConfig(BaseModel):
    """Test execution and discovery configuration.

    Env vars:
        TESTLENS__TESTING__TIMEOUT_SEC: Runner process deadline
        TESTLENS__TESTING__MAX_OUTPUT_BYTES: Per-stream output cap
        TESTLENS__TESTING__KILL_GRACE_SEC: Wait between terminate and kill
        TESTLENS__TESTING__DISCOVERY_MAX_PER_PATTERN: Discovery glob cap
        TESTLENS__TESTING__RUNNER: Command prefix used to launch runners
        TESTLENS__TESTING__MOCHA_GROUPING: first_token or file
    """

    __test__ = False

    timeout_sec: float = Field(
        default=120.0,
        description="Deadline for a whole runner invocation. The process group is "
        "terminated when it expires.",
    )
    max_output_bytes: int = Field(
        default=5 * 1024 * 1024,
        description="Cap per captured stream. Output past the cap is dropped, which "
        "usually makes the JSON report unparseable.",
    )
    kill_grace_sec: float = Field(
        default=1.5,
        description="Time between the graceful terminate and the forceful kill.",
    )
    discovery_max_per_pattern: int = Field(
        default=100,
        description="Maximum files taken from each discovery glob pattern.",
    )
    runner: list[str] | None = Field(
        default=None,
        description="Command prefix for launching runners, e.g. ['npx']. "
        "Detected from the workspace lockfile when unset.",
    )
    mocha_grouping: Literal["first_token", "file"] = Field(
        default="first_token",
        description="How mocha's flat test list is grouped into suites.",
    )

    @field_validator("timeout_sec", "kill_grace_sec")
    @classmethod
    def validate_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"Must be positive, got {v}")
        return v

    @field_validator("max_output_bytes", "discovery_max_per_pattern")
    @classmethod
    def validate_positive_int(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"Must be at least 1, got {v}")
        return v

    @field_validator("runner")
    @classmethod
    def validate_runner(cls, v: list[str] | None) -> list[str] | None:
        if v is not None and not v:
            raise ValueError("Runner command prefix cannot be empty")
        return v


class TestLensConfig(BaseModel):
    """Root configuration for testlens."""

    __test__ = False

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    testing: TestingConfig = Field(default_factory=TestingConfig)
