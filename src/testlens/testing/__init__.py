"""Test operations module - detection, discovery and normalized runs."""

from testlens.testing.models import (
    CoverageSummary,
    DiscoveredSuite,
    Framework,
    TestCase,
    TestDiscoveryResult,
    TestError,
    TestRunOptions,
    TestRunResult,
    TestStatus,
    TestSuite,
    TestSummary,
)
from testlens.testing.ops import TestRunner

__all__ = [
    "TestRunner",
    "Framework",
    "TestStatus",
    "TestRunOptions",
    "TestRunResult",
    "TestSuite",
    "TestCase",
    "TestError",
    "TestSummary",
    "CoverageSummary",
    "TestDiscoveryResult",
    "DiscoveredSuite",
]
