"""testlens - test framework detection, execution and result normalization."""

from testlens.testing import TestRunner, TestRunOptions

__version__ = "0.1.0"

__all__ = ["TestRunner", "TestRunOptions", "__version__"]
