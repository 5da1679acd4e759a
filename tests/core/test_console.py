"""Tests for core/console.py module."""

from __future__ import annotations

import pytest

from testlens.core.console import _STYLES, get_console, pluralize, status


class TestPluralize:
    """Tests for pluralize."""

    @pytest.mark.parametrize(
        ("count", "expected"),
        [(0, "0 tests"), (1, "1 test"), (2, "2 tests")],
    )
    def test_default_plural(self, count: int, expected: str) -> None:
        assert pluralize(count, "test") == expected

    def test_custom_plural(self) -> None:
        assert pluralize(3, "suite", "suites!") == "3 suites!"


class TestStatus:
    """Tests for status."""

    def test_styles_defined(self) -> None:
        assert set(_STYLES) == {"success", "error", "warning", "info", "none"}

    def test_prints_message(self) -> None:
        console = get_console()
        with console.capture() as capture:
            status("All tests passed", style="success")
        assert "All tests passed" in capture.get()
        assert "✓" in capture.get()

    def test_indent(self) -> None:
        console = get_console()
        with console.capture() as capture:
            status("detail", style="none", indent=4)
        assert capture.get().startswith("    detail")
