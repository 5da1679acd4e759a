"""Shared fixtures for the test suite.

The local src/ directory takes priority over any installed testlens.
"""

import json
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """An empty workspace directory."""
    root = tmp_path / "workspace"
    root.mkdir()
    return root


@pytest.fixture
def write_manifest(workspace: Path) -> Callable[..., Path]:
    """Write a package.json into the workspace.

    Usage: ``write_manifest(devDependencies={"jest": "^29"})``
    """

    def _write(**fields: Any) -> Path:
        path = workspace / "package.json"
        path.write_text(json.dumps({"name": "fixture", **fields}))
        return path

    return _write


@pytest.fixture
def write_file(workspace: Path) -> Callable[[str, str], Path]:
    """Write a file relative to the workspace, creating parent directories."""

    def _write(rel_path: str, content: str) -> Path:
        path = workspace / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write
