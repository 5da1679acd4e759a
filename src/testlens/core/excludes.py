"""Directories never scanned for tests or Unity markers.

Only dependency installs and VCS internals are pruned. Build output, editor
and cache directories are scanned like any other: projects keep real tests
under names such as ``build/`` or ``out/``.
"""

from __future__ import annotations

# VCS internals and our own data
HARDCODED_DIRS: frozenset[str] = frozenset(
    (
        ".git",
        ".svn",
        ".hg",
        ".testlens",
    )
)

# Installed third-party packages, which ship their own test files
DEFAULT_PRUNABLE_DIRS: frozenset[str] = frozenset(
    (
        "node_modules",
        "bower_components",
        "jspm_packages",
        ".pnpm-store",
        ".yarn",
        ".npm",
    )
)

PRUNABLE_DIRS: frozenset[str] = HARDCODED_DIRS | DEFAULT_PRUNABLE_DIRS

