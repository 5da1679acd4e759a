"""CLI utilities."""

from pathlib import Path

import click

from testlens.config import TestLensConfig, load_config
from testlens.core.errors import ConfigError
from testlens.core.logging import configure_logging
from testlens.testing import TestRunner


def load_workspace_config(ctx: click.Context, workspace_root: Path) -> TestLensConfig:
    """Load the workspace's config and apply its logging section.

    ``-v`` keeps the DEBUG console logging set up by the group.

    Raises:
        click.ClickException: If the config file is invalid
    """
    config_path = ctx.obj.get("config_path") if ctx.obj else None
    try:
        config = load_config(workspace_root, config_path=config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    if not (ctx.obj and ctx.obj.get("verbose")):
        configure_logging(config=config.logging)
    return config


def make_runner(ctx: click.Context, path: Path) -> TestRunner:
    """Build a TestRunner for the workspace at PATH."""
    workspace_root = path.resolve()
    config = load_workspace_config(ctx, workspace_root)
    return TestRunner(workspace_root, config=config.testing)
