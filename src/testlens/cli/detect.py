"""testlens detect command - print the workspace's test framework."""

import json
from pathlib import Path

import click

from testlens.cli.utils import make_runner


@click.command()
@click.argument("path", default=".", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def detect_command(ctx: click.Context, path: Path, as_json: bool) -> None:
    """Detect the test framework used by a workspace.

    PATH is the workspace root (default: current directory).
    """
    runner = make_runner(ctx, path)
    framework = runner.detect_framework()
    if as_json:
        click.echo(json.dumps({"workspace": str(runner.workspace_root), "framework": framework}))
    else:
        click.echo(framework)
