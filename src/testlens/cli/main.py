"""testlens CLI - testlens command."""

from pathlib import Path

import click

from testlens.cli.detect import detect_command
from testlens.cli.discover import discover_command
from testlens.cli.run import run_command
from testlens.core.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="testlens")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Config file to use instead of .testlens/config.yaml",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """testlens - Run JavaScript test suites and normalize their results."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config_path
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(detect_command, name="detect")
cli.add_command(discover_command, name="discover")
cli.add_command(run_command, name="run")


if __name__ == "__main__":
    cli()
