"""testlens discover command - estimate the test inventory."""

import asyncio
import json
from pathlib import Path

import click
from rich.markup import escape
from rich.table import Table

from testlens.cli.utils import make_runner
from testlens.core.console import get_console, pluralize, status


@click.command()
@click.argument("path", default=".", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def discover_command(ctx: click.Context, path: Path, as_json: bool) -> None:
    """List test files and their estimated test counts.

    Counts come from scanning the source for it()/test() calls; nothing is
    executed. PATH is the workspace root (default: current directory).
    """
    runner = make_runner(ctx, path)
    result = asyncio.run(runner.discover())

    if as_json:
        click.echo(json.dumps(result.to_dict()))
        return

    if not result.suites:
        status(f"No test files found ({result.framework})", style="warning")
        return

    root = runner.workspace_root
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("File")
    table.add_column("Suite")
    table.add_column("Tests", justify="right")
    for suite in result.suites:
        file = Path(suite.file)
        shown = file.relative_to(root) if root and file.is_relative_to(root) else file
        table.add_row(escape(str(shown)), escape(suite.name), str(suite.test_count))

    console = get_console()
    console.print(table)
    console.print()
    status(
        f"{pluralize(len(result.suites), 'file')}, "
        f"~{pluralize(result.total_tests, 'test')} ({result.framework})",
        style="none",
    )
