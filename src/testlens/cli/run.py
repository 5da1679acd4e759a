"""testlens run command - run the workspace's tests once."""

import asyncio
import json
from pathlib import Path

import click
from rich.markup import escape

from testlens.cli.utils import make_runner
from testlens.core.console import pluralize, status
from testlens.testing import TestRunOptions, TestRunResult
from testlens.testing.models import FRAMEWORKS

_RUNNABLE = [f for f in FRAMEWORKS if f != "unknown"]


def _first_line(text: str) -> str:
    return next((line.strip() for line in text.splitlines() if line.strip()), "")


def _print_result(result: TestRunResult) -> None:
    for suite in result.suites:
        for test in suite.tests:
            if test.status != "failed":
                continue
            parents = [suite.name] if test.suite in ("", suite.name) else [suite.name, test.suite]
            title = " › ".join([*parents, test.name])
            status(escape(title), style="error")
            if test.error is None:
                continue
            # A run cut short may have no output, only the note in stack
            detail = _first_line(test.error.message) or _first_line(test.error.stack or "")
            if detail:
                status(escape(detail), indent=4)

    summary = result.summary
    parts = [f"{summary.passed} passed", f"{summary.failed} failed"]
    if summary.skipped:
        parts.append(f"{summary.skipped} skipped")
    line = (
        f"{pluralize(summary.total, 'test')}: {', '.join(parts)} "
        f"({result.framework}, {result.duration_ms} ms)"
    )
    status(line, style="success" if result.passed else "error")

    if result.reason:
        status(escape(result.reason), style="warning")
    if cov := result.coverage:
        status(
            f"Coverage: lines {cov.lines:g}%, branches {cov.branches:g}%, "
            f"functions {cov.functions:g}%, statements {cov.statements:g}%"
        )


@click.command()
@click.argument("path", default=".", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("-f", "--file", "files", multiple=True, help="Test file to run (repeatable)")
@click.option("-p", "--pattern", "patterns", multiple=True, help="Test name regex (repeatable)")
@click.option("--coverage", is_flag=True, help="Collect a coverage summary")
@click.option(
    "--framework",
    type=click.Choice(_RUNNABLE),
    default=None,
    help="Override framework detection",
)
@click.option("--timeout-ms", type=click.IntRange(min=1), default=None, help="Per-test timeout")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def run_command(
    ctx: click.Context,
    path: Path,
    files: tuple[str, ...],
    patterns: tuple[str, ...],
    coverage: bool,
    framework: str | None,
    timeout_ms: int | None,
    as_json: bool,
) -> None:
    """Run tests once and print a normalized summary.

    PATH is the workspace root (default: current directory). Exits with
    status 1 when the run did not pass.
    """
    runner = make_runner(ctx, path)
    options = TestRunOptions(
        files=files,
        patterns=patterns,
        coverage=coverage,
        framework=framework,  # type: ignore[arg-type]
        timeout_ms=timeout_ms,
    )
    result = asyncio.run(runner.run(options))

    if as_json:
        click.echo(json.dumps(result.to_dict()))
    else:
        _print_result(result)

    if not result.passed:
        ctx.exit(1)
