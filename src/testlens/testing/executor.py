"""Subprocess execution for test runners.

Runs one runner invocation with a deadline, a per-stream output cap and an
optional external cancellation event. On timeout or cancellation the whole
process group gets a graceful terminate, then a forceful kill once the grace
period runs out.
"""

from __future__ import annotations

import asyncio
import contextlib
import os
import signal
import time
from dataclasses import dataclass
from pathlib import Path

from testlens.core.logging import get_logger

log = get_logger("testing.executor")

DEFAULT_KILL_GRACE_SEC = 1.5
_CHUNK_SIZE = 64 * 1024


@dataclass
class ProcessResult:
    """Outcome of a runner invocation.

    ``timed_out`` is set whenever the deadline fired, even if the process
    exited on its own during the grace period. ``exit_code`` is None only if
    the process could not be reaped.
    """

    exit_code: int | None
    stdout: str
    stderr: str
    timed_out: bool = False
    cancelled: bool = False
    truncated: bool = False
    duration_ms: int = 0


class _CappedBuffer:
    """Byte buffer that silently drops data past ``limit``."""

    def __init__(self, limit: int) -> None:
        self._limit = limit
        self._data = bytearray()
        self.truncated = False

    def append(self, chunk: bytes) -> None:
        room = self._limit - len(self._data)
        if len(chunk) > room:
            self.truncated = True
            chunk = chunk[: max(room, 0)]
        self._data.extend(chunk)

    def text(self) -> str:
        return self._data.decode(errors="replace")


async def _drain(stream: asyncio.StreamReader | None, buffer: _CappedBuffer) -> None:
    # Keep reading past the cap so the child never blocks on a full pipe
    if stream is None:
        return
    while chunk := await stream.read(_CHUNK_SIZE):
        buffer.append(chunk)


class ProcessExecutor:
    """Runs external commands for the test orchestrator."""

    def __init__(self, *, kill_grace_sec: float = DEFAULT_KILL_GRACE_SEC) -> None:
        self._kill_grace_sec = kill_grace_sec

    async def run(
        self,
        command: str,
        args: list[str],
        cwd: Path,
        *,
        timeout_sec: float,
        max_buffer_bytes: int,
        env: dict[str, str] | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> ProcessResult:
        """Run ``command`` with ``args`` in ``cwd`` until exit, timeout or cancel.

        Args:
            command: Executable to launch
            args: Arguments passed to the executable
            cwd: Working directory
            timeout_sec: Deadline for the whole invocation
            max_buffer_bytes: Cap applied to stdout and stderr separately
            env: Overrides merged over the inherited environment
            cancel_event: Setting this aborts the process like a timeout

        Raises:
            OSError: If the process cannot be launched.
        """
        start = time.monotonic()
        full_env = {**os.environ, **(env or {})}

        proc = await asyncio.create_subprocess_exec(
            command,
            *args,
            cwd=cwd,
            env=full_env,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            start_new_session=os.name == "posix",
        )
        log.debug("process_started", pid=proc.pid, command=command, args=args, cwd=str(cwd))

        stdout_buf = _CappedBuffer(max_buffer_bytes)
        stderr_buf = _CappedBuffer(max_buffer_bytes)
        readers = asyncio.gather(
            _drain(proc.stdout, stdout_buf),
            _drain(proc.stderr, stderr_buf),
        )

        waiter = asyncio.ensure_future(proc.wait())
        watchers: set[asyncio.Future[object]] = {waiter}
        cancel_waiter: asyncio.Future[object] | None = None
        if cancel_event is not None:
            cancel_waiter = asyncio.ensure_future(cancel_event.wait())
            watchers.add(cancel_waiter)

        timed_out = False
        cancelled = False
        try:
            done, _ = await asyncio.wait(
                watchers, timeout=timeout_sec, return_when=asyncio.FIRST_COMPLETED
            )
            if waiter not in done:
                if cancel_waiter is not None and cancel_waiter in done:
                    cancelled = True
                    log.info("process_cancelled", pid=proc.pid)
                else:
                    timed_out = True
                    log.warning("process_timeout", pid=proc.pid, timeout_sec=timeout_sec)
                await self._stop(proc, waiter)
        except asyncio.CancelledError:
            # Caller cancelled us; don't leave the runner behind
            _signal_group(proc, force=True)
            readers.cancel()
            raise
        finally:
            if cancel_waiter is not None:
                cancel_waiter.cancel()
            # Still pending if the caller cancelled or the kill did not land
            if not waiter.done():
                waiter.cancel()

        # Pipes close once every process in the group has exited
        try:
            await asyncio.wait_for(readers, timeout=self._kill_grace_sec)
        except TimeoutError:
            log.warning("process_output_abandoned", pid=proc.pid)

        truncated = stdout_buf.truncated or stderr_buf.truncated
        if truncated:
            log.warning("process_output_truncated", pid=proc.pid, limit=max_buffer_bytes)

        return ProcessResult(
            exit_code=proc.returncode,
            stdout=stdout_buf.text(),
            stderr=stderr_buf.text(),
            timed_out=timed_out,
            cancelled=cancelled,
            truncated=truncated,
            duration_ms=int((time.monotonic() - start) * 1000),
        )

    async def _stop(self, proc: asyncio.subprocess.Process, waiter: asyncio.Future[int]) -> None:
        """Terminate, then kill if still alive after the grace period."""
        _signal_group(proc, force=False)
        try:
            await asyncio.wait_for(asyncio.shield(waiter), timeout=self._kill_grace_sec)
            return
        except TimeoutError:
            pass
        log.warning("process_killed", pid=proc.pid, grace_sec=self._kill_grace_sec)
        _signal_group(proc, force=True)
        with contextlib.suppress(TimeoutError):
            await asyncio.wait_for(asyncio.shield(waiter), timeout=self._kill_grace_sec)


def _signal_group(proc: asyncio.subprocess.Process, *, force: bool) -> None:
    """Signal the runner and its children (whole group on POSIX)."""
    if proc.returncode is not None and os.name != "posix":
        return
    with contextlib.suppress(ProcessLookupError, PermissionError):
        if os.name == "posix":
            os.killpg(proc.pid, signal.SIGKILL if force else signal.SIGTERM)
        elif force:
            proc.kill()
        else:
            proc.terminate()
