"""Run external commands and capture their output without interpreting it."""

from __future__ import annotations

import asyncio
import logging
import os
import shlex
import time
from collections.abc import Sequence
from dataclasses import dataclass, field

from odo.constants import DEFAULT_STREAM_LIMIT
from odo.models import ExecutionOptions

logger = logging.getLogger("odo.executor")


class CLIExecutionError(RuntimeError):
    """Describes a process that could not start or exited with a non-zero status."""

    def __init__(self, message: str, *, returncode: int | None = None, stdout: str = "", stderr: str = "") -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


@dataclass(frozen=True)
class ExecutionResult:
    """Captured streams and status of one process run."""

    stdout: str
    stderr: str | None = None
    error: CLIExecutionError | None = None
    command: list[str] = field(default_factory=list)
    returncode: int | None = None
    duration_seconds: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None


class CommandExecutor:
    """Capability that runs a command line and returns an ExecutionResult."""

    async def execute(
        self,
        command: Sequence[str] | str,
        options: ExecutionOptions | None = None,
    ) -> ExecutionResult:
        raise NotImplementedError("Executors must implement execute()")


class CliExecutor(CommandExecutor):
    """Spawn one subprocess per call with asyncio and capture stdout/stderr."""

    def __init__(self, *, stream_limit: int = DEFAULT_STREAM_LIMIT) -> None:
        self._stream_limit = stream_limit

    async def execute(
        self,
        command: Sequence[str] | str,
        options: ExecutionOptions | None = None,
    ) -> ExecutionResult:
        argv = shlex.split(command) if isinstance(command, str) else [str(part) for part in command]
        if not argv:
            raise ValueError("command must contain at least the program name")

        options = options or ExecutionOptions()
        cwd = str(options.cwd) if options.cwd else None
        env = self._build_environment(options)

        logger.debug("Executing command: %s", shlex.join(argv))
        if cwd:
            logger.debug("Working directory: %s", cwd)

        start_time = time.monotonic()
        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=cwd,
                env=env,
                limit=self._stream_limit,
            )
        except FileNotFoundError as exc:
            error = CLIExecutionError(f"Executable not found: {argv[0]}: {exc}")
            logger.debug("%s", error)
            return ExecutionResult(
                stdout="",
                error=error,
                command=argv,
                duration_seconds=time.monotonic() - start_time,
            )
        except OSError as exc:
            error = CLIExecutionError(f"Failed to start '{argv[0]}': {exc}")
            logger.debug("%s", error)
            return ExecutionResult(
                stdout="",
                error=error,
                command=argv,
                duration_seconds=time.monotonic() - start_time,
            )

        stdout_bytes, stderr_bytes = await process.communicate()
        duration = time.monotonic() - start_time
        returncode = process.returncode
        stdout_text = stdout_bytes.decode("utf-8", errors="replace")
        stderr_text = stderr_bytes.decode("utf-8", errors="replace")

        error: CLIExecutionError | None = None
        if returncode != 0:
            error = CLIExecutionError(
                f"Command '{argv[0]}' exited with status {returncode}",
                returncode=returncode,
                stdout=stdout_text,
                stderr=stderr_text,
            )
            logger.debug("%s", error)

        return ExecutionResult(
            stdout=stdout_text,
            stderr=stderr_text,
            error=error,
            command=argv,
            returncode=returncode,
            duration_seconds=duration,
        )

    def _build_environment(self, options: ExecutionOptions) -> dict[str, str] | None:
        if not options.env:
            return None
        env = os.environ.copy()
        env.update(options.env)
        return env
