"""Public helpers for the odo adapter."""

from __future__ import annotations

from .adapter import OdoAdapter, get_odo, reset_odo
from .executor import CliExecutor, CLIExecutionError, CommandExecutor, ExecutionResult

__all__ = [
    "CLIExecutionError",
    "CliExecutor",
    "CommandExecutor",
    "ExecutionResult",
    "OdoAdapter",
    "get_odo",
    "reset_odo",
]
