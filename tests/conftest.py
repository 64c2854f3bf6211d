"""
Pytest configuration for odo adapter tests
"""

import asyncio
import sys
from pathlib import Path

import pytest

# Ensure the parent directory is in the Python path for imports
parent_dir = Path(__file__).resolve().parent.parent
if str(parent_dir) not in sys.path:
    sys.path.insert(0, str(parent_dir))

import odo.env as env_config  # noqa: E402

# Ensure tests operate with runtime environment rather than .env overrides during imports
env_config.reload_env({"ODO_ADAPTER_FORCE_ENV_OVERRIDE": "false"})

# Configure asyncio for Windows compatibility
if sys.platform == "win32":
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

from odo.adapter import reset_odo  # noqa: E402
from odo.executor import CommandExecutor, ExecutionResult  # noqa: E402


class StubExecutor(CommandExecutor):
    """Executor returning a canned result and recording the commands it saw."""

    def __init__(self, result: ExecutionResult):
        self.result = result
        self.calls = []

    async def execute(self, command, options=None):
        self.calls.append((list(command), options))
        return self.result


@pytest.fixture
def stub_executor():
    def _factory(stdout="", stderr="", error=None):
        return StubExecutor(ExecutionResult(stdout=stdout, stderr=stderr, error=error))

    return _factory


@pytest.fixture(autouse=True)
def clean_odo_environment(monkeypatch):
    monkeypatch.delenv("ODO_PATH", raising=False)
    monkeypatch.delenv("ODO_WORKING_DIR", raising=False)
    reset_odo()
    yield
    reset_odo()
