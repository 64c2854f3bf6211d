"""Pydantic models for odo adapter configuration and parsed catalog rows."""

from __future__ import annotations

import shlex
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from odo.constants import DEFAULT_EXECUTABLE, ODO_PATH_ENV_VAR, ODO_WORKING_DIR_ENV_VAR
from odo.env import get_env


def _ensure_str_list(value: Any, field_name: str) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    if isinstance(value, str):
        return shlex.split(value)
    raise TypeError(f"{field_name} must be a list of strings or a single string")


class ExecutionOptions(BaseModel):
    """Pass-through options for a single process run."""

    model_config = ConfigDict(frozen=True)

    cwd: Path | None = Field(default=None, description="Working directory for the process.")
    env: dict[str, str] = Field(
        default_factory=dict,
        description="Variables layered over the current process environment.",
    )


class OdoSettings(BaseModel):
    """Runtime configuration for the odo executable."""

    executable: list[str] = Field(default_factory=lambda: [DEFAULT_EXECUTABLE])
    working_dir: Path | None = None
    env: dict[str, str] = Field(default_factory=dict)

    @field_validator("executable", mode="before")
    @classmethod
    def _ensure_executable(cls, value: Any) -> list[str]:
        executable = _ensure_str_list(value, "executable")
        if not executable:
            raise ValueError("executable must not be empty")
        return executable

    @classmethod
    def from_env(cls) -> OdoSettings:
        """Build settings from ODO_PATH and ODO_WORKING_DIR."""

        data: dict[str, Any] = {}
        executable = (get_env(ODO_PATH_ENV_VAR) or "").strip()
        if executable:
            data["executable"] = executable
        working_dir = (get_env(ODO_WORKING_DIR_ENV_VAR) or "").strip()
        if working_dir:
            data["working_dir"] = Path(working_dir).expanduser()
        return cls(**data)

    def build_command(self, *args: str) -> list[str]:
        return [*self.executable, *args]

    def execution_options(self) -> ExecutionOptions:
        return ExecutionOptions(cwd=self.working_dir, env=dict(self.env))


class CatalogEntry(BaseModel):
    """One row of `odo catalog list components`."""

    name: str
    project: str
    tags: list[str] = Field(default_factory=list)


class ServiceEntry(BaseModel):
    """One row of `odo catalog list services`."""

    name: str
    plans: list[str] = Field(default_factory=list)
