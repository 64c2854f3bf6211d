"""Environment lookups for odo settings, with optional `.env` support."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import dotenv_values, find_dotenv, load_dotenv

FORCE_OVERRIDE_ENV_VAR = "ODO_ADAPTER_FORCE_ENV_OVERRIDE"

_ENV_PATH: Path | None = None
_DOTENV_VALUES: dict[str, str | None] = {}
_FORCE_ENV_OVERRIDE = False


def _locate_env_file(env_path: str | Path | None) -> Path | None:
    if env_path is not None:
        path = Path(env_path).expanduser()
        return path if path.is_file() else None
    # Search upward from the caller's working directory, not from the install location.
    found = find_dotenv(usecwd=True)
    return Path(found) if found else None


def reload_env(
    dotenv_mapping: Mapping[str, str | None] | None = None,
    *,
    env_path: str | Path | None = None,
) -> None:
    """Reload `.env` values and recompute override semantics.

    Args:
        dotenv_mapping: Mapping used instead of reading a file. When provided,
            the process environment is left untouched.
        env_path: Explicit `.env` file. Defaults to the nearest `.env` found
            from the current working directory upward.
    """

    global _ENV_PATH, _DOTENV_VALUES, _FORCE_ENV_OVERRIDE

    if dotenv_mapping is not None:
        _ENV_PATH = None
        _DOTENV_VALUES = dict(dotenv_mapping)
        _FORCE_ENV_OVERRIDE = (_DOTENV_VALUES.get(FORCE_OVERRIDE_ENV_VAR) or "").strip().lower() == "true"
        return

    _ENV_PATH = _locate_env_file(env_path)
    _DOTENV_VALUES = dict(dotenv_values(_ENV_PATH)) if _ENV_PATH else {}
    _FORCE_ENV_OVERRIDE = (_DOTENV_VALUES.get(FORCE_OVERRIDE_ENV_VAR) or "").strip().lower() == "true"

    if _ENV_PATH:
        load_dotenv(dotenv_path=_ENV_PATH, override=_FORCE_ENV_OVERRIDE)


reload_env()


def env_file() -> Path | None:
    """Path of the `.env` file currently loaded, if any."""

    return _ENV_PATH


def get_env(key: str, default: str | None = None) -> str | None:
    """Look up ``key``, letting `.env` win when ODO_ADAPTER_FORCE_ENV_OVERRIDE=true is set there."""

    if _FORCE_ENV_OVERRIDE:
        value = _DOTENV_VALUES.get(key)
        return value if value is not None else default

    return os.getenv(key, default)
