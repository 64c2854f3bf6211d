"""Internal defaults and constants for the odo adapter."""

from __future__ import annotations

DEFAULT_EXECUTABLE = "odo"
DEFAULT_VERSION = "0.0.0"
DEFAULT_STREAM_LIMIT = 10 * 1024 * 1024  # 10MB per stream

ODO_PATH_ENV_VAR = "ODO_PATH"
ODO_WORKING_DIR_ENV_VAR = "ODO_WORKING_DIR"

VERSION_ARGS: tuple[str, ...] = ("version",)
CATALOG_COMPONENTS_ARGS: tuple[str, ...] = ("catalog", "list", "components")
CATALOG_SERVICES_ARGS: tuple[str, ...] = ("catalog", "list", "services")

VERSION_PARSER = "version"
CATALOG_COMPONENTS_PARSER = "catalog_components"
CATALOG_SERVICES_PARSER = "catalog_services"
