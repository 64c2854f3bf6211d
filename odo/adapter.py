"""Typed operations over the odo CLI."""

from __future__ import annotations

import logging

from odo.constants import (
    CATALOG_COMPONENTS_ARGS,
    CATALOG_COMPONENTS_PARSER,
    CATALOG_SERVICES_ARGS,
    CATALOG_SERVICES_PARSER,
    VERSION_ARGS,
    VERSION_PARSER,
)
from odo.executor import CliExecutor, CommandExecutor, ExecutionResult
from odo.models import CatalogEntry, ExecutionOptions, OdoSettings, ServiceEntry
from odo.parsers import BaseParser, get_parser

logger = logging.getLogger("odo.adapter")


class OdoAdapter:
    """Run odo subcommands and parse their output into Python values.

    Each operation spawns one process through the injected executor and keeps
    no state between calls, so operations can be awaited concurrently.
    """

    def __init__(self, executor: CommandExecutor | None = None, settings: OdoSettings | None = None) -> None:
        self.executor = executor or CliExecutor()
        self.settings = settings or OdoSettings.from_env()
        self._version_parser: BaseParser = get_parser(VERSION_PARSER)
        self._catalog_parser: BaseParser = get_parser(CATALOG_COMPONENTS_PARSER)
        self._services_parser: BaseParser = get_parser(CATALOG_SERVICES_PARSER)

    async def execute(self, *args: str, options: ExecutionOptions | None = None) -> ExecutionResult:
        """Run an odo subcommand and return the raw result."""

        command = self.settings.build_command(*args)
        result = await self.executor.execute(command, options or self.settings.execution_options())
        if result.error is not None:
            logger.warning("odo command failed (%s): %s", " ".join(args), result.error)
        return result

    async def get_version(self) -> str:
        result = await self.execute(*VERSION_ARGS)
        return self._version_parser.parse(result.stdout, result.stderr)

    async def list_catalog(self) -> list[CatalogEntry]:
        result = await self.execute(*CATALOG_COMPONENTS_ARGS)
        return self._catalog_parser.parse(result.stdout, result.stderr)

    async def list_services(self) -> list[ServiceEntry]:
        result = await self.execute(*CATALOG_SERVICES_ARGS)
        return self._services_parser.parse(result.stdout, result.stderr)

    async def get_component_types(self) -> list[str]:
        return [entry.name for entry in await self.list_catalog()]

    async def get_component_type_versions(self, type_name: str) -> list[str]:
        """Return the tags of ``type_name``, or an empty list when it is not listed."""

        for entry in await self.list_catalog():
            if entry.name == type_name:
                return list(entry.tags)
        return []

    async def get_service_templates(self) -> list[str]:
        return [entry.name for entry in await self.list_services()]

    async def get_service_template_plans(self, template_name: str) -> list[str]:
        """Return the plans of ``template_name``, or an empty list when it is not listed."""

        for entry in await self.list_services():
            if entry.name == template_name:
                return list(entry.plans)
        return []


_ODO: OdoAdapter | None = None


def get_odo() -> OdoAdapter:
    global _ODO
    if _ODO is None:
        _ODO = OdoAdapter()
    return _ODO


def reset_odo() -> None:
    """Forget the cached adapter so the next get_odo() rebuilds it from the environment."""

    global _ODO
    _ODO = None
