"""Parser registry for odo command output."""

from __future__ import annotations

from .base import BaseParser, ParserError, split_list, split_rows
from .catalog import ComponentCatalogParser
from .services import ServicePlansParser
from .version import VersionParser

_PARSER_CLASSES: dict[str, type[BaseParser]] = {
    VersionParser.name: VersionParser,
    ComponentCatalogParser.name: ComponentCatalogParser,
    ServicePlansParser.name: ServicePlansParser,
}


def get_parser(name: str) -> BaseParser:
    normalized = (name or "").lower()
    if normalized not in _PARSER_CLASSES:
        raise ParserError(f"No parser registered for '{name}'")
    parser_cls = _PARSER_CLASSES[normalized]
    return parser_cls()


__all__ = [
    "BaseParser",
    "ComponentCatalogParser",
    "ParserError",
    "ServicePlansParser",
    "VersionParser",
    "get_parser",
    "split_list",
    "split_rows",
]
