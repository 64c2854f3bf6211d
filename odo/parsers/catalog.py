"""Parser for `odo catalog list components`."""

from __future__ import annotations

from odo.models import CatalogEntry

from .base import BaseParser, split_list, split_rows


class ComponentCatalogParser(BaseParser):
    """Parse the NAME / PROJECT / TAGS component table."""

    name = "catalog_components"
    columns = 3

    def parse(self, stdout: str, stderr: str | None = None) -> list[CatalogEntry]:
        return [
            CatalogEntry(name=row[0], project=row[1], tags=split_list(row[2]))
            for row in split_rows(stdout, self.columns)
        ]
