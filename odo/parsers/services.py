"""Parser for `odo catalog list services`."""

from __future__ import annotations

from odo.models import ServiceEntry

from .base import BaseParser, split_list, split_rows


class ServicePlansParser(BaseParser):
    """Parse the NAME / PLANS service table."""

    name = "catalog_services"
    columns = 2

    def parse(self, stdout: str, stderr: str | None = None) -> list[ServiceEntry]:
        return [ServiceEntry(name=row[0], plans=split_list(row[1])) for row in split_rows(stdout, self.columns)]
