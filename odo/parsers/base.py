"""Parser interfaces and table helpers for odo command output."""

from __future__ import annotations

from typing import Any


class ParserError(RuntimeError):
    """Raised when a parser is requested that does not exist."""


class BaseParser:
    """Base interface for odo output parsers.

    Parsers are lenient: malformed or unexpected output produces an empty or
    fallback value, never an exception.
    """

    name: str = "base"

    def parse(self, stdout: str, stderr: str | None = None) -> Any:
        raise NotImplementedError("Parsers must implement parse()")


def split_rows(stdout: str | None, min_columns: int) -> list[list[str]]:
    """Split a whitespace-aligned table into rows of columns.

    The first line is the header and is dropped. Blank lines and rows with
    fewer than ``min_columns`` columns are skipped.
    """

    lines = (stdout or "").strip().splitlines()
    rows: list[list[str]] = []
    for line in lines[1:]:
        columns = line.split()
        if len(columns) < min_columns:
            continue
        rows.append(columns)
    return rows


def split_list(value: str) -> list[str]:
    """Split a comma separated cell, dropping empty items."""

    return [item.strip() for item in value.split(",") if item.strip()]
