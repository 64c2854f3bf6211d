"""Parser for the `odo version` banner."""

from __future__ import annotations

import re

from odo.constants import DEFAULT_EXECUTABLE, DEFAULT_VERSION

from .base import BaseParser

VERSION_PATTERN = r"\d+\.\d+\.\d+"


class VersionParser(BaseParser):
    """Extract a MAJOR.MINOR.PATCH triplet from a version banner.

    With a program name set, only a line starting with that exact token
    (e.g. ``odo v0.0.13``) counts. With ``program=None`` the first triplet
    anywhere in stdout is returned.
    """

    name = "version"

    def __init__(self, program: str | None = DEFAULT_EXECUTABLE, default: str = DEFAULT_VERSION) -> None:
        self.program = program
        self.default = default
        if program:
            self._pattern = re.compile(rf"^\s*{re.escape(program)}\s+v?({VERSION_PATTERN})", re.MULTILINE)
        else:
            self._pattern = re.compile(rf"({VERSION_PATTERN})")

    def parse(self, stdout: str, stderr: str | None = None) -> str:
        match = self._pattern.search(stdout or "")
        if match is None:
            return self.default
        return match.group(1)
