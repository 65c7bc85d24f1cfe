"""Search-path lookup for external commands."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from loguru import logger

SEARCH_PATH_VARIABLE = "PATH"


class PathResolver:
    """Find a command by exact name in the directories of a search path."""

    def __init__(self, search_path: str | None = None, *, environ: Mapping[str, str] | None = None) -> None:
        self._search_path = search_path
        self._environ = os.environ if environ is None else environ

    @property
    def search_path(self) -> str:
        if self._search_path is not None:
            return self._search_path
        return self._environ.get(SEARCH_PATH_VARIABLE, "")

    def directories(self) -> list[str]:
        value = self.search_path
        if not value:
            return []
        return value.split(os.pathsep)

    def resolve(self, command_name: str) -> Path | None:
        """Return the first entry named ``command_name``, in search-path order.

        Entries are not checked for being executable or even regular files.
        Directories that cannot be listed are skipped.
        """

        for directory in self.directories():
            try:
                with os.scandir(directory) as entries:
                    for entry in entries:
                        if entry.name == command_name:
                            return Path(entry.path)
            except OSError as exc:
                logger.debug("path.skip directory={} error={}", directory, exc)
                continue
        return None
