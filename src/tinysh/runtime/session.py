"""Shell session state."""

from __future__ import annotations

import os
import threading
from pathlib import Path

from loguru import logger

from ..errors import StartDirectoryError

ROOT_DIRECTORY = Path("/")


class ShellSession:
    """Logical working directory plus the settings built-ins depend on.

    The logical directory is only changed after the OS directory change
    succeeded, so both always agree.
    """

    def __init__(self, cwd: Path = ROOT_DIRECTORY, *, home: Path | None = None) -> None:
        self._cwd = Path(cwd)
        self._home = home
        self._lock = threading.Lock()

    @classmethod
    def start(cls, start_dir: Path = ROOT_DIRECTORY, *, home: Path | None = None) -> ShellSession:
        """Enter ``start_dir`` and return a session recording it."""

        target = Path(os.path.normpath(os.path.abspath(start_dir)))
        try:
            os.chdir(target)
        except OSError as exc:
            raise StartDirectoryError(f"cannot enter start directory {start_dir}: {exc.strerror or exc}") from exc
        logger.debug("session.start cwd={}", target)
        return cls(target, home=home)

    @property
    def cwd(self) -> Path:
        with self._lock:
            return self._cwd

    @property
    def home(self) -> Path:
        if self._home is not None:
            return self._home
        return home_directory()

    def resolve(self, target: str) -> Path:
        """Resolve ``target`` against the logical directory, normalized."""

        with self._lock:
            joined = os.path.join(self._cwd, target)
        return Path(os.path.normpath(joined))

    def change_directory(self, target: Path) -> None:
        """Change the OS directory, then record it.

        ``OSError`` (or ``ValueError`` for a path with a NUL byte) propagates
        and leaves the recorded directory untouched.
        """

        with self._lock:
            os.chdir(target)
            self._cwd = target
            logger.debug("session.cwd cwd={}", target)


def home_directory() -> Path:
    """Current user's home directory, or the root when it cannot be found."""

    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return ROOT_DIRECTORY
