"""Shell bootstrap helpers."""

from __future__ import annotations

from tinysh.config import Settings
from tinysh.core import CommandNamespace, Dispatcher, PathResolver
from tinysh.logging_utils import configure_logging
from tinysh.runtime import ShellSession


def build_dispatcher(settings: Settings) -> Dispatcher:
    """Configure logging, enter the start directory and wire the dispatcher.

    Raises :class:`tinysh.errors.StartDirectoryError` when the start
    directory cannot be entered.
    """

    configure_logging(level=settings.log_level, profile=settings.log_profile)
    session = ShellSession.start(settings.start_dir, home=settings.home)
    namespace = CommandNamespace(PathResolver(settings.search_path))
    return Dispatcher(session, namespace)
