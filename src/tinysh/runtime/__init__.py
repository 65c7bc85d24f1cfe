"""Runtime state for tinysh."""

from .session import ShellSession, home_directory

__all__ = ["ShellSession", "home_directory"]
