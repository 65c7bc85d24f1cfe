"""Command-line interface for tinysh."""

from .app import app
from .render import LineReader

__all__ = ["LineReader", "app"]
