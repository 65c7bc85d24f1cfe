"""tinysh - a minimal line-oriented shell."""

from .core import Dispatcher, tokenize
from .runtime import ShellSession

__version__ = "0.1.0"

__all__ = ["Dispatcher", "ShellSession", "tokenize"]
