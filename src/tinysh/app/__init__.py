"""Application wiring."""

from .bootstrap import build_dispatcher

__all__ = ["build_dispatcher"]
