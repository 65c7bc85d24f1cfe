"""Shared core dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union


class Builtin(str, Enum):
    """Commands executed by the shell itself."""

    CHANGE_DIRECTORY = "cd"
    PRINT_WORKING_DIRECTORY = "pwd"


@dataclass(frozen=True)
class RedirectTarget:
    """A file a stream is redirected to."""

    path: str
    append: bool = False


@dataclass(frozen=True)
class ExecutionPlan:
    """One parsed input line, ready to run."""

    command_name: str
    arguments: tuple[str, ...] = ()
    output_target: RedirectTarget | None = None
    error_target: RedirectTarget | None = None


@dataclass(frozen=True)
class ReservedKeyword:
    name: str
    message: str


@dataclass(frozen=True)
class BuiltinHandler:
    builtin: Builtin


@dataclass(frozen=True)
class ExternalPath:
    path: Path

    @property
    def display_name(self) -> str:
        return self.path.name or str(self.path)


@dataclass(frozen=True)
class NotFound:
    name: str


CommandIdentity = Union[ReservedKeyword, BuiltinHandler, ExternalPath, NotFound]
