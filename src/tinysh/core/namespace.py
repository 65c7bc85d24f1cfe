"""Command namespace: reserved keywords, built-ins, then the search path."""

from __future__ import annotations

from types import MappingProxyType

from .path_resolver import PathResolver
from .types import Builtin, BuiltinHandler, CommandIdentity, ExternalPath, NotFound, ReservedKeyword

RESERVED_KEYWORDS = MappingProxyType(
    {
        "pwd": "pwd is a shell builtin",
        "cd": "cd is a shell builtin",
    }
)
BUILTINS = MappingProxyType({builtin.value: builtin for builtin in Builtin})


def is_builtin(name: str) -> str | None:
    """Return the keyword message when ``name`` is a reserved keyword."""

    return RESERVED_KEYWORDS.get(name)


class CommandNamespace:
    """Resolve a command name to what the dispatcher should run."""

    def __init__(self, resolver: PathResolver) -> None:
        self._resolver = resolver

    def resolve(self, name: str) -> CommandIdentity:
        message = is_builtin(name)
        # Keywords that also have a handler fall through to execution.
        if message is not None and name not in BUILTINS:
            return ReservedKeyword(name=name, message=message)

        builtin = BUILTINS.get(name)
        if builtin is not None:
            return BuiltinHandler(builtin=builtin)

        path = self._resolver.resolve(name)
        if path is not None:
            return ExternalPath(path=path)
        return NotFound(name=name)
