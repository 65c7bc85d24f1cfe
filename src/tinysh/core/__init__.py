"""Core modules for tinysh."""

from .dispatcher import Dispatcher, build_plan
from .namespace import CommandNamespace
from .path_resolver import PathResolver
from .redirection import parse_redirection
from .tokenizer import tokenize
from .types import Builtin, ExecutionPlan, RedirectTarget

__all__ = [
    "Builtin",
    "CommandNamespace",
    "Dispatcher",
    "ExecutionPlan",
    "PathResolver",
    "RedirectTarget",
    "build_plan",
    "parse_redirection",
    "tokenize",
]
