"""Redirection operator parsing."""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple

STDOUT_TRUNCATE = frozenset({">", "1>"})
STDOUT_APPEND = frozenset({">>", "1>>"})
STDERR_TRUNCATE = frozenset({"2>"})
STDERR_APPEND = frozenset({"2>>"})
OPERATORS = STDOUT_TRUNCATE | STDOUT_APPEND | STDERR_TRUNCATE | STDERR_APPEND


class RedirectionResult(NamedTuple):
    """Residual arguments plus the captured redirection targets."""

    command_args: list[str]
    output_file: str | None
    error_file: str | None
    append_output: bool
    append_error: bool


def parse_redirection(tokens: Sequence[str]) -> RedirectionResult:
    """Pull redirection operators and their filenames out of ``tokens``.

    Operators match exactly. An operator with no following token stays in
    the argument list. When a stream is redirected twice the last filename
    wins, while an append operator seen earlier keeps the stream appending.
    """

    command_args: list[str] = []
    output_file: str | None = None
    error_file: str | None = None
    append_output = False
    append_error = False

    idx = 0
    while idx < len(tokens):
        token = tokens[idx]
        has_operand = idx + 1 < len(tokens)
        if token in OPERATORS and has_operand:
            target = tokens[idx + 1]
            if token in STDOUT_TRUNCATE or token in STDOUT_APPEND:
                output_file = target
                if token in STDOUT_APPEND:
                    append_output = True
            else:
                error_file = target
                if token in STDERR_APPEND:
                    append_error = True
            idx += 2
            continue

        command_args.append(token)
        idx += 1

    return RedirectionResult(
        command_args=command_args,
        output_file=output_file,
        error_file=error_file,
        append_output=append_output,
        append_error=append_error,
    )
