"""Built-in commands executed inside the shell."""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from ..runtime.session import ShellSession
from .sinks import Sink
from .types import Builtin

TILDE = "~"
DEFAULT_CD_REASON = "No such file or directory"


def run_builtin(builtin: Builtin, session: ShellSession, args: Sequence[str], out: Sink) -> None:
    if builtin is Builtin.CHANGE_DIRECTORY:
        change_directory(session, args, out)
    elif builtin is Builtin.PRINT_WORKING_DIRECTORY:
        print_working_directory(session, args, out)
    else:
        raise ValueError(f"unhandled builtin: {builtin!r}")


def expand_cd_target(session: ShellSession, args: Sequence[str]) -> str:
    """Target of ``cd``: home for no argument, one leading ``~`` replaced."""

    home = str(session.home)
    if not args:
        return home
    target = args[0]
    if target.startswith(TILDE):
        target = home + target[1:]
    return target


def change_directory(session: ShellSession, args: Sequence[str], out: Sink) -> None:
    target = expand_cd_target(session, args)
    resolved = session.resolve(target)
    try:
        session.change_directory(resolved)
    except (OSError, ValueError) as exc:
        reason = _failure_reason(exc)
        logger.debug("builtin.cd.error target={} reason={}", target, reason)
        # Reported on the output sink, not the error sink.
        out.write_line(f"cd: {target}: {reason}")
        return
    out.write_line(f"Changed directory to: {resolved}")


def print_working_directory(session: ShellSession, _args: Sequence[str], out: Sink) -> None:
    out.write_line(str(session.cwd))


def _failure_reason(exc: OSError | ValueError) -> str:
    if isinstance(exc, OSError):
        return (exc.strerror or "").strip() or DEFAULT_CD_REASON
    # os.chdir rejects paths with embedded NUL bytes with ValueError.
    return str(exc).strip() or DEFAULT_CD_REASON
