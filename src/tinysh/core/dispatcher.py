"""Turn one input line into side effects."""

from __future__ import annotations

import contextlib
import subprocess
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import BinaryIO

from loguru import logger

from ..errors import SinkError
from ..runtime.session import ShellSession
from .builtins import run_builtin
from .namespace import CommandNamespace
from .redirection import parse_redirection
from .sinks import Sink, open_sink
from .tokenizer import tokenize
from .types import (
    BuiltinHandler,
    CommandIdentity,
    ExecutionPlan,
    ExternalPath,
    NotFound,
    RedirectTarget,
    ReservedKeyword,
)

ProcessRunner = Callable[[Sequence[str], Path], "subprocess.CompletedProcess[bytes]"]


def build_plan(line: str) -> ExecutionPlan | None:
    """Tokenize ``line`` and split off redirections. ``None`` for an empty line."""

    parsed = parse_redirection(tokenize(line))
    if not parsed.command_args:
        return None

    output_target = None
    if parsed.output_file is not None:
        output_target = RedirectTarget(path=parsed.output_file, append=parsed.append_output)
    error_target = None
    if parsed.error_file is not None:
        error_target = RedirectTarget(path=parsed.error_file, append=parsed.append_error)

    return ExecutionPlan(
        command_name=parsed.command_args[0],
        arguments=tuple(parsed.command_args[1:]),
        output_target=output_target,
        error_target=error_target,
    )


def run_process(argv: Sequence[str], executable: Path) -> subprocess.CompletedProcess[bytes]:
    """Run ``argv`` to completion and capture both streams."""

    # Commands come from the interactive user.
    return subprocess.run(  # noqa: S603
        list(argv),
        executable=str(executable),
        capture_output=True,
        check=False,
    )


class Dispatcher:
    """Execute input lines against a command namespace and a shell session."""

    def __init__(
        self,
        session: ShellSession,
        namespace: CommandNamespace,
        *,
        stdout: BinaryIO | None = None,
        stderr: BinaryIO | None = None,
        runner: ProcessRunner = run_process,
    ) -> None:
        self._session = session
        self._namespace = namespace
        self._stdout = stdout
        self._stderr = stderr
        self._runner = runner

    @property
    def session(self) -> ShellSession:
        return self._session

    @property
    def stdout(self) -> BinaryIO:
        return self._stdout if self._stdout is not None else sys.stdout.buffer

    @property
    def stderr(self) -> BinaryIO:
        return self._stderr if self._stderr is not None else sys.stderr.buffer

    def execute(self, line: str) -> None:
        """Run one line. Every failure is reported, none is raised."""

        plan = build_plan(line)
        if plan is None:
            return

        with contextlib.ExitStack() as stack:
            try:
                out = open_sink(stack, plan.output_target, self.stdout, kind="output")
                err = open_sink(stack, plan.error_target, self.stderr, kind="error")
            except SinkError as exc:
                logger.debug("shell.sink.error line={} error={}", line, exc)
                self._report(str(exc))
                return

            try:
                identity = self._namespace.resolve(plan.command_name)
                logger.debug(
                    "shell.dispatch name={} kind={} out={} err={}",
                    plan.command_name,
                    type(identity).__name__,
                    out.name,
                    err.name,
                )
                self._dispatch(plan, identity, out, err)
            finally:
                out.flush()
                err.flush()

    def _dispatch(self, plan: ExecutionPlan, identity: CommandIdentity, out: Sink, err: Sink) -> None:
        if isinstance(identity, ReservedKeyword):
            out.write_line(identity.message)
        elif isinstance(identity, BuiltinHandler):
            run_builtin(identity.builtin, self._session, plan.arguments, out)
        elif isinstance(identity, ExternalPath):
            self._run_external(plan, identity, out, err)
        elif isinstance(identity, NotFound):
            # Always the process stderr, even with a 2> target.
            self._report(f"{identity.name}: command not found")
        else:
            raise TypeError(f"unknown command identity: {identity!r}")

    def _run_external(self, plan: ExecutionPlan, identity: ExternalPath, out: Sink, err: Sink) -> None:
        argv = [plan.command_name, *plan.arguments]
        try:
            completed = self._runner(argv, identity.path)
        except (OSError, ValueError, subprocess.SubprocessError) as exc:
            logger.debug("shell.launch.error path={} error={}", identity.path, exc)
            reason = getattr(exc, "strerror", None) or str(exc)
            self._report(f"{identity.display_name}: {reason}")
            return

        logger.debug("shell.exit name={} code={}", plan.command_name, completed.returncode)
        out.write_bytes(completed.stdout or b"")
        err.write_bytes(completed.stderr or b"")

    def _report(self, message: str) -> None:
        stream = self.stderr
        stream.write((message + "\n").encode("utf-8", errors="replace"))
        stream.flush()
