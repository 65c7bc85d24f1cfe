"""Output and error sinks for one command line."""

from __future__ import annotations

import contextlib
from typing import BinaryIO

from ..errors import SinkError
from .types import RedirectTarget

ENCODING = "utf-8"


class Sink:
    """Byte stream a command writes to: a standard stream or a redirect file."""

    def __init__(self, stream: BinaryIO, *, name: str) -> None:
        self._stream = stream
        self.name = name

    def write_bytes(self, data: bytes) -> None:
        if data:
            self._stream.write(data)

    def write_text(self, text: str) -> None:
        self.write_bytes(text.encode(ENCODING, errors="replace"))

    def write_line(self, text: str) -> None:
        self.write_text(text + "\n")

    def flush(self) -> None:
        self._stream.flush()


def open_sink(
    stack: contextlib.ExitStack,
    target: RedirectTarget | None,
    default: BinaryIO,
    *,
    kind: str,
) -> Sink:
    """Open ``target`` (or fall back to ``default``) for the lifetime of ``stack``.

    Files are truncated, or appended to when ``target.append`` is set, and are
    closed when the stack unwinds. Raises :class:`SinkError` when the file
    cannot be opened.
    """

    if target is None:
        return Sink(default, name=f"<std{'out' if kind == 'output' else 'err'}>")

    mode = "ab" if target.append else "wb"
    try:
        handle = open(target.path, mode)  # noqa: SIM115
    except (OSError, ValueError) as exc:
        verb = "open" if target.append else "create"
        reason = getattr(exc, "strerror", None) or exc
        raise SinkError(f"Failed to {verb} {kind} file {target.path}: {reason}") from exc
    stack.callback(handle.close)
    return Sink(handle, name=target.path)
