"""Read-eval loop for tinysh."""

from __future__ import annotations

from loguru import logger

from ..core import Dispatcher
from .render import LineReader


def run_shell(dispatcher: Dispatcher, reader: LineReader) -> None:
    """Prompt, read and execute lines until the input ends."""

    while True:
        try:
            line = reader.read_line()
        except (KeyboardInterrupt, EOFError):
            logger.debug("shell.stop")
            break

        command = line.strip()
        if not command:
            continue
        run_line(dispatcher, command)


def run_line(dispatcher: Dispatcher, line: str) -> None:
    """Execute one line, keeping the loop alive on unexpected errors."""

    try:
        dispatcher.execute(line)
    except Exception as exc:
        logger.exception("shell.line.error line={}", line)
        stream = dispatcher.stderr
        stream.write(f"tinysh: {exc!s}\n".encode("utf-8", errors="replace"))
        stream.flush()
