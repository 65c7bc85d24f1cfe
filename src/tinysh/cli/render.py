"""Line input for the interactive shell."""

from __future__ import annotations

import sys
from typing import TextIO

from prompt_toolkit import PromptSession


class LineReader:
    """Read one line per prompt.

    A terminal gets a prompt_toolkit session; piped input is read directly,
    with the prompt written and flushed first. ``EOFError`` signals the end
    of input in both cases.
    """

    def __init__(self, prompt: str = "$ ", *, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.prompt = prompt
        self._stdin = stdin
        self._stdout = stdout
        self._prompt_session: PromptSession[str] | None = None

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def interactive(self) -> bool:
        isatty = getattr(self.stdin, "isatty", None)
        return bool(isatty and isatty() and self.stdout.isatty())

    def read_line(self) -> str:
        if self.interactive():
            if self._prompt_session is None:
                self._prompt_session = PromptSession()
            return self._prompt_session.prompt(self.prompt)

        self.stdout.write(self.prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")
