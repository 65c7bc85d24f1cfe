"""CLI entry points for tinysh."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from tinysh.app import build_dispatcher
from tinysh.config import load_settings
from tinysh.core import Dispatcher
from tinysh.errors import ConfigurationError

from .live import run_line, run_shell
from .render import LineReader

app = typer.Typer(
    name="tinysh",
    help="A minimal line-oriented shell.",
    add_completion=False,
)


def _build(start_dir: Optional[Path], prompt: Optional[str] = None) -> tuple[Dispatcher, str]:
    settings = load_settings(start_dir=start_dir, prompt=prompt)
    try:
        dispatcher = build_dispatcher(settings)
    except ConfigurationError as exc:
        typer.echo(f"tinysh: {exc}", err=True)
        raise typer.Exit(1) from exc
    return dispatcher, settings.prompt


@app.callback(invoke_without_command=True)
def main_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        shell(start_dir=None, prompt=None)


@app.command()
def shell(
    start_dir: Optional[Path] = typer.Option(None, "--start-dir", "-C", help="Initial working directory"),  # noqa: B008
    prompt: Optional[str] = typer.Option(None, "--prompt", help="Prompt text"),
) -> None:
    """Start the interactive shell."""

    dispatcher, prompt_text = _build(start_dir, prompt)
    run_shell(dispatcher, LineReader(prompt_text))


@app.command()
def run(
    line: str = typer.Argument(..., help="Command line to execute"),
    start_dir: Optional[Path] = typer.Option(None, "--start-dir", "-C", help="Initial working directory"),  # noqa: B008
) -> None:
    """Execute a single command line and exit."""

    dispatcher, _ = _build(start_dir)
    if line.strip():
        run_line(dispatcher, line.strip())


if __name__ == "__main__":
    app()
