from __future__ import annotations

import io
import os
import stat
from pathlib import Path

import pytest
from loguru import logger

import tinysh.logging_utils as logging_utils
from tinysh.core import CommandNamespace, Dispatcher, PathResolver
from tinysh.runtime import ShellSession


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def home(tmp_path: Path) -> Path:
    home = tmp_path / "home" / "u"
    home.mkdir(parents=True)
    return home


@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    path = tmp_path / "bin"
    path.mkdir()
    return path


@pytest.fixture
def session(workdir: Path, home: Path) -> ShellSession:
    return ShellSession(workdir, home=home)


class Streams:
    def __init__(self) -> None:
        self.stdout = io.BytesIO()
        self.stderr = io.BytesIO()

    @property
    def out(self) -> str:
        return self.stdout.getvalue().decode("utf-8")

    @property
    def err(self) -> str:
        return self.stderr.getvalue().decode("utf-8")


@pytest.fixture
def streams() -> Streams:
    return Streams()


@pytest.fixture
def dispatcher(session: ShellSession, bin_dir: Path, streams: Streams) -> Dispatcher:
    namespace = CommandNamespace(PathResolver(str(bin_dir)))
    return Dispatcher(session, namespace, stdout=streams.stdout, stderr=streams.stderr)


def write_script(directory: Path, name: str, body: str) -> Path:
    script = directory / name
    script.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


@pytest.fixture
def script_factory(bin_dir: Path):
    def _factory(name: str, body: str) -> Path:
        return write_script(bin_dir, name, body)

    return _factory


@pytest.fixture(autouse=True)
def _restore_cwd():
    original = os.getcwd()
    yield
    os.chdir(original)


@pytest.fixture(autouse=True)
def _reset_logging():
    logging_utils._CONFIGURED = None
    yield
    logger.remove()
    logging_utils._CONFIGURED = None
