from pathlib import Path

from tinysh.core.namespace import RESERVED_KEYWORDS, CommandNamespace, is_builtin
from tinysh.core.path_resolver import PathResolver
from tinysh.core.types import Builtin, BuiltinHandler, ExternalPath, NotFound, ReservedKeyword


def test_is_builtin_reports_keyword_messages() -> None:
    assert is_builtin("cd") == "cd is a shell builtin"
    assert is_builtin("pwd") == "pwd is a shell builtin"
    assert is_builtin("ls") is None


def test_keywords_with_handlers_resolve_to_builtins(tmp_path: Path) -> None:
    namespace = CommandNamespace(PathResolver(str(tmp_path)))

    assert namespace.resolve("cd") == BuiltinHandler(Builtin.CHANGE_DIRECTORY)
    assert namespace.resolve("pwd") == BuiltinHandler(Builtin.PRINT_WORKING_DIRECTORY)


def test_keyword_without_handler_is_only_reported(tmp_path: Path, monkeypatch) -> None:
    import tinysh.core.namespace as namespace_module

    monkeypatch.setattr(
        namespace_module,
        "RESERVED_KEYWORDS",
        {**RESERVED_KEYWORDS, "exit": "exit is a shell builtin"},
    )
    namespace = CommandNamespace(PathResolver(str(tmp_path)))

    assert namespace.resolve("exit") == ReservedKeyword(name="exit", message="exit is a shell builtin")


def test_builtins_shadow_the_search_path(tmp_path: Path) -> None:
    (tmp_path / "pwd").write_text("", encoding="utf-8")
    namespace = CommandNamespace(PathResolver(str(tmp_path)))

    assert isinstance(namespace.resolve("pwd"), BuiltinHandler)


def test_external_and_missing_commands(tmp_path: Path) -> None:
    (tmp_path / "tool").write_text("", encoding="utf-8")
    namespace = CommandNamespace(PathResolver(str(tmp_path)))

    assert namespace.resolve("tool") == ExternalPath(tmp_path / "tool")
    assert namespace.resolve("nope") == NotFound("nope")


def test_external_display_name_is_file_name(tmp_path: Path) -> None:
    assert ExternalPath(tmp_path / "tool").display_name == "tool"
