import pytest

from tinysh.core.tokenizer import tokenize


def test_single_quotes_group_words() -> None:
    assert tokenize("echo 'a b' c") == ["echo", "a b", "c"]


def test_escaped_double_quote_inside_double_quotes() -> None:
    assert tokenize('echo "a\\"b"') == ["echo", 'a"b']


def test_unrecognized_escape_inside_double_quotes_keeps_backslash() -> None:
    assert tokenize('echo "a\\nb"') == ["echo", "a\\nb"]


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ('echo "\\$HOME"', ["echo", "$HOME"]),
        ('echo "a\\\\b"', ["echo", "a\\b"]),
        ("echo 'a\\nb'", ["echo", "a\\nb"]),
        ("echo a\\ b", ["echo", "a b"]),
        ("echo \\'x\\'", ["echo", "'x'"]),
        ("echo a\\nb", ["echo", "anb"]),
    ],
)
def test_escape_rules(line: str, expected: list[str]) -> None:
    assert tokenize(line) == expected


def test_whitespace_runs_collapse() -> None:
    assert tokenize("  ls\t -la   /tmp  ") == ["ls", "-la", "/tmp"]


def test_empty_line_has_no_words() -> None:
    assert tokenize("") == []
    assert tokenize("   ") == []


def test_adjacent_quoted_parts_join_into_one_word() -> None:
    assert tokenize("echo 'foo'\"bar\"baz") == ["echo", "foobarbaz"]


def test_empty_quotes_do_not_produce_a_word() -> None:
    assert tokenize("echo '' x") == ["echo", "x"]


def test_unterminated_quotes_are_accepted() -> None:
    assert tokenize("echo 'a b") == ["echo", "a b"]
    assert tokenize('echo "a b') == ["echo", "a b"]


def test_trailing_backslash_is_dropped() -> None:
    assert tokenize("echo a\\") == ["echo", "a"]


def test_rejoined_words_match_normalized_input() -> None:
    line = "cat  'my file'   \"other file\"  plain"
    assert " ".join(tokenize(line)) == "cat my file other file plain"
