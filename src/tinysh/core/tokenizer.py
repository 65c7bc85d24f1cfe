"""Shell-style line tokenizer."""

from __future__ import annotations

SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
BACKSLASH = "\\"
# Characters a backslash escapes inside double quotes.
DOUBLE_QUOTE_ESCAPABLE = frozenset({"$", DOUBLE_QUOTE, BACKSLASH})


def tokenize(line: str) -> list[str]:
    """Split one input line into words, resolving quotes and escapes.

    Unterminated quotes are not an error: whatever was accumulated becomes
    the last word.
    """

    words: list[str] = []
    current: list[str] = []
    in_single_quote = False
    in_double_quote = False
    pending_escape = False

    for char in line:
        if not in_single_quote and not in_double_quote:
            if pending_escape:
                current.append(char)
                pending_escape = False
                continue
            if char == BACKSLASH:
                pending_escape = True
                continue
            if char == SINGLE_QUOTE:
                in_single_quote = True
                continue
            if char == DOUBLE_QUOTE:
                in_double_quote = True
                continue
            if char.isspace():
                if current:
                    words.append("".join(current))
                    current.clear()
                continue
        elif in_single_quote:
            if char == SINGLE_QUOTE:
                in_single_quote = False
                continue
        elif pending_escape:
            pending_escape = False
            if char not in DOUBLE_QUOTE_ESCAPABLE:
                current.append(BACKSLASH)
        elif char == BACKSLASH:
            pending_escape = True
            continue
        elif char == DOUBLE_QUOTE:
            in_double_quote = False
            continue
        current.append(char)

    if current:
        words.append("".join(current))
    return words
