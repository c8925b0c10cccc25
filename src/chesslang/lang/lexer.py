"""Tokenizer for one line of ChessLang input."""

from __future__ import annotations

COMMENT_MARKER = "#"


def tokenize(line: str) -> list[str]:
    """Split *line* on whitespace, stopping at the first ``#`` token.

    >>> tokenize("move from b8 to c6 # relocate")
    ['move', 'from', 'b8', 'to', 'c6']
    """
    tokens: list[str] = []
    for token in line.split():
        if token.startswith(COMMENT_MARKER):
            break
        tokens.append(token)
    return tokens
