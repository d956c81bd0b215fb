"""Line-level block structure helpers shared by layout rules."""

from __future__ import annotations

from typing import Final

from vixlint.lexer import (
    BLOCK_OPENERS,
    DECLARABLE_OPENERS,
    VALUE_KEYWORDS,
    Token,
    TokenKind,
)

OPENING_BRACKETS: Final[frozenset[str]] = frozenset("([{")
CLOSING_BRACKETS: Final[frozenset[str]] = frozenset(")]}")
ASSIGNMENT_OPERATORS: Final[frozenset[str]] = frozenset({"=", "+=", "-=", "*=", "/="})


def is_block_opener(tokens: tuple[Token, ...], index: int) -> bool:
    """Whether the keyword at `index` opens a block closed by `end`."""
    token = tokens[index]
    if not token.is_keyword(*BLOCK_OPENERS):
        return False
    # `else if` continues the enclosing `if` instead of nesting a new one.
    if token.text == "if" and index > 0 and tokens[index - 1].is_keyword("else"):
        return False
    if token.text in DECLARABLE_OPENERS and tokens[-1].is_punctuation(";"):
        return False
    return True


def find_matching_end(tokens: tuple[Token, ...], opener_index: int) -> int | None:
    """Index of the `end` closing the opener at `opener_index` on the same line."""
    depth = 0
    for index in range(opener_index, len(tokens)):
        token = tokens[index]
        if is_block_opener(tokens, index):
            depth += 1
        elif token.is_keyword("end"):
            depth -= 1
            if depth == 0:
                return index
    return None


def bracket_delta(tokens: tuple[Token, ...]) -> int:
    delta = 0
    for token in tokens:
        if token.is_punctuation(*OPENING_BRACKETS):
            delta += 1
        elif token.is_punctuation(*CLOSING_BRACKETS):
            delta -= 1
    return delta


def ends_operand(token: Token | None) -> bool:
    """Whether a token can be the last token of a value."""
    if token is None:
        return False
    if token.kind.is_operand:
        return True
    if token.is_keyword(*VALUE_KEYWORDS):
        return True
    return token.is_punctuation(*CLOSING_BRACKETS)


def starts_operand(token: Token | None) -> bool:
    if token is None:
        return False
    if token.kind.is_operand:
        return True
    return token.is_keyword(*VALUE_KEYWORDS)


def is_binary_position(tokens: tuple[Token, ...], index: int) -> bool:
    """Whether the operator at `index` sits between two operands.

    A line-leading operator continues the previous line's expression, so it
    counts as binary when it is not a sign or prefix (`-x`, `*ptr`).
    """
    token = tokens[index]
    previous = tokens[index - 1] if index > 0 else None
    if previous is not None:
        return ends_operand(previous)
    return token.text not in ("-", "+", "*", "!", "~", "&")


def continues_on_next_line(tokens: tuple[Token, ...]) -> bool:
    """Whether a line's expression is unfinished (trailing comma or binary operator)."""
    if not tokens:
        return False
    last = tokens[-1]
    if last.is_punctuation(","):
        return True
    return last.kind == TokenKind.OPERATOR and not last.is_operator("->")
