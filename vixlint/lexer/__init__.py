"""Lexer."""

from vixlint.lexer.keywords import (
    BLOCK_OPENERS,
    BRANCH_KEYWORDS,
    CASE_KEYWORDS,
    DECLARABLE_OPENERS,
    KEYWORDS,
    VALUE_KEYWORDS,
    is_keyword,
)
from vixlint.lexer.lexer import (
    LineLexer,
    dump_tokens,
    tokenize_line,
    tokenize_lines,
    tokenize_source,
)
from vixlint.lexer.tokens import (
    Indentation,
    IndentationStyle,
    Token,
    TokenizedLine,
    TokenizeError,
    TokenKind,
)

__all__ = [
    "BLOCK_OPENERS",
    "BRANCH_KEYWORDS",
    "CASE_KEYWORDS",
    "DECLARABLE_OPENERS",
    "KEYWORDS",
    "VALUE_KEYWORDS",
    "Indentation",
    "IndentationStyle",
    "LineLexer",
    "Token",
    "TokenKind",
    "TokenizeError",
    "TokenizedLine",
    "dump_tokens",
    "is_keyword",
    "tokenize_line",
    "tokenize_lines",
    "tokenize_source",
]
