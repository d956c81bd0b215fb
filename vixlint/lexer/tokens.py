"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum, StrEnum

from vixlint.text import leading_whitespace


class TokenKind(IntEnum):
    IDENTIFIER = 1
    KEYWORD = 2
    OPERATOR = 3
    PUNCTUATION = 4
    STRING_LITERAL = 5
    COMMENT = 6
    NUMBER = 7

    @property
    def is_trivia(self) -> bool:
        return self is TokenKind.COMMENT

    @property
    def is_operand(self) -> bool:
        """Kinds that can end a value (identifier, literal)."""
        return self in (TokenKind.IDENTIFIER, TokenKind.NUMBER, TokenKind.STRING_LITERAL)


class IndentationStyle(StrEnum):
    """Characters used in a line's leading whitespace."""

    NONE = "none"
    SPACES = "spaces"
    TABS = "tabs"
    MIXED = "mixed"


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token. Line and column are 1-based."""

    kind: TokenKind
    text: str
    line: int
    column: int

    @property
    def end_column(self) -> int:
        """Column just past the token."""
        return self.column + len(self.text)

    def is_keyword(self, *words: str) -> bool:
        return self.kind == TokenKind.KEYWORD and (not words or self.text in words)

    def is_operator(self, *operators: str) -> bool:
        return self.kind == TokenKind.OPERATOR and (not operators or self.text in operators)

    def is_punctuation(self, *marks: str) -> bool:
        return self.kind == TokenKind.PUNCTUATION and (not marks or self.text in marks)


@dataclass(frozen=True, slots=True)
class Indentation:
    """Leading whitespace of a line. Width counts characters, so a tab is one."""

    text: str
    style: IndentationStyle

    @property
    def width(self) -> int:
        return len(self.text)

    @staticmethod
    def measure(line_text: str) -> "Indentation":
        prefix = leading_whitespace(line_text)
        has_space = " " in prefix
        has_tab = "\t" in prefix
        if has_space and has_tab:
            style = IndentationStyle.MIXED
        elif has_tab:
            style = IndentationStyle.TABS
        elif has_space:
            style = IndentationStyle.SPACES
        else:
            style = IndentationStyle.NONE
        return Indentation(prefix, style)


class TokenizeError(Exception):
    """Raised when a line cannot be fully tokenized.

    Carries the tokens produced up to and including the offending span so
    callers can recover and keep linting the line.
    """

    def __init__(self, message: str, *, line: int, column: int, tokens: tuple[Token, ...] = ()) -> None:
        super().__init__(f"{line}:{column}: {message}")
        self.message = message
        self.line = line
        self.column = column
        self.tokens = tokens


@dataclass(frozen=True, slots=True)
class TokenizedLine:
    """One source line with its tokens and indentation metadata."""

    number: int
    text: str
    indentation: Indentation
    tokens: tuple[Token, ...]
    error: TokenizeError | None = None

    @property
    def code_tokens(self) -> tuple[Token, ...]:
        """Tokens without comments."""
        return tuple(token for token in self.tokens if not token.kind.is_trivia)

    @property
    def is_blank(self) -> bool:
        return not self.tokens

    @property
    def is_comment_only(self) -> bool:
        return bool(self.tokens) and all(token.kind.is_trivia for token in self.tokens)
