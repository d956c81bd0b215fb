"""Line-oriented lexer."""

from collections.abc import Iterable
import sys
from typing import Final, TextIO

from vixlint.lexer.keywords import is_keyword
from vixlint.lexer.tokens import Indentation, Token, TokenizedLine, TokenizeError, TokenKind
from vixlint.text import split_source_lines

TWO_CHAR_OPERATORS: Final[frozenset[str]] = frozenset(
    {"==", "!=", "<=", ">=", "+=", "-=", "*=", "/=", "->", "&&", "||"}
)
ONE_CHAR_OPERATORS: Final[frozenset[str]] = frozenset("=+-*/%<>!&|^~?")


class LineLexer:
    """Splits one source line into tokens.

    Whitespace is not emitted; rules read spacing from the line text using
    token columns.
    """

    def __init__(self, text: str, *, line: int = 1) -> None:
        self._text = text
        self._line = line
        self._position = 0
        self._current_start = 0
        self._tokens: list[Token] = []

    @property
    def text(self) -> str:
        return self._text

    @property
    def line(self) -> int:
        return self._line

    @property
    def is_eol(self) -> bool:
        return self._position >= len(self._text)

    def lex(self) -> list[Token]:
        """Tokenize the whole line.

        Raises TokenizeError on an unterminated string literal.
        """
        self._position = 0
        self._tokens = []
        while True:
            self._skip_whitespace()
            if self.is_eol:
                break
            self._current_start = self._position
            kind = self._lex_token()
            self._push(kind)
        return self._tokens

    def _lex_token(self) -> TokenKind:
        ch = self._current_char()

        if ch == "/" and self._peek_char() == "/":
            self._position = len(self._text)
            return TokenKind.COMMENT

        if ch == "/" and self._at_line_content_start():
            closing = self._text.find("/", self._position + 1)
            if closing > self._position + 1:
                self._position = closing + 1
                return TokenKind.COMMENT

        if ch == '"':
            return self._lex_string()

        if ch.isdigit():
            return self._lex_number()

        if ch.isalpha() or ch == "_":
            return self._lex_identifier()

        if ch + self._peek_char() in TWO_CHAR_OPERATORS:
            self._advance(2)
            return TokenKind.OPERATOR

        if ch in ONE_CHAR_OPERATORS:
            self._advance(1)
            return TokenKind.OPERATOR

        # Punctuation, and anything unrecognised, is kept as a single character.
        self._advance(1)
        return TokenKind.PUNCTUATION

    def _lex_string(self) -> TokenKind:
        self._advance(1)
        while not self.is_eol:
            ch = self._current_char()
            if ch == '"':
                self._advance(1)
                return TokenKind.STRING_LITERAL
            if ch == "\\":
                self._advance(2)
                continue
            self._advance(1)

        self._position = len(self._text)
        self._push(TokenKind.STRING_LITERAL)
        raise TokenizeError(
            "unterminated string literal",
            line=self._line,
            column=self._current_start + 1,
            tokens=tuple(self._tokens),
        )

    def _lex_number(self) -> TokenKind:
        saw_dot = False
        while not self.is_eol:
            ch = self._current_char()
            if ch.isdigit():
                self._advance(1)
                continue
            if ch == "." and not saw_dot and self._peek_char().isdigit():
                saw_dot = True
                self._advance(1)
                continue
            break
        return TokenKind.NUMBER

    def _lex_identifier(self) -> TokenKind:
        self._advance(1)
        while not self.is_eol:
            ch = self._current_char()
            if ch.isalnum() or ch == "_":
                self._advance(1)
                continue
            break
        word = self._text[self._current_start : self._position]
        return TokenKind.KEYWORD if is_keyword(word) else TokenKind.IDENTIFIER

    def _at_line_content_start(self) -> bool:
        return not self._text[: self._position].strip(" \t")

    def _skip_whitespace(self) -> None:
        while not self.is_eol and self._current_char() in " \t":
            self._advance(1)

    def _push(self, kind: TokenKind) -> None:
        end = min(self._position, len(self._text))
        self._tokens.append(
            Token(
                kind=kind,
                text=self._text[self._current_start : end],
                line=self._line,
                column=self._current_start + 1,
            )
        )

    def _current_char(self) -> str:
        if self.is_eol:
            return "\0"
        return self._text[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._text):
            return "\0"
        return self._text[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def tokenize_line(text: str, number: int) -> TokenizedLine:
    """Tokenize one line, recovering from TokenizeError by keeping the partial tokens."""
    indentation = Indentation.measure(text)
    try:
        tokens = LineLexer(text, line=number).lex()
    except TokenizeError as error:
        return TokenizedLine(number, text, indentation, error.tokens, error)
    return TokenizedLine(number, text, indentation, tuple(tokens))


def tokenize_lines(lines: Iterable[str]) -> tuple[TokenizedLine, ...]:
    return tuple(tokenize_line(text, number) for number, text in enumerate(lines, start=1))


def tokenize_source(source: str) -> tuple[TokenizedLine, ...]:
    return tokenize_lines(split_source_lines(source))


def dump_tokens(lines: Iterable[TokenizedLine], file: TextIO | None = None) -> None:
    """Print each line's indentation and tokens for debugging."""
    out = file if file is not None else sys.stdout
    for line in lines:
        print(f"{line.number:04d} indent={line.indentation.style}:{line.indentation.width}", file=out)
        for index, tok in enumerate(line.tokens):
            print(f"     {index:03d} {tok.kind.name:<15} col={tok.column:<4} text={tok.text!r}", file=out)
        if line.error is not None:
            print(f"     ERROR col={line.error.column} {line.error.message}", file=out)
