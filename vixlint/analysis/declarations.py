"""Declarations and naming-style classification."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
import re
from typing import Final

from vixlint.lexer import Token, TokenizedLine, TokenKind


class DeclarationKind(StrEnum):
    CONSTANT = "constant"
    STATIC = "static"
    VARIABLE = "variable"
    FUNCTION = "function"


class NamingStyle(StrEnum):
    UPPER_SNAKE = "upper_snake"
    LOWER_SNAKE = "lower_snake"
    PASCAL = "pascal"
    CAMEL = "camel"
    MIXED = "mixed"


DECLARATION_KEYWORDS: Final[dict[str, DeclarationKind]] = {
    "const": DeclarationKind.CONSTANT,
    "static": DeclarationKind.STATIC,
    "var": DeclarationKind.VARIABLE,
    "let": DeclarationKind.VARIABLE,
    "func": DeclarationKind.FUNCTION,
}

_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


@dataclass(frozen=True, slots=True)
class Declaration:
    """A named binding introduced by a declaration keyword."""

    name: str
    declared_kind: DeclarationKind
    naming_style: NamingStyle
    keyword: str
    line: int
    column: int


@dataclass(frozen=True, slots=True)
class MalformedDeclaration:
    """A declaration keyword with no identifiable name after it."""

    keyword: str
    declared_kind: DeclarationKind
    line: int
    column: int
    found: str | None


def classify_naming_style(name: str) -> NamingStyle:
    """Classify an identifier's case convention. Pure function of the text."""
    stripped = name.lstrip("_")
    # Letters without case (digits, CJK) never decide the style.
    letters = [ch for ch in stripped if ch.isupper() or ch.islower()]
    if not letters or all(ch.islower() for ch in letters):
        return NamingStyle.LOWER_SNAKE
    if all(ch.isupper() for ch in letters):
        return NamingStyle.UPPER_SNAKE
    if "_" in stripped:
        return NamingStyle.MIXED
    return NamingStyle.CAMEL if letters[0].islower() else NamingStyle.PASCAL


def split_name_words(name: str) -> list[str]:
    words: list[str] = []
    for chunk in name.split("_"):
        if chunk:
            words.extend(part for part in _WORD_BOUNDARY.split(chunk) if part)
    return words


def to_upper_snake(name: str) -> str:
    prefix = name[: len(name) - len(name.lstrip("_"))]
    return prefix + "_".join(word.upper() for word in split_name_words(name))


def to_lower_snake(name: str) -> str:
    prefix = name[: len(name) - len(name.lstrip("_"))]
    return prefix + "_".join(word.lower() for word in split_name_words(name))


def collect_declarations(
    lines: Iterable[TokenizedLine],
) -> tuple[tuple[Declaration, ...], tuple[MalformedDeclaration, ...]]:
    declarations: list[Declaration] = []
    malformed: list[MalformedDeclaration] = []
    for line in lines:
        tokens = line.code_tokens
        for index, token in enumerate(tokens):
            if not token.is_keyword(*DECLARATION_KEYWORDS):
                continue
            _collect_from_keyword(tokens, index, declarations, malformed)
    return tuple(declarations), tuple(malformed)


def _collect_from_keyword(
    tokens: tuple[Token, ...],
    index: int,
    declarations: list[Declaration],
    malformed: list[MalformedDeclaration],
) -> None:
    keyword = tokens[index]
    kind = DECLARATION_KEYWORDS[keyword.text]
    previous = tokens[index - 1] if index > 0 else None

    # `static var NAME` / `static const NAME` is one static declaration.
    if previous is not None and previous.is_keyword("static") and kind is not DeclarationKind.FUNCTION:
        return
    cursor = index + 1
    if kind is DeclarationKind.STATIC and cursor < len(tokens):
        if tokens[cursor].is_keyword("func"):
            return
        if tokens[cursor].is_keyword("var", "const", "let"):
            cursor += 1
    if kind is DeclarationKind.VARIABLE and cursor < len(tokens) and tokens[cursor].is_keyword("mut"):
        cursor += 1

    name_token = tokens[cursor] if cursor < len(tokens) else None
    if kind is DeclarationKind.FUNCTION and name_token is not None and name_token.is_punctuation("("):
        return  # anonymous function
    if name_token is None or name_token.kind != TokenKind.IDENTIFIER:
        malformed.append(
            MalformedDeclaration(
                keyword=keyword.text,
                declared_kind=kind,
                line=keyword.line,
                column=keyword.column,
                found=name_token.text if name_token is not None else None,
            )
        )
        return

    declarations.append(_declaration(name_token, kind, keyword.text))
    if kind is DeclarationKind.FUNCTION:
        return

    # `var a, b = 1, 2` declares every comma-separated name before the `=`.
    cursor += 1
    while cursor + 1 < len(tokens) and tokens[cursor].is_punctuation(","):
        follower = tokens[cursor + 1]
        if follower.kind != TokenKind.IDENTIFIER:
            break
        declarations.append(_declaration(follower, kind, keyword.text))
        cursor += 2


def _declaration(name_token: Token, kind: DeclarationKind, keyword: str) -> Declaration:
    return Declaration(
        name=name_token.text,
        declared_kind=kind,
        naming_style=classify_naming_style(name_token.text),
        keyword=keyword,
        line=name_token.line,
        column=name_token.column,
    )
