"""Vix keyword vocabulary."""

from typing import Final

KEYWORDS: Final[frozenset[str]] = frozenset(
    {
        "and",
        "as",
        "break",
        "case",
        "class",
        "const",
        "continue",
        "create",
        "default",
        "do",
        "elif",
        "else",
        "end",
        "enum",
        "extern",
        "false",
        "for",
        "from",
        "func",
        "if",
        "impl",
        "import",
        "in",
        "let",
        "match",
        "mod",
        "module",
        "mut",
        "none",
        "not",
        "or",
        "pub",
        "return",
        "scope",
        "self",
        "static",
        "struct",
        "then",
        "trait",
        "true",
        "type",
        "unsafe",
        "use",
        "var",
        "while",
    }
)

# Keywords that denote a value and can therefore end an operand.
VALUE_KEYWORDS: Final[frozenset[str]] = frozenset({"true", "false", "none", "self"})

BLOCK_OPENERS: Final[frozenset[str]] = frozenset(
    {
        "if",
        "func",
        "while",
        "for",
        "match",
        "struct",
        "enum",
        "impl",
        "trait",
        "class",
        "unsafe",
        "scope",
    }
)

# Openers that may be forward declarations ending in `;` instead of a body.
DECLARABLE_OPENERS: Final[frozenset[str]] = frozenset({"func", "struct", "enum", "trait"})

BRANCH_KEYWORDS: Final[frozenset[str]] = frozenset({"else", "elif"})
CASE_KEYWORDS: Final[frozenset[str]] = frozenset({"case", "default"})


def is_keyword(word: str) -> bool:
    return word in KEYWORDS
