"""Shared analysis facts derived from one tokenize lifecycle."""

from vixlint.analysis.declarations import (
    Declaration,
    DeclarationKind,
    MalformedDeclaration,
    NamingStyle,
    classify_naming_style,
    collect_declarations,
    to_lower_snake,
    to_upper_snake,
)
from vixlint.analysis.facts import LintFacts, build_lint_facts

__all__ = [
    "Declaration",
    "DeclarationKind",
    "LintFacts",
    "MalformedDeclaration",
    "NamingStyle",
    "build_lint_facts",
    "classify_naming_style",
    "collect_declarations",
    "to_lower_snake",
    "to_upper_snake",
]
