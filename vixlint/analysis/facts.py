"""Shared token-derived facts for lint rules."""

from __future__ import annotations

from dataclasses import dataclass

from vixlint.analysis.declarations import Declaration, MalformedDeclaration, collect_declarations
from vixlint.lexer import TokenizedLine


@dataclass(frozen=True, slots=True)
class LintFacts:
    """Facts extracted once per lint pass and reused by every rule."""

    lines: tuple[TokenizedLine, ...]
    declarations: tuple[Declaration, ...]
    malformed_declarations: tuple[MalformedDeclaration, ...]


def build_lint_facts(lines: tuple[TokenizedLine, ...]) -> LintFacts:
    declarations, malformed = collect_declarations(lines)
    return LintFacts(
        lines=lines,
        declarations=declarations,
        malformed_declarations=malformed,
    )
