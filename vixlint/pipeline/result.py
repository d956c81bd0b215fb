"""Tokenize carrier shared by every consumer of one lint pass."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from vixlint.diagnostics import TOKENIZE_UNTERMINATED_STRING, Diagnostic, has_errors
from vixlint.lexer import TokenizedLine, tokenize_source

if TYPE_CHECKING:
    from vixlint.analysis import LintFacts


@dataclass(slots=True)
class VixSourceResult:
    """Tokenized source for tokenize-once/consume-many workflows."""

    source_text: str
    lines: tuple[TokenizedLine, ...]
    _lint_facts: LintFacts | None = field(default=None, init=False, repr=False)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """One diagnostic per line the tokenizer could not finish."""
        diagnostics: list[Diagnostic] = []
        for line in self.lines:
            if line.error is None:
                continue
            diagnostics.append(
                Diagnostic(
                    rule_id=TOKENIZE_UNTERMINATED_STRING.rule_id,
                    message=TOKENIZE_UNTERMINATED_STRING.message,
                    line=line.error.line,
                    column=line.error.column,
                    severity=TOKENIZE_UNTERMINATED_STRING.severity,
                    hint=TOKENIZE_UNTERMINATED_STRING.hint,
                    category=TOKENIZE_UNTERMINATED_STRING.category,
                )
            )
        return diagnostics

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    def lint_facts(self) -> LintFacts:
        if self._lint_facts is None:
            from vixlint.analysis import build_lint_facts

            self._lint_facts = build_lint_facts(self.lines)
        return self._lint_facts


def tokenize_result(text: str) -> VixSourceResult:
    return VixSourceResult(source_text=text, lines=tokenize_source(text))
