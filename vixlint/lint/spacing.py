"""Whitespace rules around binary operators and commas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Literal, TypeAlias

from vixlint.analysis import LintFacts
from vixlint.analysis.structure import CLOSING_BRACKETS, is_binary_position
from vixlint.diagnostics import (
    LINT_COMMA_SPACING,
    LINT_OPERATOR_SPACING,
    Diagnostic,
    Severity,
)
from vixlint.lexer import Token, TokenizedLine
from vixlint.lint.options import LintOptions

if TYPE_CHECKING:
    from vixlint.lint.rules import LintCategory

GapProblem: TypeAlias = Literal["missing", "extra"]

SPACED_OPERATORS: Final[frozenset[str]] = frozenset(
    {"=", "+", "-", "*", "/", "==", "!=", ">=", "<=", ">", "<", "+=", "-=", "*=", "/="}
)


@dataclass(frozen=True, slots=True)
class OperatorSpacingRule:
    """Binary operators take exactly one space on each side."""

    rule_id: str = LINT_OPERATOR_SPACING.rule_id
    name: str = "operatorSpacing"
    category: LintCategory = "spacing"
    severity: Severity = LINT_OPERATOR_SPACING.severity

    def run(self, facts: LintFacts, options: LintOptions) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for line in facts.lines:
            tokens = line.code_tokens
            for index, token in enumerate(tokens):
                if not token.is_operator(*SPACED_OPERATORS):
                    continue
                if not is_binary_position(tokens, index):
                    continue
                message = _operator_message(token.text, _gap_before(line, token), _gap_after(line, token))
                if message is None:
                    continue
                diagnostics.append(
                    Diagnostic(
                        rule_id=self.rule_id,
                        message=message,
                        line=token.line,
                        column=token.column,
                        severity=self.severity,
                        hint=LINT_OPERATOR_SPACING.hint,
                        category=LINT_OPERATOR_SPACING.category,
                    )
                )
        return diagnostics


@dataclass(frozen=True, slots=True)
class CommaSpacingRule:
    """Commas take no space before and exactly one after."""

    rule_id: str = LINT_COMMA_SPACING.rule_id
    name: str = "commaSpacing"
    category: LintCategory = "spacing"
    severity: Severity = LINT_COMMA_SPACING.severity

    def run(self, facts: LintFacts, options: LintOptions) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for line in facts.lines:
            for token in line.code_tokens:
                if not token.is_punctuation(","):
                    continue
                if _whitespace_before(line, token):
                    diagnostics.append(self._diagnostic(token, 'unexpected space before ","'))
                after = _gap_after(line, token)
                if after is None or _closes_bracket(line, token):
                    continue
                if after == "missing":
                    diagnostics.append(self._diagnostic(token, 'missing space after ","'))
                else:
                    diagnostics.append(self._diagnostic(token, 'expected exactly one space after ","'))
        return diagnostics

    def _diagnostic(self, token: Token, message: str) -> Diagnostic:
        return Diagnostic(
            rule_id=self.rule_id,
            message=message,
            line=token.line,
            column=token.column,
            severity=self.severity,
            hint=LINT_COMMA_SPACING.hint,
            category=LINT_COMMA_SPACING.category,
        )


def _gap_before(line: TokenizedLine, token: Token) -> GapProblem | None:
    gap = _whitespace_before(line, token)
    return None if gap is None else _classify_gap(gap)


def _gap_after(line: TokenizedLine, token: Token) -> GapProblem | None:
    gap = _whitespace_after(line, token)
    return None if gap is None else _classify_gap(gap)


def _whitespace_before(line: TokenizedLine, token: Token) -> str | None:
    """Whitespace between the token and the previous character; None at line start."""
    before = line.text[: token.column - 1]
    content = before.rstrip(" \t")
    if not content:
        return None
    return before[len(content) :]


def _whitespace_after(line: TokenizedLine, token: Token) -> str | None:
    """Whitespace between the token and the next character; None at line end."""
    after = line.text[token.end_column - 1 :]
    content = after.lstrip(" \t")
    if not content:
        return None
    return after[: len(after) - len(content)]


def _classify_gap(gap: str) -> GapProblem | None:
    if gap == " ":
        return None
    if gap == "":
        return "missing"
    return "extra"


def _closes_bracket(line: TokenizedLine, token: Token) -> bool:
    after = line.text[token.end_column - 1 :]
    return bool(after) and after[0] in CLOSING_BRACKETS


def _operator_message(operator: str, before: GapProblem | None, after: GapProblem | None) -> str | None:
    if before is None and after is None:
        return None
    if before == "missing" and after == "missing":
        return f'missing spaces around "{operator}"'
    parts: list[str] = []
    if before is not None:
        parts.append(_side_message(operator, before, "before"))
    if after is not None:
        parts.append(_side_message(operator, after, "after"))
    return " and ".join(parts)


def _side_message(operator: str, problem: GapProblem, side: str) -> str:
    if problem == "missing":
        return f'missing space {side} "{operator}"'
    return f'expected exactly one space {side} "{operator}"'
