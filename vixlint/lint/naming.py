"""Naming-convention rules over collected declarations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from vixlint.analysis import (
    Declaration,
    DeclarationKind,
    LintFacts,
    NamingStyle,
    to_lower_snake,
    to_upper_snake,
)
from vixlint.diagnostics import (
    LINT_CONST_NAMING,
    LINT_FUNC_NAMING,
    LINT_STATIC_NAMING,
    LINT_VAR_NAMING,
    Diagnostic,
    DiagnosticSpec,
    Severity,
)
from vixlint.lint.options import LintOptions

if TYPE_CHECKING:
    from vixlint.lint.rules import LintCategory

STYLE_LABELS: Final[dict[NamingStyle, str]] = {
    NamingStyle.UPPER_SNAKE: "UPPER_SNAKE_CASE",
    NamingStyle.LOWER_SNAKE: "snake_case",
    NamingStyle.CAMEL: "camelCase",
    NamingStyle.PASCAL: "PascalCase",
    NamingStyle.MIXED: "mixed case",
}


@dataclass(frozen=True, slots=True)
class ConstNamingRule:
    """`const` names must be UPPER_SNAKE_CASE."""

    rule_id: str = LINT_CONST_NAMING.rule_id
    name: str = "constNaming"
    category: LintCategory = "naming"
    severity: Severity = LINT_CONST_NAMING.severity

    def run(self, facts: LintFacts, options: LintOptions) -> list[Diagnostic]:
        return _check_upper_snake(facts, DeclarationKind.CONSTANT, LINT_CONST_NAMING)


@dataclass(frozen=True, slots=True)
class StaticNamingRule:
    """`static` names must be UPPER_SNAKE_CASE."""

    rule_id: str = LINT_STATIC_NAMING.rule_id
    name: str = "staticNaming"
    category: LintCategory = "naming"
    severity: Severity = LINT_STATIC_NAMING.severity

    def run(self, facts: LintFacts, options: LintOptions) -> list[Diagnostic]:
        return _check_upper_snake(facts, DeclarationKind.STATIC, LINT_STATIC_NAMING)


@dataclass(frozen=True, slots=True)
class VarNamingRule:
    """Variables should be snake_case; all-caps names read as constants."""

    rule_id: str = LINT_VAR_NAMING.rule_id
    name: str = "varNaming"
    category: LintCategory = "naming"
    severity: Severity = LINT_VAR_NAMING.severity

    def run(self, facts: LintFacts, options: LintOptions) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for declaration in _declarations_of(facts, DeclarationKind.VARIABLE):
            style = declaration.naming_style
            if style is NamingStyle.LOWER_SNAKE:
                continue
            suggestion = to_lower_snake(declaration.name)
            if style is NamingStyle.UPPER_SNAKE:
                message = f'"{declaration.name}" looks like a constant; variables should be snake_case'
                hint = f"Declare it with `const` or rename to `{suggestion}`."
            else:
                message = f'"{declaration.name}" is {STYLE_LABELS[style]}; variables should be snake_case'
                hint = f"Rename to `{suggestion}`."
            diagnostics.append(_naming_diagnostic(LINT_VAR_NAMING, declaration, message, hint))
        return diagnostics


@dataclass(frozen=True, slots=True)
class FuncNamingRule:
    """Function names should be snake_case."""

    rule_id: str = LINT_FUNC_NAMING.rule_id
    name: str = "funcNaming"
    category: LintCategory = "naming"
    severity: Severity = LINT_FUNC_NAMING.severity

    def run(self, facts: LintFacts, options: LintOptions) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for declaration in _declarations_of(facts, DeclarationKind.FUNCTION):
            if declaration.naming_style is NamingStyle.LOWER_SNAKE:
                continue
            diagnostics.append(
                _naming_diagnostic(
                    LINT_FUNC_NAMING,
                    declaration,
                    f'"{declaration.name}" is not snake_case',
                    f"Rename to `{to_lower_snake(declaration.name)}`.",
                )
            )
        return diagnostics


def _check_upper_snake(
    facts: LintFacts,
    kind: DeclarationKind,
    code: DiagnosticSpec,
) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for declaration in _declarations_of(facts, kind):
        if declaration.naming_style is NamingStyle.UPPER_SNAKE:
            continue
        diagnostics.append(
            _naming_diagnostic(
                code,
                declaration,
                f'"{declaration.name}" is not UPPER_SNAKE_CASE',
                f"Rename to `{to_upper_snake(declaration.name)}`.",
            )
        )
    return diagnostics


def _declarations_of(facts: LintFacts, kind: DeclarationKind) -> list[Declaration]:
    return [declaration for declaration in facts.declarations if declaration.declared_kind is kind]


def _naming_diagnostic(code: DiagnosticSpec, declaration: Declaration, message: str, hint: str) -> Diagnostic:
    return Diagnostic(
        rule_id=code.rule_id,
        message=message,
        line=declaration.line,
        column=declaration.column,
        severity=code.severity,
        hint=hint,
        category=code.category,
    )
