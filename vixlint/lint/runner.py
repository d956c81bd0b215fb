"""Lint runner over a shared tokenize result."""

from __future__ import annotations

from collections.abc import Sequence

from vixlint.analysis import LintFacts
from vixlint.diagnostics import (
    DECLARATION_MALFORMED,
    Diagnostic,
    build_report,
    collect_diagnostics,
)
from vixlint.lint.options import LintOptions
from vixlint.lint.rules import (
    LintRule,
    default_lint_rules,
    select_rules,
    validate_lint_rules,
)
from vixlint.pipeline.result import VixSourceResult, tokenize_result
from vixlint.pipeline.results import LintRunResult


def run_lint(
    text: str,
    options: LintOptions | None = None,
    *,
    source: VixSourceResult | None = None,
    rules: Sequence[LintRule] | None = None,
) -> LintRunResult:
    """Run lint diagnostics from a single tokenize lifecycle."""
    resolved_source = source if source is not None else tokenize_result(text)
    resolved_options = options if options is not None else LintOptions()
    resolved_rules = tuple(rules) if rules is not None else default_lint_rules()
    validate_lint_rules(resolved_rules)

    facts = resolved_source.lint_facts()
    diagnostics = collect_diagnostics(
        resolved_source.diagnostics,
        _malformed_declaration_diagnostics(facts),
    )
    for rule in select_rules(resolved_rules, resolved_options):
        diagnostics.extend(rule.run(facts, resolved_options))

    report = build_report(diagnostics)
    return LintRunResult(
        source=resolved_source,
        diagnostics=list(report.diagnostics),
        report=report,
    )


def _malformed_declaration_diagnostics(facts: LintFacts) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for malformed in facts.malformed_declarations:
        message = f"`{malformed.keyword}` is not followed by a name"
        if malformed.found is not None:
            message += f" (found `{malformed.found}`)"
        diagnostics.append(
            Diagnostic(
                rule_id=DECLARATION_MALFORMED.rule_id,
                message=message,
                line=malformed.line,
                column=malformed.column,
                severity=DECLARATION_MALFORMED.severity,
                hint=DECLARATION_MALFORMED.hint,
                category=DECLARATION_MALFORMED.category,
            )
        )
    return diagnostics
