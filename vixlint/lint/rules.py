"""Lint rule contract and the default rule set."""

from __future__ import annotations

from collections.abc import Sequence
import re
from typing import Literal, Protocol, TypeAlias

from vixlint.analysis import LintFacts
from vixlint.diagnostics import Diagnostic, Severity
from vixlint.lint.layout import IndentationConsistencyRule, SingleVsMultilineIfRule
from vixlint.lint.naming import ConstNamingRule, FuncNamingRule, StaticNamingRule, VarNamingRule
from vixlint.lint.options import LintOptions
from vixlint.lint.spacing import CommaSpacingRule, OperatorSpacingRule

LintCategory: TypeAlias = Literal["naming", "spacing", "layout"]

_RULE_ID = re.compile(r"[a-z][a-z0-9]*(?:-[a-z0-9]+)*")


class LintRule(Protocol):
    """Lint rule contract: a pure check from shared facts to diagnostics."""

    @property
    def rule_id(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def category(self) -> LintCategory: ...

    @property
    def severity(self) -> Severity: ...

    def run(self, facts: LintFacts, options: LintOptions) -> list[Diagnostic]: ...


def default_lint_rules() -> tuple[LintRule, ...]:
    return (
        ConstNamingRule(),
        StaticNamingRule(),
        VarNamingRule(),
        FuncNamingRule(),
        OperatorSpacingRule(),
        CommaSpacingRule(),
        IndentationConsistencyRule(),
        SingleVsMultilineIfRule(),
    )


def validate_lint_rules(rules: Sequence[LintRule]) -> None:
    allowed_categories = {"naming", "spacing", "layout"}
    allowed_severities = {"error", "warning"}
    seen: set[str] = set()
    for rule in rules:
        if not _RULE_ID.fullmatch(rule.rule_id):
            raise ValueError(f"Lint rule `{rule.name}` has invalid id `{rule.rule_id}`; expected kebab-case.")
        if rule.rule_id in seen:
            raise ValueError(f"Lint rule id `{rule.rule_id}` is registered more than once.")
        seen.add(rule.rule_id)
        if rule.category not in allowed_categories:
            raise ValueError(
                f"Lint rule `{rule.name}` has invalid category `{rule.category}`; expected naming/spacing/layout."
            )
        if rule.severity not in allowed_severities:
            raise ValueError(
                f"Lint rule `{rule.name}` has invalid severity `{rule.severity}`; expected error/warning."
            )


def select_rules(rules: Sequence[LintRule], options: LintOptions) -> tuple[LintRule, ...]:
    """Keep the rules the options enable, preserving registration order."""
    return tuple(rule for rule in rules if options.is_rule_enabled(rule.rule_id))


def known_rule_ids() -> frozenset[str]:
    return frozenset(rule.rule_id for rule in default_lint_rules())
