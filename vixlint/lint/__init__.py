"""Lint rules, options and the lint runner."""

from vixlint.lint.options import (
    SIMPLE_STATEMENT_KINDS,
    IndentStyle,
    LintOptions,
    SimpleStatementKind,
)
from vixlint.lint.rules import (
    LintCategory,
    LintRule,
    default_lint_rules,
    known_rule_ids,
    select_rules,
    validate_lint_rules,
)
from vixlint.lint.runner import run_lint

__all__ = [
    "SIMPLE_STATEMENT_KINDS",
    "IndentStyle",
    "LintCategory",
    "LintOptions",
    "LintRule",
    "SimpleStatementKind",
    "default_lint_rules",
    "known_rule_ids",
    "run_lint",
    "select_rules",
    "validate_lint_rules",
]
