"""Diagnostics helpers and the per-file lint report."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from vixlint.diagnostics.diagnostic import Diagnostic


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def sort_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    """Order by (line, column, rule_id); message breaks remaining ties."""
    return sorted(diagnostics, key=lambda diagnostic: diagnostic.sort_key)


@dataclass(frozen=True, slots=True)
class LintReport:
    """Sorted diagnostics of one lint pass plus per-severity counts."""

    diagnostics: tuple[Diagnostic, ...]
    error_count: int
    warning_count: int

    @property
    def is_clean(self) -> bool:
        return not self.diagnostics

    @property
    def has_errors(self) -> bool:
        return self.error_count > 0

    @property
    def summary(self) -> dict[str, int]:
        return {"error": self.error_count, "warning": self.warning_count}

    def to_dict(self) -> dict[str, object]:
        return {
            "diagnostics": [diagnostic.to_dict() for diagnostic in self.diagnostics],
            "summary": self.summary,
        }


def build_report(diagnostics: Iterable[Diagnostic]) -> LintReport:
    ordered = tuple(sort_diagnostics(diagnostics))
    errors = sum(1 for diagnostic in ordered if diagnostic.severity == "error")
    return LintReport(
        diagnostics=ordered,
        error_count=errors,
        warning_count=len(ordered) - errors,
    )
