"""Terminal rendering for lint reports."""

from __future__ import annotations

from typing import Final

from vixlint.diagnostics.diagnostic import Diagnostic, Severity
from vixlint.diagnostics.report import LintReport

PASS_MARKER: Final[str] = "✅"
SEVERITY_MARKERS: Final[dict[Severity, str]] = {
    "warning": "⚠️",
    "error": "❌",
}


def format_diagnostic(diagnostic: Diagnostic, *, show_hint: bool = True) -> str:
    marker = SEVERITY_MARKERS[diagnostic.severity]
    text = f"  {marker} {diagnostic.line}:{diagnostic.column} {diagnostic.rule_id}: {diagnostic.message}"
    if show_hint and diagnostic.hint:
        text += f"\n      hint: {diagnostic.hint}"
    return text


def format_report_text(report: LintReport, *, source_name: str, show_hints: bool = True) -> str:
    """Render one file's report; a clean file is a single ✅ line."""
    if report.is_clean:
        return f"{PASS_MARKER} {source_name}: no style issues"

    header = f"{SEVERITY_MARKERS['error' if report.has_errors else 'warning']} {source_name}"
    body = [format_diagnostic(diagnostic, show_hint=show_hints) for diagnostic in report.diagnostics]
    return "\n".join([header, *body])


def format_file_error(source_name: str, error: str) -> str:
    return f"{SEVERITY_MARKERS['error']} {source_name}: {error}"


def format_summary(*, files: int, errors: int, warnings: int, failed_files: int = 0) -> str:
    parts = [_plural(errors, "error"), _plural(warnings, "warning")]
    if failed_files:
        parts.append(_plural(failed_files, "unreadable file"))
    return f"Summary: {', '.join(parts)} in {_plural(files, 'file')}"


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"
