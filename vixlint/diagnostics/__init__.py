"""Diagnostics."""

from vixlint.diagnostics.codes import (
    DECLARATION_MALFORMED,
    LINT_COMMA_SPACING,
    LINT_CONST_NAMING,
    LINT_FUNC_NAMING,
    LINT_INDENTATION_CONSISTENCY,
    LINT_OPERATOR_SPACING,
    LINT_SINGLE_VS_MULTILINE_IF,
    LINT_STATIC_NAMING,
    LINT_VAR_NAMING,
    TOKENIZE_UNTERMINATED_STRING,
    DiagnosticSpec,
)
from vixlint.diagnostics.diagnostic import Diagnostic, Severity
from vixlint.diagnostics.render import (
    format_diagnostic,
    format_file_error,
    format_report_text,
    format_summary,
)
from vixlint.diagnostics.report import (
    LintReport,
    build_report,
    collect_diagnostics,
    has_errors,
    sort_diagnostics,
)

__all__ = [
    "DECLARATION_MALFORMED",
    "LINT_COMMA_SPACING",
    "LINT_CONST_NAMING",
    "LINT_FUNC_NAMING",
    "LINT_INDENTATION_CONSISTENCY",
    "LINT_OPERATOR_SPACING",
    "LINT_SINGLE_VS_MULTILINE_IF",
    "LINT_STATIC_NAMING",
    "LINT_VAR_NAMING",
    "TOKENIZE_UNTERMINATED_STRING",
    "Diagnostic",
    "DiagnosticSpec",
    "LintReport",
    "Severity",
    "build_report",
    "collect_diagnostics",
    "format_diagnostic",
    "format_file_error",
    "format_report_text",
    "format_summary",
    "has_errors",
    "sort_diagnostics",
]
