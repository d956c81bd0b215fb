"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    rule_id: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


TOKENIZE_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    rule_id="unterminated-string",
    message="Unterminated string literal.",
    hint="Close the string with a double quote on the same line.",
    severity="error",
    category="tokenize",
)

DECLARATION_MALFORMED: Final[DiagnosticSpec] = DiagnosticSpec(
    rule_id="malformed-declaration",
    message="Declaration has no identifiable name.",
    hint="Follow the declaration keyword with a name, e.g. `var count = 0`.",
    severity="error",
    category="declaration",
)

LINT_CONST_NAMING: Final[DiagnosticSpec] = DiagnosticSpec(
    rule_id="const-naming",
    message="Constant names must be UPPER_SNAKE_CASE.",
    severity="error",
    category="naming",
)

LINT_STATIC_NAMING: Final[DiagnosticSpec] = DiagnosticSpec(
    rule_id="static-naming",
    message="Static names must be UPPER_SNAKE_CASE.",
    severity="error",
    category="naming",
)

LINT_VAR_NAMING: Final[DiagnosticSpec] = DiagnosticSpec(
    rule_id="var-naming",
    message="Variable names should be snake_case.",
    severity="warning",
    category="naming",
)

LINT_FUNC_NAMING: Final[DiagnosticSpec] = DiagnosticSpec(
    rule_id="func-naming",
    message="Function names should be snake_case.",
    severity="warning",
    category="naming",
)

LINT_OPERATOR_SPACING: Final[DiagnosticSpec] = DiagnosticSpec(
    rule_id="operator-spacing",
    message="Binary operators need exactly one space on each side.",
    hint="Write `a = b + c`, not `a=b+c`.",
    severity="error",
    category="spacing",
)

LINT_COMMA_SPACING: Final[DiagnosticSpec] = DiagnosticSpec(
    rule_id="comma-spacing",
    message="Commas take no space before and exactly one space after.",
    hint="Write `f(a, b, c)`, not `f(a ,b,c)`.",
    severity="warning",
    category="spacing",
)

LINT_INDENTATION_CONSISTENCY: Final[DiagnosticSpec] = DiagnosticSpec(
    rule_id="indentation-consistency",
    message="Block bodies must be indented exactly one unit deeper than their opener.",
    severity="error",
    category="layout",
)

LINT_SINGLE_VS_MULTILINE_IF: Final[DiagnosticSpec] = DiagnosticSpec(
    rule_id="single-vs-multiline-if",
    message="Single-line `if` is only allowed around one simple statement.",
    hint="Move the body to its own indented lines and close with `end`.",
    severity="warning",
    category="layout",
)
