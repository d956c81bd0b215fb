"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from vixlint.text import TextPosition

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the tokenizer, declaration analysis or a lint rule."""

    rule_id: str
    message: str
    line: int
    column: int
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @property
    def position(self) -> TextPosition:
        return TextPosition(self.line, self.column)

    @property
    def sort_key(self) -> tuple[int, int, str, str]:
        return (self.line, self.column, self.rule_id, self.message)

    def to_dict(self) -> dict[str, object]:
        return {
            "rule_id": self.rule_id,
            "severity": self.severity,
            "message": self.message,
            "line": self.line,
            "column": self.column,
            "hint": self.hint,
            "category": self.category,
        }
