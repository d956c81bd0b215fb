"""Lint options resolved before a pass starts."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Final, Literal, TypeAlias

SimpleStatementKind: TypeAlias = Literal["return", "assignment", "call", "break", "continue"]

SIMPLE_STATEMENT_KINDS: Final[frozenset[SimpleStatementKind]] = frozenset(
    {"return", "assignment", "call", "break", "continue"}
)


class IndentStyle(StrEnum):
    """How the indentation unit of a file is chosen."""

    DETECT = "detect"
    SPACES = "spaces"
    TABS = "tabs"


@dataclass(frozen=True, slots=True)
class LintOptions:
    """Recognised lint options. The core never reads configuration sources itself."""

    indent_width: int = 4
    indent_style: IndentStyle = IndentStyle.DETECT
    enabled_rules: frozenset[str] | None = None
    disabled_rules: frozenset[str] = frozenset()
    single_line_if_statements: frozenset[SimpleStatementKind] = field(
        default_factory=lambda: SIMPLE_STATEMENT_KINDS
    )

    def __post_init__(self) -> None:
        if self.indent_width < 1:
            raise ValueError(f"indent_width must be at least 1, got {self.indent_width}")
        unknown = set(self.single_line_if_statements) - SIMPLE_STATEMENT_KINDS
        if unknown:
            raise ValueError(
                f"Unknown simple statement kinds: {', '.join(sorted(unknown))}; "
                f"expected a subset of {', '.join(sorted(SIMPLE_STATEMENT_KINDS))}."
            )

    def is_rule_enabled(self, rule_id: str) -> bool:
        if rule_id in self.disabled_rules:
            return False
        return self.enabled_rules is None or rule_id in self.enabled_rules

    @staticmethod
    def for_style(style: IndentStyle, width: int = 4) -> "LintOptions":
        return LintOptions(indent_width=width, indent_style=style)
