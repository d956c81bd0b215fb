"""Block layout rules: indentation consistency and single-line `if` bodies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from vixlint.analysis import LintFacts
from vixlint.analysis.structure import (
    ASSIGNMENT_OPERATORS,
    bracket_delta,
    continues_on_next_line,
    ends_operand,
    find_matching_end,
    is_block_opener,
    starts_operand,
)
from vixlint.diagnostics import (
    LINT_INDENTATION_CONSISTENCY,
    LINT_SINGLE_VS_MULTILINE_IF,
    Diagnostic,
    Severity,
)
from vixlint.lexer import (
    BLOCK_OPENERS,
    BRANCH_KEYWORDS,
    CASE_KEYWORDS,
    IndentationStyle,
    Token,
    TokenizedLine,
    TokenKind,
)
from vixlint.lint.options import IndentStyle, LintOptions, SimpleStatementKind

if TYPE_CHECKING:
    from vixlint.lint.rules import LintCategory

STATEMENT_KEYWORDS: Final[frozenset[str]] = frozenset(
    {"return", "break", "continue", "var", "let", "const", "static", "func", "then", "end", "do", "import", "use"}
)


@dataclass(frozen=True, slots=True)
class IndentUnit:
    """One indentation step: N spaces or a single tab."""

    text: str

    @property
    def width(self) -> int:
        return len(self.text)

    @property
    def uses_tabs(self) -> bool:
        return self.text == "\t"

    def describe(self, levels: int) -> str:
        if self.uses_tabs:
            return "1 tab" if levels == 1 else f"{levels} tabs"
        count = levels * self.width
        return "1 space" if count == 1 else f"{count} spaces"


@dataclass(frozen=True, slots=True)
class _OpenBlock:
    keyword: str
    line: int
    column: int
    depth: int


@dataclass(slots=True)
class _IndentationWalk:
    """Mutable state for one top-to-bottom indentation pass."""

    unit: IndentUnit | None
    stack: list[_OpenBlock]
    diagnostics: list[Diagnostic]

    def report(self, line: int, column: int, message: str, hint: str | None = None) -> None:
        self.diagnostics.append(
            Diagnostic(
                rule_id=LINT_INDENTATION_CONSISTENCY.rule_id,
                message=message,
                line=line,
                column=column,
                severity=LINT_INDENTATION_CONSISTENCY.severity,
                hint=hint,
                category=LINT_INDENTATION_CONSISTENCY.category,
            )
        )

    def pop_block(self) -> _OpenBlock | None:
        """Close the innermost block, folding an open `case` into its `match`."""
        if self.stack and self.stack[-1].keyword in CASE_KEYWORDS:
            self.stack.pop()
        if not self.stack:
            return None
        return self.stack.pop()


@dataclass(frozen=True, slots=True)
class IndentationConsistencyRule:
    """Every block body sits exactly one indentation unit deeper than its opener."""

    rule_id: str = LINT_INDENTATION_CONSISTENCY.rule_id
    name: str = "indentationConsistency"
    category: LintCategory = "layout"
    severity: Severity = LINT_INDENTATION_CONSISTENCY.severity

    def run(self, facts: LintFacts, options: LintOptions) -> list[Diagnostic]:
        walk = _IndentationWalk(unit=_configured_unit(options), stack=[], diagnostics=[])
        bracket_depth = 0
        continuation = False

        for line in facts.lines:
            tokens = line.code_tokens
            if not tokens:
                continue

            expected, anchor, start_index = self._expected_depth(walk, tokens)
            level = None
            if bracket_depth == 0 and not continuation:
                level = self._check_line(walk, line, tokens[0], expected, anchor)
            depth = expected if level is None else level

            for index in range(start_index, len(tokens)):
                token = tokens[index]
                if index == 0 and token.is_keyword(*CASE_KEYWORDS) and anchor is not None and anchor.keyword == "match":
                    walk.stack.append(_OpenBlock(token.text, line.number, token.column, depth))
                elif is_block_opener(tokens, index):
                    walk.stack.append(_OpenBlock(token.text, line.number, token.column, depth))
                elif token.is_keyword("end") and walk.pop_block() is None:
                    walk.report(line.number, token.column, "`end` without a matching block opener")

            bracket_depth = max(0, bracket_depth + bracket_delta(tokens))
            continuation = continues_on_next_line(tokens)

        for block in walk.stack:
            if block.keyword in CASE_KEYWORDS:
                continue
            walk.report(
                block.line,
                block.column,
                f"`{block.keyword}` block is never closed with `end`",
                f"Add an `end` aligned with `{block.keyword}`.",
            )
        return walk.diagnostics

    def _expected_depth(
        self,
        walk: _IndentationWalk,
        tokens: tuple[Token, ...],
    ) -> tuple[int, _OpenBlock | None, int]:
        """Depth the line should sit at, the block it relates to, and where token scanning resumes."""
        first = tokens[0]
        stack = walk.stack

        if first.is_keyword("end"):
            block = walk.pop_block()
            if block is None:
                walk.report(first.line, first.column, "`end` without a matching block opener")
                return 0, None, 1
            return block.depth, block, 1

        if first.is_keyword(*BRANCH_KEYWORDS) and stack:
            block = stack[-1]
            return block.depth, block, 0

        if first.is_keyword(*CASE_KEYWORDS) and stack:
            if stack[-1].keyword in CASE_KEYWORDS:
                stack.pop()
            if stack and stack[-1].keyword == "match":
                block = stack[-1]
                return block.depth + 1, block, 0

        if stack:
            block = stack[-1]
            return block.depth + 1, block, 0
        return 0, None, 0

    def _check_line(
        self,
        walk: _IndentationWalk,
        line: TokenizedLine,
        first: Token,
        expected: int,
        anchor: _OpenBlock | None,
    ) -> int | None:
        """Report a misindented line and return the level it actually sits at, if measurable."""
        indentation = line.indentation
        if indentation.style is IndentationStyle.MIXED:
            walk.report(line.number, 1, "indentation mixes tabs and spaces", "Indent with one character kind only.")
            return None

        if indentation.style is IndentationStyle.NONE:
            if expected > 0:
                walk.report(line.number, first.column, _mismatch_message(first, expected, 0, walk.unit, anchor))
            return 0

        if walk.unit is None:
            walk.unit = IndentUnit("\t" if indentation.style is IndentationStyle.TABS else indentation.text)
        unit = walk.unit

        uses_tabs = indentation.style is IndentationStyle.TABS
        if uses_tabs != unit.uses_tabs:
            found, wanted = ("tabs", "spaces") if uses_tabs else ("spaces", "tabs")
            walk.report(line.number, 1, f"line is indented with {found} but the file indents with {wanted}")
            return None

        if indentation.width % unit.width:
            walk.report(
                line.number,
                first.column,
                f"indentation of {indentation.width} spaces is not a multiple of the {unit.width}-space unit",
            )
            return None

        actual = indentation.width // unit.width
        if actual != expected:
            walk.report(line.number, first.column, _mismatch_message(first, expected, actual, unit, anchor))
        return actual


@dataclass(frozen=True, slots=True)
class SingleVsMultilineIfRule:
    """A one-line `if ... then ... end` may only wrap a single simple statement."""

    rule_id: str = LINT_SINGLE_VS_MULTILINE_IF.rule_id
    name: str = "singleVsMultilineIf"
    category: LintCategory = "layout"
    severity: Severity = LINT_SINGLE_VS_MULTILINE_IF.severity

    def run(self, facts: LintFacts, options: LintOptions) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for line in facts.lines:
            tokens = line.code_tokens
            for index, token in enumerate(tokens):
                if not token.is_keyword("if") or not is_block_opener(tokens, index):
                    continue
                message = self._check_if(tokens, index, options)
                if message is not None:
                    diagnostics.append(
                        Diagnostic(
                            rule_id=self.rule_id,
                            message=message,
                            line=token.line,
                            column=token.column,
                            severity=self.severity,
                            hint=LINT_SINGLE_VS_MULTILINE_IF.hint,
                            category=LINT_SINGLE_VS_MULTILINE_IF.category,
                        )
                    )
        return diagnostics

    def _check_if(self, tokens: tuple[Token, ...], if_index: int, options: LintOptions) -> str | None:
        end_index = find_matching_end(tokens, if_index)
        then_index = _find_then(tokens, if_index, end_index)

        if end_index is None:
            if then_index is not None and then_index + 1 < len(tokens):
                return "`if` body must start on the line after `then`"
            return None

        if then_index is None:
            return "single-line `if` without `then` must be written on multiple lines"
        body = tokens[then_index + 1 : end_index]
        if not body:
            return "single-line `if` has an empty body; write it on multiple lines"
        if any(token.is_keyword(*BRANCH_KEYWORDS) for token in body):
            return "single-line `if` with an `else` branch must be written on multiple lines"

        kind = classify_simple_statement(body)
        if kind is None:
            return "single-line `if` body is not a single simple statement; write it on multiple lines"
        if kind not in options.single_line_if_statements:
            return f"`{kind}` statements are not allowed in a single-line `if`; write it on multiple lines"
        return None


def classify_simple_statement(tokens: tuple[Token, ...]) -> SimpleStatementKind | None:
    """Classify one statement as return/assignment/call/break/continue, or None if it is not simple."""
    if tokens and tokens[-1].is_punctuation(";"):
        tokens = tokens[:-1]
    if not tokens or any(token.is_punctuation(";") for token in tokens):
        return None
    if any(token.is_keyword(*BLOCK_OPENERS) for token in tokens):
        return None

    first = tokens[0]
    if first.is_keyword("break", "continue"):
        if len(tokens) != 1:
            return None
        return "break" if first.text == "break" else "continue"
    if first.is_keyword("return"):
        return "return" if _is_expression(tokens[1:], allow_empty=True) else None

    assignment_index = _top_level_assignment(tokens)
    if assignment_index is not None:
        target = tokens[:assignment_index]
        value = tokens[assignment_index + 1 :]
        if _is_target(target) and _is_expression(value):
            return "assignment"
        return None

    if _is_expression(tokens) and _is_call(tokens):
        return "call"
    return None


def _configured_unit(options: LintOptions) -> IndentUnit | None:
    if options.indent_style is IndentStyle.TABS:
        return IndentUnit("\t")
    if options.indent_style is IndentStyle.SPACES:
        return IndentUnit(" " * options.indent_width)
    return None


def _mismatch_message(
    first: Token,
    expected: int,
    actual: int,
    unit: IndentUnit | None,
    anchor: _OpenBlock | None,
) -> str:
    if anchor is not None and first.is_keyword("end", *BRANCH_KEYWORDS):
        return f"`{first.text}` does not align with `{anchor.keyword}` on line {anchor.line}"
    if unit is None:
        return "block body must be indented one level deeper than its opener"
    found = unit.describe(actual) if actual else "no indentation"
    message = f"expected indentation of {unit.describe(expected)} but found {found}"
    if anchor is not None:
        message += f" (inside `{anchor.keyword}` on line {anchor.line})"
    return message


def _find_then(tokens: tuple[Token, ...], if_index: int, end_index: int | None) -> int | None:
    stop = end_index if end_index is not None else len(tokens)
    for index in range(if_index + 1, stop):
        if tokens[index].is_keyword("then"):
            return index
    return None


def _top_level_assignment(tokens: tuple[Token, ...]) -> int | None:
    depth = 0
    for index, token in enumerate(tokens):
        depth += bracket_delta((token,))
        if depth == 0 and token.is_operator(*ASSIGNMENT_OPERATORS):
            return index
    return None


def _is_expression(tokens: tuple[Token, ...], *, allow_empty: bool = False) -> bool:
    if not tokens:
        return allow_empty
    if bracket_delta(tokens) != 0:
        return False
    if _top_level_assignment(tokens) is not None:
        return False
    if any(token.is_keyword(*STATEMENT_KEYWORDS) for token in tokens):
        return False
    # Two operands side by side means two statements were written on one line.
    return not any(ends_operand(left) and starts_operand(right) for left, right in zip(tokens, tokens[1:]))


def _is_target(tokens: tuple[Token, ...]) -> bool:
    if not tokens or not (tokens[0].kind == TokenKind.IDENTIFIER or tokens[0].is_keyword("self")):
        return False
    depth = 0
    for token in tokens[1:]:
        if depth == 0 and not (token.kind == TokenKind.IDENTIFIER or token.is_punctuation(".", "[")):
            return False
        depth += bracket_delta((token,))
        if depth < 0:
            return False
    return depth == 0 and _is_expression(tokens)


def _is_call(tokens: tuple[Token, ...]) -> bool:
    """`name(...)`, `obj.method(...)` and chains of them."""
    if not (tokens[0].kind == TokenKind.IDENTIFIER or tokens[0].is_keyword("self")):
        return False
    if not tokens[-1].is_punctuation(")"):
        return False
    depth = 0
    saw_call = False
    for token in tokens:
        if depth == 0:
            if token.is_punctuation("("):
                saw_call = True
            elif not (token.kind == TokenKind.IDENTIFIER or token.is_keyword("self") or token.is_punctuation(".", "[")):
                return False
        depth += bracket_delta((token,))
    return saw_call
