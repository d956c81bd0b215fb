"""Centralized Vix source cases used across lexer/lint/pipeline tests."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap


@dataclass(frozen=True, slots=True)
class VixCase:
    name: str
    source: str
    expected_rule_ids: tuple[str, ...] = ()


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


CLEAN_CASES: tuple[VixCase, ...] = (
    VixCase(name="empty_file", source=""),
    VixCase(name="comment_only", source="// just a note\n/ alternate comment /\n"),
    VixCase(
        name="function_with_nested_if",
        source=_dedent(
            """
            const MAX_USERS = 100
            static var CACHE_SIZE = 8

            func count_users(list, limit)
                var total = 0
                for user in list do
                    if total >= limit then break end
                    total += 1
                end
                return total
            end
            """
        ),
    ),
    VixCase(
        name="if_else_chain",
        source=_dedent(
            """
            func classify(value)
                if value < 0 then
                    return -1
                else if value == 0 then
                    return 0
                else
                    return 1
                end
            end
            """
        ),
    ),
    VixCase(
        name="match_with_cases",
        source=_dedent(
            """
            match code:
                case 1:
                    status = "ok"
                default:
                    status = "unknown"
            end
            """
        ),
    ),
    VixCase(
        name="tab_indented_struct",
        source="struct Point:\n\tx = 0\n\ty = 0\nend\n",
    ),
    VixCase(
        name="continuation_lines",
        source=_dedent(
            """
            var total = first +
                    second
            log(total,
                "done")
            """
        ),
    ),
    VixCase(name="forward_declaration", source="func helper();\nstruct Node;\n"),
)


VIOLATION_CASES: tuple[VixCase, ...] = (
    VixCase(
        name="const_camel_case_and_tight_assignment",
        source="const maxUsers=100\n",
        expected_rule_ids=("const-naming", "operator-spacing"),
    ),
    VixCase(
        name="tight_comma_list",
        source=_dedent(
            """
            func example(a,b,c)
                return a
            end
            """
        ),
        expected_rule_ids=("comma-spacing", "comma-spacing"),
    ),
    VixCase(
        name="body_not_indented",
        source=_dedent(
            """
            if ready then
            launch()
            end
            """
        ),
        expected_rule_ids=("indentation-consistency",),
    ),
    VixCase(
        name="upper_case_variable",
        source='var USER_NAME = "john"\n',
        expected_rule_ids=("var-naming",),
    ),
    VixCase(
        name="single_line_if_with_two_statements",
        source="if ready then a = 1; b = 2 end\n",
        expected_rule_ids=("single-vs-multiline-if",),
    ),
)
