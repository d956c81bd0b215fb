from vixlint.diagnostics import Diagnostic
from vixlint.lint import LintOptions
from vixlint.lint.naming import (
    ConstNamingRule,
    FuncNamingRule,
    StaticNamingRule,
    VarNamingRule,
)
from vixlint.lint.rules import LintRule
from vixlint.pipeline import tokenize_result


def run_rule(rule: LintRule, source: str) -> list[Diagnostic]:
    return rule.run(tokenize_result(source).lint_facts(), LintOptions())


def test_const_naming_accepts_upper_snake_names() -> None:
    for name in ("MAX", "MAX_USERS", "HTTP2_PORT", "_INTERNAL_LIMIT", "A1_B2", "MAX__USERS", "MAX_", "ÉTAT"):
        assert run_rule(ConstNamingRule(), f"const {name} = 1\n") == []


def test_const_naming_flags_any_lowercase_letter_once() -> None:
    for name in ("maxUsers", "Max", "max_users", "MAX_users", "MaxUsers"):
        diagnostics = run_rule(ConstNamingRule(), f"const {name} = 1\n")
        assert len(diagnostics) == 1
        assert diagnostics[0].message == f'"{name}" is not UPPER_SNAKE_CASE'


def test_const_naming_diagnostic_shape() -> None:
    diagnostics = run_rule(ConstNamingRule(), "const maxUsers = 100\n")

    assert diagnostics == [
        Diagnostic(
            rule_id="const-naming",
            message='"maxUsers" is not UPPER_SNAKE_CASE',
            line=1,
            column=7,
            severity="error",
            hint="Rename to `MAX_USERS`.",
            category="naming",
        )
    ]


def test_static_naming_covers_static_var() -> None:
    diagnostics = run_rule(StaticNamingRule(), "static var cacheSize = 8\nstatic LIMIT = 1\n")

    assert [(d.message, d.line, d.severity) for d in diagnostics] == [
        ('"cacheSize" is not UPPER_SNAKE_CASE', 1, "error"),
    ]
    assert run_rule(VarNamingRule(), "static var cacheSize = 8\n") == []


def test_var_naming_warns_on_constant_looking_names() -> None:
    diagnostics = run_rule(VarNamingRule(), 'var USER_NAME = "john"\n')

    assert len(diagnostics) == 1
    assert diagnostics[0].severity == "warning"
    assert diagnostics[0].message == '"USER_NAME" looks like a constant; variables should be snake_case'
    assert diagnostics[0].hint == "Declare it with `const` or rename to `user_name`."


def test_var_naming_names_the_offending_style() -> None:
    diagnostics = run_rule(VarNamingRule(), "var userName = 1\nlet UserName = 2\nvar user_Name = 3\nvar ok_name = 4\nvar café = 5\n")

    assert [d.message for d in diagnostics] == [
        '"userName" is camelCase; variables should be snake_case',
        '"UserName" is PascalCase; variables should be snake_case',
        '"user_Name" is mixed case; variables should be snake_case',
    ]


def test_func_naming_requires_snake_case() -> None:
    source = "func doThing()\nend\nfunc do_other()\nend\n"

    diagnostics = run_rule(FuncNamingRule(), source)

    assert [(d.message, d.hint, d.line, d.column) for d in diagnostics] == [
        ('"doThing" is not snake_case', "Rename to `do_thing`.", 1, 6),
    ]


def test_naming_rules_ignore_other_declaration_kinds() -> None:
    source = "const LIMIT = 1\nvar total = 0\nfunc run()\nend\n"

    for rule in (ConstNamingRule(), StaticNamingRule(), VarNamingRule(), FuncNamingRule()):
        assert run_rule(rule, source) == []
