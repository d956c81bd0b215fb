from vixlint.diagnostics import (
    Diagnostic,
    build_report,
    format_diagnostic,
    format_file_error,
    format_report_text,
    format_summary,
    has_errors,
    sort_diagnostics,
)


def _diagnostic(rule_id: str, line: int, column: int, severity: str = "error", message: str = "msg") -> Diagnostic:
    return Diagnostic(rule_id=rule_id, message=message, line=line, column=column, severity=severity)  # type: ignore[arg-type]


def test_empty_report_is_clean() -> None:
    report = build_report([])

    assert report.is_clean
    assert not report.has_errors
    assert report.summary == {"error": 0, "warning": 0}
    assert report.to_dict() == {"diagnostics": [], "summary": {"error": 0, "warning": 0}}


def test_report_sorts_by_line_column_rule_then_message() -> None:
    diagnostics = [
        _diagnostic("var-naming", 3, 1, "warning"),
        _diagnostic("operator-spacing", 1, 9),
        _diagnostic("const-naming", 1, 9, message="b"),
        _diagnostic("const-naming", 1, 9, message="a"),
        _diagnostic("comma-spacing", 1, 2, "warning"),
    ]

    report = build_report(diagnostics)

    assert [(d.line, d.column, d.rule_id, d.message) for d in report.diagnostics] == [
        (1, 2, "comma-spacing", "msg"),
        (1, 9, "const-naming", "a"),
        (1, 9, "const-naming", "b"),
        (1, 9, "operator-spacing", "msg"),
        (3, 1, "var-naming", "msg"),
    ]
    assert report.error_count == 3
    assert report.warning_count == 2
    assert sort_diagnostics(reversed(diagnostics)) == list(report.diagnostics)


def test_has_errors_ignores_warnings() -> None:
    assert not has_errors([_diagnostic("var-naming", 1, 1, "warning")])
    assert has_errors([_diagnostic("var-naming", 1, 1, "warning"), _diagnostic("const-naming", 2, 1)])


def test_text_rendering_markers() -> None:
    clean = build_report([])
    warnings = build_report([_diagnostic("var-naming", 2, 5, "warning", '"userName" is camelCase')])
    errors = build_report(
        [
            Diagnostic(
                rule_id="const-naming",
                message='"maxUsers" is not UPPER_SNAKE_CASE',
                line=1,
                column=7,
                hint="Rename to `MAX_USERS`.",
            )
        ]
    )

    assert format_report_text(clean, source_name="main.vix") == "✅ main.vix: no style issues"
    assert format_report_text(warnings, source_name="main.vix") == (
        '⚠️ main.vix\n  ⚠️ 2:5 var-naming: "userName" is camelCase'
    )
    assert format_report_text(errors, source_name="main.vix") == (
        '❌ main.vix\n  ❌ 1:7 const-naming: "maxUsers" is not UPPER_SNAKE_CASE\n      hint: Rename to `MAX_USERS`.'
    )
    assert format_report_text(errors, source_name="main.vix", show_hints=False).count("hint:") == 0


def test_format_diagnostic_without_hint() -> None:
    assert format_diagnostic(_diagnostic("operator-spacing", 4, 3)) == "  ❌ 4:3 operator-spacing: msg"


def test_summary_and_file_error_lines() -> None:
    assert format_summary(files=3, errors=2, warnings=1) == "Summary: 2 errors, 1 warning in 3 files"
    assert format_summary(files=1, errors=0, warnings=0, failed_files=1) == (
        "Summary: 0 errors, 0 warnings, 1 unreadable file in 1 file"
    )
    assert format_file_error("gone.vix", "cannot read file") == "❌ gone.vix: cannot read file"


def test_diagnostic_to_dict_is_json_ready() -> None:
    diagnostic = Diagnostic(
        rule_id="comma-spacing",
        message='missing space after ","',
        line=2,
        column=10,
        severity="warning",
        hint="Write `f(a, b, c)`, not `f(a ,b,c)`.",
        category="spacing",
    )

    assert diagnostic.to_dict() == {
        "rule_id": "comma-spacing",
        "severity": "warning",
        "message": 'missing space after ","',
        "line": 2,
        "column": 10,
        "hint": "Write `f(a, b, c)`, not `f(a ,b,c)`.",
        "category": "spacing",
    }
    assert diagnostic.position.as_tuple() == (2, 10)
