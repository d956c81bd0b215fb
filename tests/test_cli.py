import json
from pathlib import Path

import pytest

from vixlint.cli import main


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_clean_file_exits_zero(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(workdir / "clean.vix", "const LIMIT = 1\n")

    status = main(["lint", str(path)])
    out = capsys.readouterr().out

    assert status == 0
    assert f"✅ {path}: no style issues" in out
    assert "Summary: 0 errors, 0 warnings in 1 file" in out


def test_error_diagnostics_exit_one(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(workdir / "bad.vix", "const maxUsers=100\n")

    status = main(["lint", str(path)])
    out = capsys.readouterr().out

    assert status == 1
    assert f"❌ {path}" in out
    assert '1:7 const-naming: "maxUsers" is not UPPER_SNAKE_CASE' in out
    assert 'operator-spacing: missing spaces around "="' in out
    assert "hint: Rename to `MAX_USERS`." in out


def test_warnings_alone_exit_zero(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(workdir / "warn.vix", 'var USER_NAME = "john"\n')

    status = main(["lint", "--no-hints", str(path)])
    out = capsys.readouterr().out

    assert status == 0
    assert "⚠️" in out
    assert "hint:" not in out


def test_unreadable_file_takes_precedence(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    bad = _write(workdir / "bad.vix", "x=1\n")

    status = main(["lint", str(bad), str(workdir / "missing.vix")])
    out = capsys.readouterr().out

    assert status == 2
    assert "missing.vix: cannot read file" in out
    assert "1 unreadable file" in out


def test_directory_argument_and_json_output(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    src = workdir / "src"
    src.mkdir()
    _write(src / "a.vix", "const maxUsers=100\n")
    _write(src / "b.vix", "f(a,b)\n")

    status = main(["lint", "--format", "json", "--jobs", "2", str(src)])
    payload = json.loads(capsys.readouterr().out)

    assert status == 1
    assert [Path(entry["path"]).name for entry in payload["files"]] == ["a.vix", "b.vix"]
    assert payload["summary"] == {"files": 2, "error": 2, "warning": 1, "failed_files": 0}
    assert payload["files"][1]["diagnostics"][0]["rule_id"] == "comma-spacing"


def test_select_and_ignore_options(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(workdir / "bad.vix", "const maxUsers=100\n")

    status = main(["lint", "--select", "const-naming,operator-spacing", "--ignore", "const-naming", str(path)])
    out = capsys.readouterr().out

    assert status == 1
    assert "operator-spacing" in out
    assert "const-naming" not in out


def test_indent_options_override_config(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _write(workdir / "vixlint.toml", 'indent-style = "spaces"\nindent-width = 2\n')
    path = _write(workdir / "main.vix", "if a then\n    x = 1\nend\n")

    from_config = main(["lint", str(path)])
    overridden = main(["lint", "--indent-width", "4", str(path)])
    capsys.readouterr()

    assert from_config == 1
    assert overridden == 0


def test_configuration_errors_exit_two(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(workdir / "main.vix", "x = 1\n")

    unknown_rule = main(["lint", "--select", "no-such-rule", str(path)])
    bad_width = main(["lint", "--indent-width", "0", str(path)])
    missing_config = main(["lint", "--config", str(workdir / "nope.toml"), str(path)])
    err = capsys.readouterr().err

    assert (unknown_rule, bad_width, missing_config) == (2, 2, 2)
    assert "--select has unknown rule id(s): no-such-rule" in err
    assert err.count("configuration error") == 3


def test_rules_command_lists_every_rule(capsys: pytest.CaptureFixture[str]) -> None:
    status = main(["rules"])
    out = capsys.readouterr().out

    assert status == 0
    for rule_id in (
        "const-naming",
        "static-naming",
        "var-naming",
        "func-naming",
        "operator-spacing",
        "comma-spacing",
        "indentation-consistency",
        "single-vs-multiline-if",
    ):
        assert rule_id in out


def test_tokens_command_dumps_tokens(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(workdir / "main.vix", "const LIMIT = 1\n")

    status = main(["tokens", str(path)])
    out = capsys.readouterr().out

    assert status == 0
    assert "KEYWORD" in out
    assert "text='LIMIT'" in out
    assert main(["tokens", str(workdir / "missing.vix")]) == 2
