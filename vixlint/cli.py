"""Command line entrypoint: `vixlint lint|rules|tokens`."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import replace
import json
import logging
from pathlib import Path
import sys

from vixlint.config import ConfigError, load_lint_options, parse_rule_ids
from vixlint.diagnostics import format_file_error, format_report_text, format_summary
from vixlint.lexer import dump_tokens, tokenize_source
from vixlint.lint import IndentStyle, LintOptions, default_lint_rules
from vixlint.pipeline import ExitStatus, FileLintResult, exit_status, lint_paths

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vixlint", description="Style checker for Vix source files")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr")
    subparsers = parser.add_subparsers(dest="command", required=True)

    lint = subparsers.add_parser("lint", help="Lint files or directories of .vix files")
    lint.add_argument("paths", nargs="+", type=Path, help="Files or directories to lint")
    lint.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to vixlint.toml or pyproject.toml (default: search upward from the working directory)",
    )
    lint.add_argument("--indent-width", type=int, default=None, help="Spaces per indentation level")
    lint.add_argument(
        "--indent-style",
        choices=[style.value for style in IndentStyle],
        default=None,
        help="How the indentation unit is chosen (default: detect)",
    )
    lint.add_argument("--select", type=_comma_list, default=None, help="Comma-separated rule ids to run")
    lint.add_argument("--ignore", type=_comma_list, default=None, help="Comma-separated rule ids to skip")
    lint.add_argument("--format", choices=["text", "json"], default="text", help="Report format (default: text)")
    lint.add_argument("--no-hints", action="store_true", help="Omit hints from text output")
    lint.add_argument("--jobs", type=int, default=1, help="Files to lint concurrently (default: 1)")
    lint.add_argument("--progress", action="store_true", help="Show a tqdm progress bar on stderr")

    subparsers.add_parser("rules", help="List the registered lint rules")

    tokens = subparsers.add_parser("tokens", help="Dump the tokens of one file")
    tokens.add_argument("path", type=Path)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    match args.command:
        case "lint":
            return _run_lint_command(args)
        case "rules":
            return _run_rules_command()
        case "tokens":
            return _run_tokens_command(args.path)
    raise AssertionError(f"Unhandled command {args.command!r}")


def _run_lint_command(args: argparse.Namespace) -> int:
    try:
        options = _resolve_options(args)
    except ValueError as exc:
        print(f"vixlint: configuration error: {exc}", file=sys.stderr)
        return ExitStatus.FILE_ERRORS
    if args.jobs < 1:
        print(f"vixlint: --jobs must be at least 1, got {args.jobs}", file=sys.stderr)
        return ExitStatus.FILE_ERRORS

    results = lint_paths(args.paths, options, jobs=args.jobs, progress=args.progress)
    if args.format == "json":
        print(json.dumps(_json_payload(results), indent=2, ensure_ascii=False))
    else:
        _print_text(results, show_hints=not args.no_hints)
    return exit_status(results)


def _resolve_options(args: argparse.Namespace) -> LintOptions:
    options = load_lint_options(args.config)
    overrides: dict[str, object] = {}
    if args.indent_width is not None:
        overrides["indent_width"] = args.indent_width
    if args.indent_style is not None:
        overrides["indent_style"] = IndentStyle(args.indent_style)
    if args.select is not None:
        overrides["enabled_rules"] = parse_rule_ids(args.select, "--select")
    if args.ignore is not None:
        overrides["disabled_rules"] = parse_rule_ids(args.ignore, "--ignore")
    if overrides:
        logger.debug("Command line overrides: %s", sorted(overrides))
        options = replace(options, **overrides)
    return options


def _print_text(results: list[FileLintResult], *, show_hints: bool) -> None:
    errors = 0
    warnings = 0
    failed = 0
    for file_result in results:
        name = str(file_result.path)
        if file_result.result is None:
            failed += 1
            print(format_file_error(name, file_result.error or "cannot read file"))
            continue
        report = file_result.result.report
        errors += report.error_count
        warnings += report.warning_count
        print(format_report_text(report, source_name=name, show_hints=show_hints))
    print(format_summary(files=len(results), errors=errors, warnings=warnings, failed_files=failed))


def _json_payload(results: list[FileLintResult]) -> dict[str, object]:
    reports = [result.result.report for result in results if result.result is not None]
    return {
        "files": [result.to_dict() for result in results],
        "summary": {
            "files": len(results),
            "error": sum(report.error_count for report in reports),
            "warning": sum(report.warning_count for report in reports),
            "failed_files": sum(1 for result in results if result.failed),
        },
    }


def _run_rules_command() -> int:
    for rule in default_lint_rules():
        description = (type(rule).__doc__ or "").strip()
        print(f"{rule.rule_id:<26} {rule.severity:<8} {rule.category:<8} {description}")
    return ExitStatus.CLEAN


def _run_tokens_command(path: Path) -> int:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(format_file_error(str(path), str(exc)), file=sys.stderr)
        return ExitStatus.FILE_ERRORS
    dump_tokens(tokenize_source(text))
    return ExitStatus.CLEAN


def _comma_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


if __name__ == "__main__":
    raise SystemExit(main())
