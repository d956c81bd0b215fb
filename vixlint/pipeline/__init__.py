"""Shared tokenize carriers and lazy pipeline entrypoint exports."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from vixlint.pipeline.result import VixSourceResult, tokenize_result
from vixlint.pipeline.results import (
    ExitStatus,
    FileLintResult,
    LintRunResult,
    exit_status,
)

if TYPE_CHECKING:
    from vixlint.lint import LintOptions, LintRule


def lint_text(
    text: str,
    options: LintOptions | None = None,
    *,
    source: VixSourceResult | None = None,
    rules: Sequence[LintRule] | None = None,
) -> LintRunResult:
    from vixlint.pipeline.entrypoints import lint_text as _lint_text

    return _lint_text(text, options, source=source, rules=rules)


def lint_file(
    path: Path,
    options: LintOptions | None = None,
    *,
    rules: Sequence[LintRule] | None = None,
) -> FileLintResult:
    from vixlint.pipeline.entrypoints import lint_file as _lint_file

    return _lint_file(path, options, rules=rules)


def lint_paths(
    paths: Iterable[Path],
    options: LintOptions | None = None,
    *,
    jobs: int = 1,
    progress: bool = False,
    rules: Sequence[LintRule] | None = None,
) -> list[FileLintResult]:
    from vixlint.pipeline.entrypoints import lint_paths as _lint_paths

    return _lint_paths(paths, options, jobs=jobs, progress=progress, rules=rules)


__all__ = [
    "ExitStatus",
    "FileLintResult",
    "LintRunResult",
    "VixSourceResult",
    "exit_status",
    "lint_file",
    "lint_paths",
    "lint_text",
    "tokenize_result",
]
