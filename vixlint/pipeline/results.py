"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

from vixlint.diagnostics import Diagnostic, LintReport
from vixlint.pipeline.result import VixSourceResult


class ExitStatus(IntEnum):
    CLEAN = 0
    LINT_ERRORS = 1
    FILE_ERRORS = 2


@dataclass(frozen=True, slots=True)
class LintRunResult:
    """Result of running lint rules over one tokenized source."""

    source: VixSourceResult
    diagnostics: list[Diagnostic]
    report: LintReport

    @property
    def has_errors(self) -> bool:
        return self.report.has_errors


@dataclass(frozen=True, slots=True)
class FileLintResult:
    """Lint outcome for one path: either a run result or the reason the file was unreadable."""

    path: Path
    result: LintRunResult | None = None
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.result is None

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {"path": str(self.path)}
        if self.result is None:
            data["error"] = self.error
        else:
            data.update(self.result.report.to_dict())
        return data


def exit_status(results: Sequence[FileLintResult]) -> ExitStatus:
    """Unreadable files take precedence over lint errors."""
    if any(result.failed for result in results):
        return ExitStatus.FILE_ERRORS
    if any(result.result is not None and result.result.has_errors for result in results):
        return ExitStatus.LINT_ERRORS
    return ExitStatus.CLEAN
