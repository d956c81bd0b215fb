"""Entrypoints that lint text, single files and path sets."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from tqdm import tqdm

from vixlint.lint import LintOptions
from vixlint.lint import run_lint as _run_lint
from vixlint.pipeline.result import VixSourceResult
from vixlint.pipeline.results import FileLintResult, LintRunResult

if TYPE_CHECKING:
    from vixlint.lint import LintRule

logger = logging.getLogger(__name__)

VIX_SUFFIX = ".vix"


def lint_text(
    text: str,
    options: LintOptions | None = None,
    *,
    source: VixSourceResult | None = None,
    rules: Sequence[LintRule] | None = None,
) -> LintRunResult:
    """Run linting over one tokenize lifecycle."""
    return _run_lint(text, options, source=source, rules=rules)


def lint_file(
    path: Path,
    options: LintOptions | None = None,
    *,
    rules: Sequence[LintRule] | None = None,
) -> FileLintResult:
    """Lint one file. Read and decode failures are reported on the result, never raised."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        logger.warning("Cannot decode %s as UTF-8: %s", path, exc)
        return FileLintResult(path=path, error=f"cannot decode as UTF-8: {exc.reason}")
    except OSError as exc:
        logger.warning("Cannot read %s: %s", path, exc)
        return FileLintResult(path=path, error=f"cannot read file: {exc.strerror or exc}")

    result = _run_lint(text, options, rules=rules)
    logger.debug(
        "Linted %s: %d errors, %d warnings",
        path,
        result.report.error_count,
        result.report.warning_count,
    )
    return FileLintResult(path=path, result=result)


def collect_vix_files(paths: Iterable[Path]) -> list[Path]:
    """Expand directories to their `*.vix` files; explicit file paths are kept as given."""
    files: list[Path] = []
    seen: set[Path] = set()
    for path in paths:
        if path.is_dir():
            candidates = sorted(candidate for candidate in path.rglob(f"*{VIX_SUFFIX}") if candidate.is_file())
            logger.debug("Found %d %s files under %s", len(candidates), VIX_SUFFIX, path)
        else:
            candidates = [path]
        for candidate in candidates:
            if candidate in seen:
                continue
            seen.add(candidate)
            files.append(candidate)
    return files


def lint_paths(
    paths: Iterable[Path],
    options: LintOptions | None = None,
    *,
    jobs: int = 1,
    progress: bool = False,
    rules: Sequence[LintRule] | None = None,
) -> list[FileLintResult]:
    """Lint every file under `paths`. Results come back in input order regardless of `jobs`."""
    if jobs < 1:
        raise ValueError(f"jobs must be at least 1, got {jobs}")
    files = collect_vix_files(paths)
    resolved_options = options if options is not None else LintOptions()
    logger.debug("Linting %d files with %d job(s)", len(files), jobs)

    def _lint_one(path: Path) -> FileLintResult:
        return lint_file(path, resolved_options, rules=rules)

    if jobs == 1 or len(files) <= 1:
        iterator = tqdm(files, desc="lint", unit="file") if progress else files
        return [_lint_one(path) for path in iterator]

    with ThreadPoolExecutor(max_workers=jobs) as executor:
        mapped = executor.map(_lint_one, files)
        if progress:
            mapped = tqdm(mapped, total=len(files), desc="lint", unit="file")
        return list(mapped)
