#!/usr/bin/env python3
"""Quick perf benchmark for linting a tree of .vix files."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from vixlint.lint import LintOptions
from vixlint.pipeline.entrypoints import collect_vix_files, lint_file


def _run_once(
    files: list[Path],
    options: LintOptions,
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int]:
    start = time.perf_counter()
    total_lines = 0
    total_diagnostics = 0
    iterator = tqdm(files, desc=label, unit="file") if show_progress else files
    for path in iterator:
        file_result = lint_file(path, options)
        if file_result.result is None:
            continue
        total_lines += len(file_result.result.source.lines)
        total_diagnostics += len(file_result.result.diagnostics)
    duration = time.perf_counter() - start
    return duration, total_lines, total_diagnostics


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark vixlint throughput")
    parser.add_argument("root", type=Path, help="Directory containing .vix files")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument("--profile", action="store_true", help="Run cProfile and print top hotspots")
    parser.add_argument("--profile-top", type=int, default=30, help="Number of cProfile rows to print")
    parser.add_argument("--profile-sort", type=str, default="tottime", help="cProfile sort key")
    parser.add_argument(
        "--limit-files",
        type=int,
        default=0,
        help="Optional file limit for quick smoke tests (0 = all files)",
    )
    args = parser.parse_args()

    root: Path = args.root
    if not root.is_dir():
        raise SystemExit(f"Invalid root directory: {root}")
    files = collect_vix_files([root])
    if not files:
        raise SystemExit(f"No .vix files found under {root}")
    if args.limit_files > 0:
        files = files[: args.limit_files]

    options = LintOptions()
    show_progress = not args.no_progress
    warmups = max(args.warmups, 0)
    runs = max(args.runs, 1)

    def _benchmark() -> tuple[list[float], int, int]:
        for warmup_idx in range(warmups):
            _run_once(files, options, label=f"warmup {warmup_idx + 1}/{warmups}", show_progress=show_progress)

        timings: list[float] = []
        lines_count = 0
        diagnostics_count = 0
        for run_idx in range(runs):
            duration, lines_count, diagnostics_count = _run_once(
                files,
                options,
                label=f"run {run_idx + 1}/{runs}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, lines_count, diagnostics_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, lines_count, diagnostics_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, lines_count, diagnostics_count = _benchmark()

    mean = statistics.mean(timings)
    print(f"Dataset: {root}")
    print(f"Files: {len(files)}")
    print(f"Lines: {lines_count}")
    print(f"Diagnostics: {diagnostics_count}")
    print(f"Runs: {len(timings)} (warmups={warmups})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Files/s (mean): {len(files) / mean:.1f}")
    print(f"Lines/s (mean): {lines_count / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
