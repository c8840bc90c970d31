#!/usr/bin/env python3
"""Quick perf benchmark for hs_err report parsing."""

from __future__ import annotations

import argparse
import cProfile
import io
import logging
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from hserrpy.parser import ParseMode, parse_result


def _collect_report_files(root: Path) -> list[Path]:
    files = sorted({*root.rglob("hs_err*.log"), *root.rglob("*.log")})
    return [path for path in files if path.is_file()]


def _run_once(
    texts: list[str],
    *,
    mode: ParseMode,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int, int]:
    start = time.perf_counter()
    total_sections = 0
    total_subsections = 0
    total_diagnostics = 0
    iterator = tqdm(texts, desc=label, unit="file") if show_progress else texts
    for text in iterator:
        result = parse_result(text, mode=mode)
        document = result.document()
        total_sections += len(document.sections)
        total_subsections += sum(len(section.subsections) for section in document.sections)
        total_diagnostics += len(result.diagnostics)
    duration = time.perf_counter() - start
    return duration, total_sections, total_subsections, total_diagnostics


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark hs_err parsing throughput")
    parser.add_argument("root", type=Path, help="Directory containing hs_err_pid*.log files")
    parser.add_argument(
        "--mode",
        type=ParseMode,
        choices=list(ParseMode),
        default=ParseMode.STRICT,
        help="Title recognition mode (default: strict)",
    )
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run cProfile and print top hotspots",
    )
    parser.add_argument(
        "--profile-top",
        type=int,
        default=30,
        help="Number of cProfile rows to print (default: 30)",
    )
    parser.add_argument(
        "--profile-sort",
        type=str,
        default="tottime",
        help="cProfile sort key (default: tottime, common: cumulative)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    root: Path = args.root
    if not root.exists() or not root.is_dir():
        raise SystemExit(f"Invalid report directory: {root}")

    files = _collect_report_files(root)
    if not files:
        raise SystemExit(f"No .log files found under {root}")
    texts = [path.read_text(encoding="utf-8", errors="replace") for path in files]
    total_chars = sum(len(text) for text in texts)

    show_progress = not args.no_progress
    runs = max(args.runs, 1)
    warmups = max(args.warmups, 0)

    def _benchmark() -> tuple[list[float], int, int, int]:
        for warmup_idx in range(warmups):
            _run_once(
                texts,
                mode=args.mode,
                label=f"warmup {warmup_idx + 1}/{warmups}",
                show_progress=show_progress,
            )

        timings: list[float] = []
        sections = subsections = diagnostics = 0
        for run_idx in range(runs):
            duration, sections, subsections, diagnostics = _run_once(
                texts,
                mode=args.mode,
                label=f"run {run_idx + 1}/{runs}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, sections, subsections, diagnostics

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, sections, subsections, diagnostics = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, sections, subsections, diagnostics = _benchmark()

    mean = statistics.mean(timings)

    print(f"Dataset: {root}")
    print(f"Files: {len(files)} ({total_chars} characters)")
    print(f"Sections: {sections}")
    print(f"Subsections: {subsections}")
    print(f"Diagnostics: {diagnostics}")
    print(f"Runs: {len(timings)} (warmups={warmups})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Files/s (mean): {len(files) / mean:.1f}")
    print(f"Chars/s (mean): {total_chars / mean:.0f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
