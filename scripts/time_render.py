#!/usr/bin/env python3
"""Quick perf benchmark for describing and rendering nested values."""

from __future__ import annotations

import argparse
import cProfile
import io
import pstats
import statistics
import time

from tqdm import tqdm

from fitprint import RenderOptions, describe, render_with_diagnostics
from fitprint.doc import Document


def _nested_value(depth: int, breadth: int) -> object:
    if depth == 0:
        return list(range(breadth))
    return {f"key_{index}": _nested_value(depth - 1, breadth) for index in range(breadth)}


def _run_once(
    documents: list[Document],
    *,
    options: RenderOptions,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int]:
    start = time.perf_counter()
    total_chars = 0
    total_diagnostics = 0
    iterator = tqdm(documents, desc=label, unit="doc") if show_progress else documents
    for document in iterator:
        output, diagnostics = render_with_diagnostics(document, options)
        total_chars += len(output)
        total_diagnostics += len(diagnostics)
    duration = time.perf_counter() - start
    return duration, total_chars, total_diagnostics


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark fitprint render throughput")
    parser.add_argument("--depth", type=int, default=4, help="Nesting depth of the sample value")
    parser.add_argument("--breadth", type=int, default=6, help="Children per nesting level")
    parser.add_argument("--documents", type=int, default=20, help="Documents rendered per run")
    parser.add_argument("--width", type=int, default=None, help="Maximum line width (default: terminal width)")
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
    args = parser.parse_args()

    if args.depth < 0 or args.breadth < 1:
        raise SystemExit("--depth must be >= 0 and --breadth >= 1")

    options = RenderOptions.from_terminal() if args.width is None else RenderOptions(max_width=args.width)
    value = _nested_value(args.depth, args.breadth)
    documents = [describe(value) for _ in range(max(args.documents, 1))]
    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(
                documents,
                options=options,
                label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
                show_progress=show_progress,
            )

        timings: list[float] = []
        chars_count = 0
        diagnostics_count = 0
        for run_idx in range(max(args.runs, 1)):
            duration, chars_count, diagnostics_count = _run_once(
                documents,
                options=options,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, chars_count, diagnostics_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, chars_count, diagnostics_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, chars_count, diagnostics_count = _benchmark()

    mean = statistics.mean(timings)

    print(f"Value: depth={args.depth} breadth={args.breadth} width={options.max_width}")
    print(f"Documents: {len(documents)}")
    print(f"Chars/run: {chars_count}")
    print(f"Diagnostics: {diagnostics_count}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Docs/s (mean):  {len(documents) / mean:.1f}")
    print(f"Chars/s (mean): {chars_count / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
