#!/usr/bin/env python3
"""Quick perf benchmark for reducing every property of a dataset."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from csstyping.data import CssDataset, load_css_dataset, load_default_css_dataset
from csstyping.reduce import GrammarReducer
from csstyping.syntax import parse_value_syntax_cached


def _run_once(
    dataset: CssDataset,
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int]:
    # Parsing is memoized process-wide; clear it so every run measures parse + reduce.
    parse_value_syntax_cached.cache_clear()
    start = time.perf_counter()
    reducer = GrammarReducer(dataset)
    total_descriptors = 0
    names = list(dataset.properties)
    iterator = tqdm(names, desc=label, unit="property") if show_progress else names
    for name in iterator:
        total_descriptors += len(reducer.reduce_property(name))
    duration = time.perf_counter() - start
    return duration, len(names), total_descriptors


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark property grammar reduction throughput")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory with properties.json/syntaxes.json/types.json (default: bundled dataset)",
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
    args = parser.parse_args()

    dataset = load_css_dataset(args.data_dir) if args.data_dir is not None else load_default_css_dataset()
    if not dataset.properties:
        raise SystemExit(f"No properties found under {dataset.source_root}")

    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(dataset, label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}", show_progress=show_progress)

        timings: list[float] = []
        properties_count = 0
        descriptors_count = 0
        for run_idx in range(max(args.runs, 1)):
            duration, properties_count, descriptors_count = _run_once(
                dataset,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, properties_count, descriptors_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, properties_count, descriptors_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats("tottime").print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, properties_count, descriptors_count = _benchmark()

    mean = statistics.mean(timings)
    print(f"Dataset: {dataset.source_root}")
    print(f"Properties: {properties_count}")
    print(f"Descriptors: {descriptors_count}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Properties/s (mean): {properties_count / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
