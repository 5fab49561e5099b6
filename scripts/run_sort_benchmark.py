#!/usr/bin/env python3
"""Time the arraymath quicksort engine against numpy.sort and write reports."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path


REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from arraymath.benchmark import plot_benchmark, run_benchmark


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("reports"),
        help="Directory where the JSON and Markdown reports will be stored.",
    )
    parser.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        default=[1000, 10000],
        help="Array lengths to benchmark.",
    )
    parser.add_argument("--runs", type=int, default=3, help="Timed runs per size and implementation.")
    parser.add_argument("--seed", type=int, default=5042, help="Random seed for the generated arrays.")
    parser.add_argument("--plot", action="store_true", help="Also write sort_benchmark.png (needs matplotlib).")
    parser.add_argument("--verbose", action="store_true", help="Log progress for every size.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    metrics = run_benchmark(sizes=args.sizes, runs=args.runs, output_dir=str(args.output), seed=args.seed)
    if args.plot:
        plot_benchmark(metrics, str(args.output / "sort_benchmark.png"))
    print(json.dumps(metrics["sizes"], indent=2))


if __name__ == "__main__":
    main()
