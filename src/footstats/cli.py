"""Command-line interface for running the statistics pipeline over datasets."""

from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path
from typing import Sequence

from footstats.config import DEFAULT_DATASETS, load_settings
from footstats.pipeline import RunOutcome, run_dataset


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    settings = load_settings()
    parser = argparse.ArgumentParser(description="Compute statistics for football player datasets")
    parser.add_argument(
        "inputs",
        type=Path,
        nargs="*",
        help="JSON datasets to process (defaults to the clean/dirty/large samples)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=settings.output_root,
        help="Root folder for per-dataset results (default: %(default)s)",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=settings.top_n,
        help="Length of every ranking (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def _outcome_line(outcome: RunOutcome) -> str:
    if outcome.ok:
        return (
            f"[{outcome.label}] OK -> {outcome.output_dir} "
            f"(time={outcome.duration_seconds:.3f} s, eps={outcome.records_per_second:.1f})"
        )
    return f"[{outcome.label}] ERROR: {outcome.message}"


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    inputs = args.inputs or [Path(p) for p in DEFAULT_DATASETS]
    top_n = max(1, args.top)

    start = time.perf_counter()
    outcomes: list[RunOutcome] = []
    for path in inputs:
        outcome = run_dataset(path, args.output_dir, top_n=top_n)
        print(_outcome_line(outcome))
        outcomes.append(outcome)
    print(f"Done. Total time={time.perf_counter() - start:.3f} s")

    return 0 if all(outcome.ok for outcome in outcomes) else 1


if __name__ == "__main__":
    raise SystemExit(main())
