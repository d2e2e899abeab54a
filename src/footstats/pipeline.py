"""Per-file orchestration: decode, clean, aggregate and export with timing."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from footstats.config import ValidationRules, label_for_path
from footstats.ingest import DatasetError, load_and_clean
from footstats.models import AggregateResult, PipelineCounters
from footstats.report import build_results, write_report, write_results


logger = logging.getLogger(__name__)

RESULTS_FILENAME = "results.json"
REPORT_FILENAME = "report.txt"


@dataclass(frozen=True)
class RunOutcome:
    """What happened to one input file."""

    label: str
    path: Path
    output_dir: Path
    ok: bool
    message: str
    duration_seconds: float = 0.0
    records_per_second: float = 0.0
    result: Optional[AggregateResult] = None
    counters: Optional[PipelineCounters] = None


def throughput(total_parsed: int, duration_seconds: float) -> float:
    if duration_seconds <= 0:
        return 0.0
    return total_parsed / duration_seconds


def run_dataset(
    path: Path,
    output_root: Path,
    *,
    top_n: int | None = None,
    rules: ValidationRules | None = None,
) -> RunOutcome:
    """Process one dataset end to end; failures come back as a failed outcome."""

    path = Path(path)
    label = label_for_path(str(path))
    output_dir = Path(output_root) / label

    start = time.perf_counter()
    try:
        clean = load_and_clean(path, rules)
        result = build_results(clean, top_n=top_n)
        write_results(result, output_dir / RESULTS_FILENAME)
        duration = time.perf_counter() - start
        eps = throughput(clean.counters.total_parsed, duration)
        write_report(
            result,
            clean.counters,
            output_dir / REPORT_FILENAME,
            duration_seconds=duration,
            records_per_second=eps,
        )
    except DatasetError as exc:
        logger.warning("Processing %s failed: %s", path, exc)
        return RunOutcome(
            label=label,
            path=path,
            output_dir=output_dir,
            ok=False,
            message=str(exc),
            duration_seconds=time.perf_counter() - start,
        )

    logger.info(
        "Processed %s (%s valid of %s) in %.3fs",
        path,
        clean.counters.total_valid,
        clean.counters.total_parsed,
        duration,
    )
    return RunOutcome(
        label=label,
        path=path,
        output_dir=output_dir,
        ok=True,
        message=f"OK -> {output_dir}",
        duration_seconds=duration,
        records_per_second=eps,
        result=result,
        counters=clean.counters,
    )


def run_many(
    paths: Iterable[Path],
    output_root: Path,
    *,
    top_n: int | None = None,
) -> List[RunOutcome]:
    """Run every dataset in order; one failure never stops the others."""

    return [run_dataset(Path(path), output_root, top_n=top_n) for path in paths]


__all__ = [
    "REPORT_FILENAME",
    "RESULTS_FILENAME",
    "RunOutcome",
    "run_dataset",
    "run_many",
    "throughput",
]
