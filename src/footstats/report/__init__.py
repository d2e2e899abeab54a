"""Report assembly and export helpers."""

from .builder import build_results, parsing_statistics
from .export import render_report, results_to_json, write_report, write_results

__all__ = [
    "build_results",
    "parsing_statistics",
    "render_report",
    "results_to_json",
    "write_report",
    "write_results",
]
