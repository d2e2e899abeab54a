"""JSON and text exporters for computed dataset statistics."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, List, Mapping, Sequence, TypeVar

from footstats.config import get_ranking_settings
from footstats.ingest.errors import OutputWriteError
from footstats.models import AggregateResult, PipelineCounters


T = TypeVar("T")

_BANNER = "=" * 47
_RULE_WIDTH = 27


def results_to_json(result: AggregateResult) -> str:
    return result.model_dump_json(indent=2)


def _numbered(entries: Sequence[T], fmt: Callable[[T], str]) -> List[str]:
    if not entries:
        return ["(none)"]
    return [f"{index}. {fmt(entry)}" for index, entry in enumerate(entries, start=1)]


def _section(title: str, lines: Iterable[str]) -> List[str]:
    return [title, "-" * max(len(title), _RULE_WIDTH), *lines, ""]


def _count_lines(counts: Mapping[str, int]) -> List[str]:
    return [f"- {key} : {count} players" for key, count in counts.items()]


def _average_lines(values: Mapping[str, float], unit: str) -> List[str]:
    return [f"- {key} : {value:.2f} {unit}" for key, value in values.items()]


def render_report(
    result: AggregateResult,
    counters: PipelineCounters,
    *,
    duration_seconds: float,
    records_per_second: float,
    red_card_weight: int | None = None,
) -> str:
    """Render the human-readable report for one pipeline run."""

    if red_card_weight is None:
        red_card_weight = get_ranking_settings().red_card_weight
    d = result.discipline_statistics
    lines: List[str] = [
        _BANNER,
        "   FOOTBALL PLAYERS ANALYSIS REPORT",
        _BANNER,
        "",
    ]
    lines += _section(
        "PARSING STATISTICS",
        [
            f"- Total entries (JSON)      : {counters.total_parsed}",
            f"- Parsing errors            : {counters.parsing_errors}",
            f"- Invalid records           : {counters.invalid_count}",
            f"- Duplicates removed        : {counters.duplicates_removed}",
            f"- Total valid               : {counters.total_valid}",
        ],
    )
    lines += _section(
        "TOP 10 - SCORERS",
        _numbered(result.top_10_scorers, lambda e: f"{e.name} ({e.club}) : {e.goals} goals in {e.matches} matches"),
    )
    lines += _section(
        "TOP 10 - ASSISTERS",
        _numbered(
            result.top_10_assisters,
            lambda e: f"{e.name} ({e.club}) : {e.assists} assists in {e.matches} matches",
        ),
    )
    lines += _section(
        "TOP 10 - MARKET VALUE",
        _numbered(result.most_valuable_players, lambda e: f"{e.name} ({e.club}) : {e.marketValue:.1f} M"),
    )
    lines += _section(
        "TOP 10 - SALARIES",
        _numbered(result.highest_paid_players, lambda e: f"{e.name} ({e.club}) : {e.salary:.1f} M/year"),
    )
    lines += _section("PLAYERS BY LEAGUE", _count_lines(result.players_by_league))
    lines += _section("PLAYERS BY POSITION", _count_lines(result.players_by_position))
    lines += _section(
        "AVERAGES BY POSITION",
        [
            "AVERAGE AGE:",
            *_average_lines(result.average_age_by_position, "years"),
            "",
            "GOALS PER MATCH (average):",
            *_average_lines(result.average_goals_by_position, "goals"),
        ],
    )
    lines += _section(
        "DISCIPLINE",
        [
            f"- Total yellow cards        : {d.total_yellow_cards}",
            f"- Total red cards           : {d.total_red_cards}",
            f"- Most disciplined position : {d.most_disciplined_position or 'n/a'}",
            f"- Least disciplined position: {d.least_disciplined_position or 'n/a'}",
        ],
    )
    lines += _section(
        "BONUS STATS",
        [
            "TOP 10 - GOAL CONTRIBUTION / MATCH (goals + assists)",
            *_numbered(
                result.top_goal_contribution_per_match,
                lambda e: (
                    f"{e.name} : {e.goals} + {e.assists} in {e.matches} "
                    f"(={e.contribution_per_match:.3f} / match)"
                ),
            ),
            "",
            f"TOP 10 - DISCIPLINE RISK / MATCH (yellow + {red_card_weight}*red)",
            *_numbered(
                result.top_discipline_risk_per_match,
                lambda e: (
                    f"{e.name} : {e.yellow} yellow, {e.red} red in {e.matches} "
                    f"(risk={e.risk_per_match:.3f} / match)"
                ),
            ),
            "",
            "TOP 10 - VALUE FOR MONEY ((goals + assists) / salary)",
            *_numbered(
                result.best_value_for_money,
                lambda e: (
                    f"{e.name} : (G+A)={e.goals + e.assists}, salary={e.salary:.2f} M "
                    f"-> {e.contrib_per_million:.3f} contrib/M"
                ),
            ),
        ],
    )
    lines += _section(
        "PERFORMANCE",
        [
            f"- Processing time           : {duration_seconds:.3f} seconds",
            f"- Entries/second            : {records_per_second:.2f}",
        ],
    )
    lines.append(_BANNER)
    return "\n".join(lines) + "\n"


def _write_text(path: Path, text: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(f"Failed to write {path}: {exc}") from exc


def write_results(result: AggregateResult, path: Path) -> None:
    _write_text(Path(path), results_to_json(result))


def write_report(
    result: AggregateResult,
    counters: PipelineCounters,
    path: Path,
    *,
    duration_seconds: float,
    records_per_second: float,
) -> None:
    text = render_report(
        result,
        counters,
        duration_seconds=duration_seconds,
        records_per_second=records_per_second,
    )
    _write_text(Path(path), text)


__all__ = [
    "render_report",
    "results_to_json",
    "write_report",
    "write_results",
]
