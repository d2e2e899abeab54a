"""Assemble the full statistics bundle for one cleaned dataset."""

from __future__ import annotations

from footstats import stats
from footstats.config import get_ranking_settings
from footstats.models import AggregateResult, CleanDataset, ParsingStatistics, PipelineCounters


def parsing_statistics(counters: PipelineCounters) -> ParsingStatistics:
    return ParsingStatistics(
        total_players_parsed=counters.total_parsed,
        total_players_valid=counters.total_valid,
        parsing_errors=counters.parsing_errors,
        duplicates_removed=counters.duplicates_removed,
    )


def build_results(clean: CleanDataset, *, top_n: int | None = None) -> AggregateResult:
    """Compute every statistic for ``clean`` and attach its parsing counters."""

    players = clean.players
    n = get_ranking_settings(top_n=top_n).top_n
    return AggregateResult(
        statistics=parsing_statistics(clean.counters),
        top_10_scorers=stats.top_scorers(players, n),
        top_10_assisters=stats.top_assisters(players, n),
        most_valuable_players=stats.most_valuable(players, n),
        highest_paid_players=stats.highest_paid(players, n),
        players_by_league=stats.players_by_league(players),
        players_by_position=stats.players_by_position(players),
        average_age_by_position=stats.average_age_by_position(players),
        average_goals_by_position=stats.average_goals_by_position(players),
        discipline_statistics=stats.discipline(players),
        top_goal_contribution_per_match=stats.top_goal_contribution_per_match(players, n),
        top_discipline_risk_per_match=stats.top_discipline_risk_per_match(players, n),
        best_value_for_money=stats.best_value_for_money(players, n),
    )
