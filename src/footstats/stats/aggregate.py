"""Rankings, grouped counts and per-match metrics over validated players.

Every function here is pure and takes the deduplicated player collection as its
only data input. Rankings are built on Python's stable sort, so records that tie
on the ranking key keep their input order unless a tie-break is documented.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Sequence, Tuple, TypeVar

from footstats.config import get_ranking_settings
from footstats.models import ValidatedRecord
from footstats.models.results import (
    AssisterEntry,
    ContributionEntry,
    DisciplineRiskEntry,
    DisciplineStatistics,
    SalaryEntry,
    ScorerEntry,
    ValuableEntry,
    ValueForMoneyEntry,
)


T = TypeVar("T")


@dataclass
class _PositionTotals:
    count: int = 0
    age: int = 0
    goals: int = 0
    matches: int = 0
    yellow: int = 0
    red: int = 0

    def add(self, player: ValidatedRecord) -> None:
        self.count += 1
        self.age += player.age
        self.goals += player.goals_scored
        self.matches += player.matches_played
        self.yellow += player.yellow_cards
        self.red += player.red_cards

    @property
    def cards(self) -> int:
        return self.yellow + self.red


def _limit(n: int | None) -> int:
    return get_ranking_settings().top_n if n is None else n


def _position_label(player: ValidatedRecord) -> str:
    return player.position.value


def _totals_by_position(players: Iterable[ValidatedRecord]) -> Dict[str, _PositionTotals]:
    totals: Dict[str, _PositionTotals] = defaultdict(_PositionTotals)
    for player in players:
        totals[_position_label(player)].add(player)
    return dict(totals)


def _sorted_mapping(values: Dict[str, T]) -> Dict[str, T]:
    return {key: values[key] for key in sorted(values)}


def _per_match(total: int, matches: int) -> float:
    if matches == 0:
        return 0.0
    return total / matches


def _rank(
    players: Iterable[ValidatedRecord],
    key: Callable[[ValidatedRecord], Tuple],
    n: int | None,
) -> List[ValidatedRecord]:
    return sorted(players, key=key)[: _limit(n)]


def top_scorers(players: Sequence[ValidatedRecord], n: int | None = None) -> List[ScorerEntry]:
    """Most goals first; fewer matches ranks higher among equal goal counts."""

    ranked = _rank(players, lambda p: (-p.goals_scored, p.matches_played), n)
    return [
        ScorerEntry(name=p.name, club=p.club, goals=p.goals_scored, matches=p.matches_played)
        for p in ranked
    ]


def top_assisters(players: Sequence[ValidatedRecord], n: int | None = None) -> List[AssisterEntry]:
    ranked = _rank(players, lambda p: (-p.assists, p.matches_played), n)
    return [
        AssisterEntry(name=p.name, club=p.club, assists=p.assists, matches=p.matches_played)
        for p in ranked
    ]


def most_valuable(players: Sequence[ValidatedRecord], n: int | None = None) -> List[ValuableEntry]:
    """Highest market values; players without a market value are left out."""

    with_value = [p for p in players if p.market_value is not None]
    ranked = _rank(with_value, lambda p: (-p.market_value,), n)
    return [
        ValuableEntry(name=p.name, club=p.club, marketValue=float(p.market_value))
        for p in ranked
    ]


def highest_paid(players: Sequence[ValidatedRecord], n: int | None = None) -> List[SalaryEntry]:
    with_salary = [p for p in players if p.salary is not None]
    ranked = _rank(with_salary, lambda p: (-p.salary,), n)
    return [SalaryEntry(name=p.name, club=p.club, salary=p.salary) for p in ranked]


def players_by_league(players: Iterable[ValidatedRecord]) -> Dict[str, int]:
    return _sorted_mapping(Counter(p.league for p in players))


def players_by_position(players: Iterable[ValidatedRecord]) -> Dict[str, int]:
    totals = _totals_by_position(players)
    return _sorted_mapping({pos: t.count for pos, t in totals.items()})


def average_age_by_position(players: Iterable[ValidatedRecord]) -> Dict[str, float]:
    totals = _totals_by_position(players)
    return _sorted_mapping({pos: t.age / t.count for pos, t in totals.items()})


def average_goals_by_position(players: Iterable[ValidatedRecord]) -> Dict[str, float]:
    """Goals per match for each position, computed from the position totals.

    A position whose players have no matches at all averages 0.0.
    """

    totals = _totals_by_position(players)
    return _sorted_mapping({pos: _per_match(t.goals, t.matches) for pos, t in totals.items()})


def discipline(players: Sequence[ValidatedRecord]) -> DisciplineStatistics:
    """Card totals plus the positions with the fewest and most cards.

    Positions tied on card count are ordered by label, so the alphabetically
    first position wins both extremes. With no players both extremes are None.
    """

    totals = _totals_by_position(players)
    most_disciplined: str | None = None
    least_disciplined: str | None = None
    if totals:
        most_disciplined = min(totals, key=lambda pos: (totals[pos].cards, pos))
        least_disciplined = min(totals, key=lambda pos: (-totals[pos].cards, pos))

    return DisciplineStatistics(
        total_yellow_cards=sum(t.yellow for t in totals.values()),
        total_red_cards=sum(t.red for t in totals.values()),
        most_disciplined_position=most_disciplined,
        least_disciplined_position=least_disciplined,
    )


def top_goal_contribution_per_match(
    players: Sequence[ValidatedRecord], n: int | None = None
) -> List[ContributionEntry]:
    """(goals + assists) / matches, highest first."""

    entries = [
        ContributionEntry(
            name=p.name,
            club=p.club,
            goals=p.goals_scored,
            assists=p.assists,
            matches=p.matches_played,
            contribution_per_match=(p.goals_scored + p.assists) / p.matches_played,
        )
        for p in players
        if p.matches_played > 0
    ]
    entries.sort(key=lambda e: -e.contribution_per_match)
    return entries[: _limit(n)]


def top_discipline_risk_per_match(
    players: Sequence[ValidatedRecord],
    n: int | None = None,
    *,
    red_card_weight: int | None = None,
) -> List[DisciplineRiskEntry]:
    """(yellow + weight * red) / matches, highest first. Reds weigh 3 by default."""

    if red_card_weight is None:
        red_card_weight = get_ranking_settings().red_card_weight
    entries = [
        DisciplineRiskEntry(
            name=p.name,
            club=p.club,
            yellow=p.yellow_cards,
            red=p.red_cards,
            matches=p.matches_played,
            risk_per_match=(p.yellow_cards + red_card_weight * p.red_cards) / p.matches_played,
        )
        for p in players
        if p.matches_played > 0
    ]
    entries.sort(key=lambda e: -e.risk_per_match)
    return entries[: _limit(n)]


def best_value_for_money(
    players: Sequence[ValidatedRecord], n: int | None = None
) -> List[ValueForMoneyEntry]:
    """(goals + assists) / salary for players with a salary; a zero salary is skipped."""

    entries = [
        ValueForMoneyEntry(
            name=p.name,
            club=p.club,
            goals=p.goals_scored,
            assists=p.assists,
            salary=p.salary,
            contrib_per_million=(p.goals_scored + p.assists) / p.salary,
        )
        for p in players
        if p.salary is not None and p.salary != 0
    ]
    entries.sort(key=lambda e: -e.contrib_per_million)
    return entries[: _limit(n)]


__all__ = [
    "average_age_by_position",
    "average_goals_by_position",
    "best_value_for_money",
    "discipline",
    "highest_paid",
    "most_valuable",
    "players_by_league",
    "players_by_position",
    "top_assisters",
    "top_discipline_risk_per_match",
    "top_goal_contribution_per_match",
    "top_scorers",
]
