"""Pydantic models for the ``results.json`` contract; field names are the JSON keys."""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel


class ParsingStatistics(BaseModel):
    total_players_parsed: int
    total_players_valid: int
    parsing_errors: int
    duplicates_removed: int


class ScorerEntry(BaseModel):
    name: str
    club: str
    goals: int
    matches: int


class AssisterEntry(BaseModel):
    name: str
    club: str
    assists: int
    matches: int


class ValuableEntry(BaseModel):
    name: str
    club: str
    marketValue: float


class SalaryEntry(BaseModel):
    name: str
    club: str
    salary: float


class DisciplineStatistics(BaseModel):
    total_yellow_cards: int
    total_red_cards: int
    most_disciplined_position: str | None
    least_disciplined_position: str | None


class ContributionEntry(BaseModel):
    name: str
    club: str
    goals: int
    assists: int
    matches: int
    contribution_per_match: float


class DisciplineRiskEntry(BaseModel):
    name: str
    club: str
    yellow: int
    red: int
    matches: int
    risk_per_match: float


class ValueForMoneyEntry(BaseModel):
    name: str
    club: str
    goals: int
    assists: int
    salary: float
    contrib_per_million: float


class AggregateResult(BaseModel):
    statistics: ParsingStatistics
    top_10_scorers: List[ScorerEntry]
    top_10_assisters: List[AssisterEntry]
    most_valuable_players: List[ValuableEntry]
    highest_paid_players: List[SalaryEntry]
    players_by_league: Dict[str, int]
    players_by_position: Dict[str, int]
    average_age_by_position: Dict[str, float]
    average_goals_by_position: Dict[str, float]
    discipline_statistics: DisciplineStatistics
    top_goal_contribution_per_match: List[ContributionEntry]
    top_discipline_risk_per_match: List[DisciplineRiskEntry]
    best_value_for_money: List[ValueForMoneyEntry]
