"""Statistics engine for validated player collections."""

from .aggregate import (
    average_age_by_position,
    average_goals_by_position,
    best_value_for_money,
    discipline,
    highest_paid,
    most_valuable,
    players_by_league,
    players_by_position,
    top_assisters,
    top_discipline_risk_per_match,
    top_goal_contribution_per_match,
    top_scorers,
)

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
