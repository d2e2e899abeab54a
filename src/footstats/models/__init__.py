"""Player and result models shared across ingestion, statistics and reporting."""

from .player import (
    CandidateRecord,
    CleanDataset,
    PipelineCounters,
    Position,
    ValidatedRecord,
)
from .results import (
    AggregateResult,
    AssisterEntry,
    ContributionEntry,
    DisciplineRiskEntry,
    DisciplineStatistics,
    ParsingStatistics,
    SalaryEntry,
    ScorerEntry,
    ValuableEntry,
    ValueForMoneyEntry,
)

__all__ = [
    "AggregateResult",
    "AssisterEntry",
    "CandidateRecord",
    "CleanDataset",
    "ContributionEntry",
    "DisciplineRiskEntry",
    "DisciplineStatistics",
    "ParsingStatistics",
    "PipelineCounters",
    "Position",
    "SalaryEntry",
    "ScorerEntry",
    "ValidatedRecord",
    "ValuableEntry",
    "ValueForMoneyEntry",
]
