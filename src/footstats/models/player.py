"""Canonical player models shared across the decode, validation and stats layers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class Position(str, Enum):
    GOALKEEPER = "Goalkeeper"
    DEFENDER = "Defender"
    MIDFIELDER = "Midfielder"
    FORWARD = "Forward"


class CandidateRecord(BaseModel):
    """Loosely typed player row exactly as it appears in the input array.

    The position label is still free-form and the optional fields may be absent;
    business rules are applied later by the cleaning stage.
    """

    id: int
    name: str
    age: int
    nationality: str
    position: str
    club: Optional[str] = None
    league: str
    goals_scored: int = Field(..., alias="goalsScored")
    assists: int
    matches_played: int = Field(..., alias="matchesPlayed")
    yellow_cards: int = Field(..., alias="yellowCards")
    red_cards: int = Field(..., alias="redCards")
    market_value: Optional[int] = Field(default=None, alias="marketValue")
    salary: Optional[float] = None

    model_config = ConfigDict(strict=True, populate_by_name=True, frozen=True)

    @field_validator(
        "id",
        "age",
        "goals_scored",
        "assists",
        "matches_played",
        "yellow_cards",
        "red_cards",
        "market_value",
        mode="before",
    )
    @classmethod
    def whole_number_as_int(cls, value: Any) -> Any:
        # 5e7 and 1.0 are integers in JSON terms; 1.5 still fails the strict check.
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value


class ValidatedRecord(BaseModel):
    """Player that passed every business rule; used by the statistics layer."""

    id: int
    name: str
    age: int
    nationality: str
    position: Position
    club: str
    league: str
    goals_scored: int = Field(..., ge=0)
    assists: int
    matches_played: int = Field(..., gt=0)
    yellow_cards: int
    red_cards: int
    market_value: Optional[int] = None
    salary: Optional[float] = None

    model_config = ConfigDict(frozen=True)


@dataclass(frozen=True)
class PipelineCounters:
    """Per-run counts gathered while decoding and cleaning one dataset."""

    total_parsed: int
    total_valid: int
    parsing_errors: int
    invalid_count: int
    duplicates_removed: int

    @property
    def decoded(self) -> int:
        return self.total_parsed - self.parsing_errors


@dataclass(frozen=True)
class CleanDataset:
    players: Tuple[ValidatedRecord, ...]
    counters: PipelineCounters
