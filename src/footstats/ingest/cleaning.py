"""Business-rule validation and deduplication of decoded player records."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Sequence, Set, Tuple

from footstats.config import ValidationRules, get_validation_rules
from footstats.ingest.decoder import DecodeResult, decode_players, read_dataset
from footstats.models import (
    CandidateRecord,
    CleanDataset,
    PipelineCounters,
    ValidatedRecord,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationOutcome:
    """Either an accepted record or the reason it was rejected."""

    record: ValidatedRecord | None = None
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.record is not None

    @classmethod
    def accept(cls, record: ValidatedRecord) -> "ValidationOutcome":
        return cls(record=record)

    @classmethod
    def reject(cls, reason: str) -> "ValidationOutcome":
        return cls(reason=reason)


def validate_record(
    candidate: CandidateRecord,
    rules: ValidationRules | None = None,
) -> ValidationOutcome:
    """Check one record against the rules; the first failing rule is reported."""

    rules = rules or get_validation_rules()

    position = rules.resolve_position(candidate.position)
    if position is None:
        return ValidationOutcome.reject("invalid position")
    if not rules.min_age <= candidate.age <= rules.max_age:
        return ValidationOutcome.reject("invalid age")
    if candidate.goals_scored < 0:
        return ValidationOutcome.reject("invalid goals")
    if candidate.matches_played <= 0:
        return ValidationOutcome.reject("invalid matches")
    if candidate.club is None:
        return ValidationOutcome.reject("missing club")

    return ValidationOutcome.accept(
        ValidatedRecord(
            id=candidate.id,
            name=candidate.name,
            age=candidate.age,
            nationality=candidate.nationality,
            position=position,
            club=candidate.club,
            league=candidate.league,
            goals_scored=candidate.goals_scored,
            assists=candidate.assists,
            matches_played=candidate.matches_played,
            yellow_cards=candidate.yellow_cards,
            red_cards=candidate.red_cards,
            market_value=candidate.market_value,
            salary=candidate.salary,
        )
    )


def partition_validated(
    candidates: Iterable[CandidateRecord],
    rules: ValidationRules | None = None,
) -> Tuple[Tuple[ValidatedRecord, ...], int]:
    """Return the accepted records in input order and the number rejected."""

    valid: List[ValidatedRecord] = []
    invalid = 0
    for candidate in candidates:
        outcome = validate_record(candidate, rules)
        if outcome.record is not None:
            valid.append(outcome.record)
        else:
            invalid += 1
            logger.debug("Rejected player id=%s: %s", candidate.id, outcome.reason)
    return tuple(valid), invalid


def dedupe_by_id(records: Sequence[ValidatedRecord]) -> Tuple[Tuple[ValidatedRecord, ...], int]:
    """Keep the first record seen for every id and count the later ones dropped."""

    seen: Set[int] = set()
    kept: List[ValidatedRecord] = []
    removed = 0
    for record in records:
        if record.id in seen:
            removed += 1
            continue
        seen.add(record.id)
        kept.append(record)
    return tuple(kept), removed


def clean_records(
    decoded: DecodeResult,
    rules: ValidationRules | None = None,
) -> CleanDataset:
    validated, invalid_count = partition_validated(decoded.records, rules)
    unique, duplicates_removed = dedupe_by_id(validated)
    counters = PipelineCounters(
        total_parsed=decoded.total_parsed,
        total_valid=len(unique),
        parsing_errors=decoded.parsing_errors,
        invalid_count=invalid_count,
        duplicates_removed=duplicates_removed,
    )
    logger.info(
        "Cleaned %s entries: %s valid, %s parsing errors, %s invalid, %s duplicates",
        counters.total_parsed,
        counters.total_valid,
        counters.parsing_errors,
        counters.invalid_count,
        counters.duplicates_removed,
    )
    return CleanDataset(players=unique, counters=counters)


def load_and_clean(path: Path, rules: ValidationRules | None = None) -> CleanDataset:
    """Read, decode, validate and deduplicate one dataset file."""

    return clean_records(decode_players(read_dataset(path)), rules)
