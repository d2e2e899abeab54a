"""Business rules and ranking settings for player datasets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Tuple

from footstats.models import Position


@dataclass(frozen=True)
class ValidationRules:
    min_age: int
    max_age: int
    positions: Mapping[str, Position]

    def resolve_position(self, label: str) -> Position | None:
        return self.positions.get(label)


@dataclass(frozen=True)
class RankingSettings:
    top_n: int
    red_card_weight: int


_DEFAULT_VALIDATION_RULES = ValidationRules(
    min_age=16,
    max_age=45,
    positions={position.value: position for position in Position},
)

_DEFAULT_RANKING_SETTINGS = RankingSettings(top_n=10, red_card_weight=3)

# Checked in order; the first label contained in the lower-cased path wins.
_DATASET_LABELS: Tuple[str, ...] = ("clean", "dirty", "large")
FALLBACK_DATASET_LABEL = "custom"

DEFAULT_DATASETS: Tuple[str, ...] = (
    "data/data_clean.json",
    "data/data_dirty.json",
    "data/data_large.json",
)


def get_validation_rules() -> ValidationRules:
    """Return the validation rules applied to every decoded record."""

    return _DEFAULT_VALIDATION_RULES


def get_ranking_settings(*, top_n: int | None = None) -> RankingSettings:
    """Return ranking settings, optionally overriding the list length."""

    if top_n is None:
        return _DEFAULT_RANKING_SETTINGS
    if top_n < 1:
        raise ValueError(f"top_n must be at least 1, got {top_n!r}")
    return RankingSettings(top_n=top_n, red_card_weight=_DEFAULT_RANKING_SETTINGS.red_card_weight)


def iter_dataset_labels() -> Iterable[str]:
    return iter(_DATASET_LABELS)


def label_for_path(path: str) -> str:
    """Map an input path to the output folder label used for its artifacts."""

    lowered = str(path).lower()
    for label in _DATASET_LABELS:
        if label in lowered:
            return label
    return FALLBACK_DATASET_LABEL

