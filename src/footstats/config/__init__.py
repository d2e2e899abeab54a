"""Configuration helpers for validation rules, rankings and run settings."""

from .rules import (
    DEFAULT_DATASETS,
    FALLBACK_DATASET_LABEL,
    RankingSettings,
    ValidationRules,
    get_ranking_settings,
    get_validation_rules,
    iter_dataset_labels,
    label_for_path,
)
from .settings import RunSettings, load_settings

__all__ = [
    "DEFAULT_DATASETS",
    "FALLBACK_DATASET_LABEL",
    "RankingSettings",
    "RunSettings",
    "ValidationRules",
    "get_ranking_settings",
    "get_validation_rules",
    "iter_dataset_labels",
    "label_for_path",
    "load_settings",
]
