"""Input adapters that decode and clean raw player datasets."""

from .cleaning import (
    ValidationOutcome,
    clean_records,
    dedupe_by_id,
    load_and_clean,
    partition_validated,
    validate_record,
)
from .decoder import DecodeResult, decode_items, decode_players, read_dataset
from .errors import (
    DatasetError,
    DatasetReadError,
    DatasetStructureError,
    OutputWriteError,
)

__all__ = [
    "DatasetError",
    "DatasetReadError",
    "DatasetStructureError",
    "DecodeResult",
    "OutputWriteError",
    "ValidationOutcome",
    "clean_records",
    "decode_items",
    "decode_players",
    "dedupe_by_id",
    "load_and_clean",
    "partition_validated",
    "read_dataset",
    "validate_record",
]
