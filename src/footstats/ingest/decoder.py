"""Helpers to read player datasets and decode them into candidate records."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Sequence, Tuple

from pydantic import ValidationError

from footstats.ingest.errors import DatasetReadError, DatasetStructureError
from footstats.models import CandidateRecord


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodeResult:
    records: Tuple[CandidateRecord, ...]
    parsing_errors: int

    @property
    def total_parsed(self) -> int:
        return len(self.records) + self.parsing_errors


def read_dataset(path: Path) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DatasetReadError(f"Failed to read file: {exc}") from exc


def _reject_constant(name: str) -> Any:
    raise DatasetStructureError(f"Invalid JSON: non-finite number {name}")


def _load_root_array(text: str) -> List[Any]:
    try:
        root = json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise DatasetStructureError(f"Invalid JSON: {exc}") from exc
    except RecursionError as exc:
        raise DatasetStructureError("Invalid JSON: document is nested too deeply") from exc
    if not isinstance(root, list):
        raise DatasetStructureError("Expected a JSON array at root")
    return root


def decode_items(items: Sequence[Any]) -> DecodeResult:
    """Decode each array element on its own, counting the ones that do not fit."""

    records: List[CandidateRecord] = []
    errors = 0
    for index, item in enumerate(items):
        try:
            records.append(CandidateRecord.model_validate(item))
        except ValidationError as exc:
            errors += 1
            logger.debug("Dropping undecodable element %d: %s", index, exc.errors()[0]["msg"])
    return DecodeResult(records=tuple(records), parsing_errors=errors)


def decode_players(text: str) -> DecodeResult:
    """Decode a JSON array of players, tolerating malformed elements.

    Raises ``DatasetStructureError`` when the document itself is not valid JSON or
    when its root is not an array. Element-level failures only increase
    ``parsing_errors``.
    """

    return decode_items(_load_root_array(text))
