import json
from pathlib import Path

import pytest

from footstats.ingest import (
    DatasetReadError,
    DatasetStructureError,
    decode_players,
    read_dataset,
)


def _payload(player_id: int, **overrides):
    payload = {
        "id": player_id,
        "name": f"Player {player_id}",
        "age": 25,
        "nationality": "Brazil",
        "position": "Midfielder",
        "club": "Santos",
        "league": "Serie A",
        "goalsScored": 5,
        "assists": 7,
        "matchesPlayed": 28,
        "yellowCards": 4,
        "redCards": 0,
        "marketValue": 15_000_000,
        "salary": 2.0,
    }
    payload.update(overrides)
    return payload


def test_decode_players_keeps_order_and_counts_failures():
    missing_name = _payload(3)
    del missing_name["name"]
    text = json.dumps([
        _payload(1),
        42,
        missing_name,
        _payload(4, age="old"),
        _payload(2),
    ])

    result = decode_players(text)

    assert [record.id for record in result.records] == [1, 2]
    assert result.parsing_errors == 3
    assert result.total_parsed == 5


def test_decode_players_keeps_semantically_invalid_records():
    text = json.dumps([_payload(1, age=10, position="Striker", club=None)])

    result = decode_players(text)

    assert result.parsing_errors == 0
    assert result.records[0].position == "Striker"
    assert result.records[0].club is None


def test_decode_players_empty_array():
    result = decode_players("[]")
    assert result.records == ()
    assert result.parsing_errors == 0


def test_decode_players_rejects_non_array_root():
    with pytest.raises(DatasetStructureError, match="Expected a JSON array"):
        decode_players('{"not": "array"}')


def test_decode_players_rejects_malformed_json():
    with pytest.raises(DatasetStructureError, match="Invalid JSON"):
        decode_players('[{"id": 1,')


def test_read_dataset_missing_file(tmp_path: Path):
    with pytest.raises(DatasetReadError, match="Failed to read file"):
        read_dataset(tmp_path / "missing.json")


def test_read_dataset_returns_text(tmp_path: Path):
    path = tmp_path / "players.json"
    path.write_text("[]", encoding="utf-8")

    assert read_dataset(path) == "[]"


@pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
def test_decode_players_rejects_non_finite_literals(literal):
    text = json.dumps([_payload(1)]).replace('"salary": 2.0', f'"salary": {literal}')
    assert literal in text

    with pytest.raises(DatasetStructureError, match="non-finite"):
        decode_players(text)


def test_decode_players_rejects_excessive_nesting():
    text = "[" * 200_000 + "]" * 200_000

    with pytest.raises(DatasetStructureError, match="Invalid JSON"):
        decode_players(text)


def test_decode_players_accepts_whole_valued_floats_for_integers():
    text = json.dumps([_payload(1, id=1.0, marketValue=5e7)])

    result = decode_players(text)

    assert result.parsing_errors == 0
    assert result.records[0].id == 1
    assert result.records[0].market_value == 50_000_000
