import json
from pathlib import Path

import pytest

from footstats.config import ValidationRules
from footstats.ingest import (
    clean_records,
    decode_players,
    dedupe_by_id,
    load_and_clean,
    partition_validated,
    validate_record,
)
from footstats.models import CandidateRecord, Position


def _payload(player_id: int, **overrides):
    payload = {
        "id": player_id,
        "name": f"Player {player_id}",
        "age": 27,
        "nationality": "Germany",
        "position": "Defender",
        "club": "Dortmund",
        "league": "Bundesliga",
        "goalsScored": 2,
        "assists": 3,
        "matchesPlayed": 31,
        "yellowCards": 6,
        "redCards": 1,
        "marketValue": None,
        "salary": None,
    }
    payload.update(overrides)
    return payload


def _candidate(player_id: int, **overrides) -> CandidateRecord:
    return CandidateRecord.model_validate(_payload(player_id, **overrides))


def test_validate_record_accepts_and_resolves_position():
    outcome = validate_record(_candidate(1, position="Goalkeeper"))

    assert outcome.ok
    assert outcome.reason is None
    assert outcome.record.position is Position.GOALKEEPER
    assert outcome.record.club == "Dortmund"


@pytest.mark.parametrize(
    "overrides",
    [
        {"position": "Striker"},
        {"position": "forward"},
        {"age": 15},
        {"age": 46},
        {"goalsScored": -1},
        {"matchesPlayed": 0},
        {"matchesPlayed": -3},
        {"club": None},
    ],
)
def test_validate_record_rejects_rule_violations(overrides):
    outcome = validate_record(_candidate(1, **overrides))

    assert not outcome.ok
    assert outcome.record is None
    assert outcome.reason


@pytest.mark.parametrize("age", [16, 45])
def test_validate_record_age_bounds_are_inclusive(age):
    assert validate_record(_candidate(1, age=age)).ok


def test_validate_record_reports_first_failing_rule():
    outcome = validate_record(_candidate(1, position="Striker", age=10, club=None))
    other = validate_record(_candidate(2, age=10, club=None))

    assert outcome.reason != other.reason


def test_validate_record_uses_custom_rules():
    rules = ValidationRules(min_age=18, max_age=50, positions={"GK": Position.GOALKEEPER})

    assert validate_record(_candidate(1, position="GK", age=48), rules).ok
    assert not validate_record(_candidate(2, position="Goalkeeper"), rules).ok


def test_zero_matches_never_survive_validation():
    valid, invalid = partition_validated([_candidate(1, matchesPlayed=0), _candidate(2)])

    assert invalid == 1
    assert all(record.matches_played > 0 for record in valid)


def test_partition_validated_preserves_order():
    candidates = [_candidate(3), _candidate(1, age=70), _candidate(2), _candidate(5)]

    valid, invalid = partition_validated(candidates)

    assert [record.id for record in valid] == [3, 2, 5]
    assert invalid == 1


def test_dedupe_by_id_keeps_first_seen():
    valid, _ = partition_validated([
        _candidate(2, name="First"),
        _candidate(1),
        _candidate(2, name="Second"),
        _candidate(1, name="Again"),
        _candidate(9),
    ])

    kept, removed = dedupe_by_id(valid)

    assert [record.id for record in kept] == [2, 1, 9]
    assert kept[0].name == "First"
    assert kept[1].name == "Player 1"
    assert removed == 2


def test_dedupe_by_id_is_idempotent():
    valid, _ = partition_validated([_candidate(1), _candidate(1), _candidate(2)])

    once, _ = dedupe_by_id(valid)
    twice, removed = dedupe_by_id(once)

    assert twice == once
    assert removed == 0


def test_clean_records_underage_and_duplicate_scenario():
    text = json.dumps([
        _payload(1, age=10),
        _payload(2),
        _payload(2, name="Someone Else"),
    ])

    clean = clean_records(decode_players(text))
    counters = clean.counters

    assert counters.parsing_errors == 0
    assert counters.invalid_count == 1
    assert counters.duplicates_removed == 1
    assert counters.total_valid == 1
    assert counters.total_parsed == 3
    assert clean.players[0].name == "Player 2"


def test_clean_records_counter_invariants():
    missing_league = _payload(8)
    del missing_league["league"]
    text = json.dumps([
        _payload(1),
        "not a player",
        missing_league,
        _payload(2, position="Winger"),
        _payload(3, club=None),
        _payload(4, matchesPlayed=0),
        _payload(1, name="Duplicate"),
        _payload(5),
        None,
    ])

    clean = clean_records(decode_players(text))
    counters = clean.counters

    assert counters.total_parsed == 9
    assert counters.parsing_errors == 3
    assert counters.decoded == counters.total_parsed - counters.parsing_errors
    rule_valid = counters.decoded - counters.invalid_count
    assert counters.invalid_count == 3
    assert rule_valid == counters.total_valid + counters.duplicates_removed
    assert counters.total_valid == len(clean.players) == 2


def test_load_and_clean_reads_file(tmp_path: Path):
    path = tmp_path / "players.json"
    path.write_text(json.dumps([_payload(1), _payload(2, age=99)]), encoding="utf-8")

    clean = load_and_clean(path)

    assert clean.counters.total_valid == 1
    assert clean.counters.invalid_count == 1
