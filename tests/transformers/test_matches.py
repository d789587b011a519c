from __future__ import annotations

from datetime import datetime, timezone

import pytest

from bwladder.errors import KnownUnreconcilableEntityError, UnexpectedAPIResponseError
from bwladder.transformers import match_from_response, matches_from_response


def _game_info(game_id: int, players_max: int = 2) -> dict:
    return {
        "id": str(game_id),
        "name": f"game {game_id}",
        "attributes": {
            "closed_slots": "6",
            "flags": "0x0",
            "game_speed": "6",
            "host_name": "dex",
            "map_crc": "123456",
            "map_file_name": "Polypoid.scx",
            "map_file_size": "65536",
            "map_height": "128",
            "map_width": "128",
            "map_md5": "abcdef",
            "map_name": "Polypoid 1.65",
            "map_tile_set": "7",
            "net_turn_rate": "24",
            "players_max": str(players_max),
        },
    }


def _game_result() -> dict:
    return {
        "": {"attributes": {}, "is_computer": False, "result": ""},
        "dex": {
            "attributes": {"race": "Zerg", "team": "1", "gPlayerData_idx": "0"},
            "is_computer": False,
            "result": "win",
        },
        "bob": {
            "attributes": {"race": "Protoss", "team": "2", "gPlayerData_idx": "1"},
            "is_computer": False,
            "result": "loss",
        },
    }


def _player(name: str, gateway_id: int, *, game_info=None, game_result=None) -> dict:
    player = {
        "aurora_id": 42 if name == "dex" else 43,
        "avatar_url": "",
        "gateway_id": gateway_id,
        "info_attributes": {"player_battle_tag": f"{name}#1", "player_region": "us"},
        "name": name,
        "score": {"base": 2000, "delta": 15, "bucket_old": 6, "bucket_new": 6, "win_streak": 2},
    }
    if game_info is not None:
        player["game_info"] = game_info
    if game_result is not None:
        player["game_result"] = game_result
    return player


def match_record(
    match_id: str,
    game_id: int,
    *,
    players_max: int = 2,
    with_game_info: bool = True,
    with_game_result: bool = True,
) -> dict:
    info = _game_info(game_id, players_max) if with_game_info else None
    result = _game_result() if with_game_result else None
    return {
        match_id: {
            "match_created": "1700000000",
            "players": [
                {"p1": _player("dex", 10, game_info=info, game_result=result)},
                {"p2": _player("bob", 20)},
            ],
        }
    }


def test_maps_a_complete_record():
    match = match_from_response(match_record("m-1", 9001), "dex", 10)

    assert match is not None
    assert match.id == "m-1"
    assert match.game_id == 9001
    assert match.timestamp == datetime.fromtimestamp(1700000000, tz=timezone.utc)
    assert match.game_speed == "fastest"
    assert match.map.tileset == "twilight"
    assert match.map.display_name == "Polypoid 1.65"
    assert [p.toon for p in match.players] == ["dex", "bob"]

    me = match.this_player
    assert me is not None and me.race == "zerg" and me.result == "win"
    assert me.profile_info is not None and me.profile_info.points.previous_tier == "A"
    assert match.opponent is not None and match.opponent.toon == "bob"
    assert match.opponent.profile_info is not None
    assert match.opponent.profile_info.gateway_id == 20


def test_game_info_from_second_player_is_used():
    record = match_record("m-2", 1, with_game_info=False)
    record["m-2"]["players"][1]["p2"]["game_info"] = _game_info(77)

    match = match_from_response(record, "dex", 10)

    assert match is not None and match.game_id == 77


def test_missing_game_info_is_known_unreconcilable():
    with pytest.raises(KnownUnreconcilableEntityError):
        match_from_response(match_record("m", 1, with_game_info=False), "dex", 10)


def test_missing_game_result_is_known_unreconcilable():
    with pytest.raises(KnownUnreconcilableEntityError):
        match_from_response(match_record("m", 1, with_game_result=False), "dex", 10)


def test_non_1v1_match_is_skipped(caplog):
    with caplog.at_level("WARNING", logger="bwladder.transformers"):
        assert match_from_response(match_record("m", 1, players_max=4), "dex", 10) is None
    assert "not a 1v1" in caplog.text


def test_multi_key_record_is_unexpected():
    record = {**match_record("a", 1), **match_record("b", 2)}
    with pytest.raises(UnexpectedAPIResponseError):
        match_from_response(record, "dex", 10)


def test_unknown_race_is_unexpected():
    record = match_record("m", 1)
    record["m"]["players"][0]["p1"]["game_result"]["dex"]["attributes"]["race"] = "Xel'Naga"
    with pytest.raises(UnexpectedAPIResponseError, match="Xel'Naga"):
        match_from_response(record, "dex", 10)


def test_page_mapping_skips_only_unreconcilable_records():
    page = [
        match_record("a", 1),
        match_record("b", 2, with_game_result=False),
        match_record("c", 3),
    ]

    matches = matches_from_response(page, "dex", 10)

    assert [m.id for m in matches] == ["a", "c"]


def test_empty_game_info_counts_as_present():
    record = match_record("m", 1, with_game_info=False)
    record["m"]["players"][0]["p1"]["game_info"] = {}
    record["m"]["players"][1]["p2"]["game_info"] = _game_info(1)

    with pytest.raises(UnexpectedAPIResponseError, match="players_max"):
        match_from_response(record, "dex", 10)


def test_empty_game_result_counts_as_present():
    record = match_record("m", 1)
    record["m"]["players"][0]["p1"]["game_result"] = {}
    record["m"]["players"][1]["p2"]["game_result"] = _game_result()

    with pytest.raises(UnexpectedAPIResponseError, match="0 players"):
        match_from_response(record, "dex", 10)
