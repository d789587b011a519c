from __future__ import annotations

import pytest

from bwladder.api import ProfileMask
from bwladder.errors import InvalidInputError, UnexpectedAPIResponseError
from bwladder.models import Gateway
from bwladder.transformers import (
    EXPECTED_COLUMNS,
    account_from_profile_response,
    account_rankings_from_rank_by_toon,
    gateways_from_response,
    leaderboards_from_response,
    map_stats_from_response,
    maps_from_response,
    player_search_results_from_response,
    rankings_from_leaderboard_entity,
    replays_from_response,
)

LEADERBOARD_RESPONSE = {
    "gamemodes": {"1": {"name": "1v1"}},
    "gateways": {
        "10": {"is_official": True, "name": "U.S. West", "region": "usw"},
        "30": {"is_official": True, "name": "Korea", "region": "kr"},
    },
    "leaderboards": {
        "12960": {
            "benefactor_id": "0",
            "gamemode_id": 1,
            "gateway_id": 0,
            "id": 12960,
            "last_update_time": "1700000000",
            "name": "Global",
            "next_update_time": "1700000300",
            "program_id": "S1",
            "season_id": 20,
            "season_name": "Season 20",
        },
        "12961": {
            "benefactor_id": "0",
            "gamemode_id": 1,
            "gateway_id": 30,
            "id": 12961,
            "last_update_time": "1700000000",
            "name": "Korea",
            "next_update_time": "1700000300",
            "program_id": "S1",
            "season_id": 20,
            "season_name": "Season 20",
        },
    },
    "matchmaked_current_season": 20,
}


def _row(rank: int, toon: str, *, bucket: int = 7) -> list:
    return [rank, rank + 1, 10, 2400, 30, 10, 1, toon, f"{toon}#1", "avatar.png", "Zerg", 2400, bucket]


def test_leaderboards_include_synthetic_global_gateway():
    leaderboards = {lb.id: lb for lb in leaderboards_from_response(LEADERBOARD_RESPONSE)}

    assert leaderboards[12960].gateway.name == "Global"
    assert leaderboards[12960].gateway.region == "global"
    assert leaderboards[12960].gateway.id == 0
    assert leaderboards[12961].gateway.region == "kr"
    assert leaderboards[12961].game_mode_id == 1
    assert leaderboards[12961].next_update_time.timestamp() == 1700000300


def test_leaderboards_reject_non_1v1_modes():
    response = {**LEADERBOARD_RESPONSE, "gamemodes": {"1": {"name": "2v2"}}}
    with pytest.raises(UnexpectedAPIResponseError, match="2v2"):
        leaderboards_from_response(response)


def test_gateways_map_online_users():
    response = {"10": {"is_official": True, "name": "U.S. West", "online_users": 321, "region": "usw"}}
    assert gateways_from_response(response) == {Gateway(10, "U.S. West", "usw"): 321}


def test_rankings_require_exact_columns():
    response = {"columns": list(EXPECTED_COLUMNS), "rows": [_row(1, "dex"), _row(2, "bob", bucket=6)]}

    rankings = rankings_from_leaderboard_entity(12960, response)

    assert [r.toon for r in rankings] == ["dex", "bob"]
    assert rankings[0].rating == 2400 and rankings[0].tier == "S"
    assert rankings[1].tier == "A"
    assert rankings[0].total_games_played == 41

    shuffled = list(EXPECTED_COLUMNS)
    shuffled[0], shuffled[1] = shuffled[1], shuffled[0]
    with pytest.raises(UnexpectedAPIResponseError):
        rankings_from_leaderboard_entity(12960, {"columns": shuffled, "rows": []})


def test_rankings_reject_short_rows_and_unknown_buckets():
    with pytest.raises(UnexpectedAPIResponseError):
        rankings_from_leaderboard_entity(
            1, {"columns": list(EXPECTED_COLUMNS), "rows": [_row(1, "dex")[:-1]]}
        )
    with pytest.raises(UnexpectedAPIResponseError, match="99"):
        rankings_from_leaderboard_entity(
            1, {"columns": list(EXPECTED_COLUMNS), "rows": [_row(1, "dex", bucket=99)]}
        )


def _rank_by_toon(aurora_id: int, toons: list[dict]) -> dict:
    return {"aurora_id": aurora_id, "leaderboard_id": 12960, "toons": toons}


def _toon(name: str, gateway_id: int) -> dict:
    return {
        "rank": 5,
        "last_rank": 6,
        "gateway_id": gateway_id,
        "points": 2100,
        "wins": 20,
        "losses": 15,
        "disconnects": 0,
        "name": name,
        "battletag": "dex#1",
        "avatar": "",
        "feature_stat": "Zerg",
        "rating": 0,
        "bucket": 5,
    }


def test_account_rankings_pick_requested_toon():
    response = _rank_by_toon(42, [_toon("alt", 20), _toon("dex", 10)])

    rankings = account_rankings_from_rank_by_toon("dex", 10, response)

    assert rankings is not None
    assert rankings.requested_ranking is not None
    assert rankings.requested_ranking.toon == "dex"
    assert rankings.requested_ranking.rating == 2100
    assert rankings.requested_ranking.total_games_played == 35


def test_account_rankings_absent_player():
    assert account_rankings_from_rank_by_toon("dex", 10, _rank_by_toon(0, [])) is None
    assert account_rankings_from_rank_by_toon("dex", 10, {"aurora_id": 42, "toons": []}) is None
    assert account_rankings_from_rank_by_toon("dex", 10, {}) is None


def test_replays_skip_entries_without_url():
    response = {
        "replays": [
            {"url": "http://r/1.rep", "create_time": 1700000100},
            {"create_time": 1700000000},
            {"url": "http://r/2.rep", "create_time": 1700000000},
        ]
    }

    replays = replays_from_response(response)

    assert [r.url for r in replays.replays] == ["http://r/1.rep", "http://r/2.rep"]
    assert replays.last_replay_uploaded.url == "http://r/1.rep"
    assert replays.first_replay_uploaded.url == "http://r/2.rep"


def test_maps_coerce_string_attributes():
    response = [
        {
            "attribute": {
                "map_candidate": "0",
                "map_description": "",
                "map_era": "7",
                "map_height": "128",
                "map_width": "128",
                "map_path": "/",
                "map_version": "1",
                "map_name": "Polypoid 1.65",
                "replay_humans": "2",
                "replay_max_players": "2",
                "replay_min_players": "2",
                "replay_opponents": "1",
                "season_id": "20",
            },
            "content_size": 65536,
            "content_type": "application/octet-stream",
            "md5": "abcdef",
            "modified_epoch": 1700000000,
            "name": "Polypoid.scx",
            "url": "http://maps/polypoid.scx",
        }
    ]

    (game_map,) = maps_from_response(response)

    assert game_map.height == 128
    assert game_map.season_id == 20
    assert game_map.display_name == "Polypoid 1.65"
    assert game_map.file_name == "Polypoid.scx"


def test_player_search_results():
    response = [
        {"avatar": "", "battletag": "dex#1", "gateway_id": 10, "last_rank": 3, "name": "dex", "points": 2000, "rank": 2}
    ]
    (result,) = player_search_results_from_response(response)
    assert result.name == "dex" and result.rank == 2


def test_map_stats_nest_by_mode_season_map_and_race(caplog):
    race_stats = {"total_games": 10, "total_wins": 6, "total_global_games": 100, "total_global_wins": 50}
    response = {
        "map_stat": {
            "1": {"20": {"abcdef": {"Protoss": race_stats, "Zerg": race_stats}}},
            "2": {"20": {"abcdef": {"Protoss": race_stats}}},
        }
    }

    with caplog.at_level("WARNING", logger="bwladder.transformers"):
        tree = map_stats_from_response(response)

    assert list(tree) == ["1v1"]
    stats = tree["1v1"][20]["abcdef"]
    assert set(stats) == {"protoss", "zerg"}
    assert stats["zerg"].wins == 6
    assert stats["zerg"].map_id == "abcdef"
    assert "Unknown game mode id 2" in caplog.text


PROFILE_RESPONSE = {
    "aurora_id": 42,
    "battle_tag": "dex#1",
    "country_code": "US",
    "account_flags": "flag_a,flag_b",
    "matchmaked_current_season": 20,
    "toon_guid_by_gateway": {"10": {"dex": 1001}, "20": {"alt": 1002}},
    "matchmaked_stats": [
        {
            "toon": "dex",
            "toon_guid": 1001,
            "season_id": 20,
            "game_mode_id": 1,
            "bucket": 6,
            "rating": 2200,
            "highest_rating": 2300,
            "points": 2200,
            "highest_points": 2300,
            "wins": 30,
            "losses": 20,
            "disconnects": 1,
            "win_streak": 2,
            "loss_streak": 0,
        },
        {"toon": "dex", "season_id": 20, "game_mode_id": 2, "bucket": 1},
    ],
    "toons": [{"guid": 1001, "games_last_week": 12}, {"guid": 1002, "games_last_week": 0}],
    "profiles": [{"toon_guid": 1001, "title": "Champion", "description": "hi", "avatar_id": "av1"}],
    "game_results": [{}, {}, {}],
}


def test_account_minimal_mask():
    account = account_from_profile_response(ProfileMask.MM_GAME_LOADING, "dex", 10, PROFILE_RESPONSE)

    assert account is not None
    assert account.aurora_id == 42
    assert account.account_flags == ["flag_a", "flag_b"]
    profile = account.requested_profile
    assert profile is not None
    assert profile.toon_guid == 1001
    assert len(profile.matchmaked_stats) == 1
    assert profile.matchmaked_stats[0].tier == "A"
    assert profile.games_last_week is None
    assert account.recent_competitive_games is None


def test_account_richer_masks_add_fields():
    with_activity = account_from_profile_response("scr_mmtooninfo", "dex", 10, PROFILE_RESPONSE)
    assert with_activity is not None
    assert with_activity.requested_profile.games_last_week == 12
    assert with_activity.requested_profile.title is None

    full = account_from_profile_response(ProfileMask.PROFILE, "dex", 10, PROFILE_RESPONSE)
    assert full is not None
    assert full.requested_profile.title == "Champion"
    assert full.recent_competitive_games == 3
    alt = next(p for p in full.profiles if p.toon == "alt")
    assert alt.gateway_id == 20 and alt.title is None


def test_account_not_found_and_bad_mask():
    assert account_from_profile_response(ProfileMask.PROFILE, "dex", 10, {"aurora_id": 0}) is None
    with pytest.raises(InvalidInputError):
        account_from_profile_response("scr_nope", "dex", 10, PROFILE_RESPONSE)


def test_account_with_unknown_toon_guid_is_unexpected():
    response = {**PROFILE_RESPONSE, "toons": [{"guid": 1001, "games_last_week": 1}]}
    with pytest.raises(UnexpectedAPIResponseError):
        account_from_profile_response(ProfileMask.TOON_INFO, "dex", 10, response)
