"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Match history records.

Each record is a single-key object ``{match_id: {...}}``. Its ``players``
list holds one or two single-key ``{player_id: {...}}`` objects; game info
and game results are duplicated across them and either copy may be
missing. Records where neither copy is present cannot be reconciled and
raise ``KnownUnreconcilableEntityError`` so callers can skip that record
alone.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from ..errors import KnownUnreconcilableEntityError, UnexpectedAPIResponseError
from ..models.common import (
    bucket_to_tier,
    game_speed_from_id,
    normalize_game_result,
    normalize_race,
    tileset_from_id,
)
from ..models.match import Match, MatchMap, MatchPlayer, MatchPlayerProfileInfo, MatchPoints

logger = logging.getLogger("bwladder.transformers")


def _single_entry(obj: Any, what: str) -> tuple[str, dict[str, Any]]:
    if not isinstance(obj, dict) or len(obj) != 1:
        raise UnexpectedAPIResponseError(f"{what} object does not have exactly one key")
    key, value = next(iter(obj.items()))
    if not isinstance(value, dict):
        raise UnexpectedAPIResponseError(f"{what} {key!r} is not an object")
    return key, value


def _int(value: Any, field: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise UnexpectedAPIResponseError(f"Field {field!r} is not an integer: {value!r}") from e


def _players(info: dict[str, Any]) -> list[dict[str, Any]]:
    raw = info.get("players")
    if not isinstance(raw, list) or not raw:
        raise UnexpectedAPIResponseError("Match has no players")
    if len(raw) > 2:
        raise UnexpectedAPIResponseError(f"Match has {len(raw)} players, expected at most 2")
    return [_single_entry(p, "Player")[1] for p in raw]


def _first_present(players: list[dict[str, Any]], key: str) -> Any:
    for player in players:
        value = player.get(key)
        if value is not None:
            return value
    return None


def _profile_info(player: dict[str, Any] | None) -> MatchPlayerProfileInfo | None:
    if player is None:
        return None
    score = player.get("score") or {}
    attributes = player.get("info_attributes") or {}
    try:
        return MatchPlayerProfileInfo(
            aurora_id=_int(player.get("aurora_id"), "aurora_id"),
            avatar_url=str(player.get("avatar_url", "")),
            gateway_id=_int(player.get("gateway_id"), "gateway_id"),
            battle_tag=attributes.get("player_battle_tag"),
            region=attributes.get("player_region"),
            points=MatchPoints(
                previous=_int(score["base"], "score.base"),
                delta=_int(score["delta"], "score.delta"),
                previous_tier=bucket_to_tier(score["bucket_old"]),
                new_tier=bucket_to_tier(score["bucket_new"]),
                win_streak=_int(score["win_streak"], "score.win_streak"),
            ),
        )
    except KeyError as e:
        raise UnexpectedAPIResponseError(f"Player score is missing {e.args[0]!r}") from e


def _match_player(
    toon: str, result: Any, player: dict[str, Any] | None
) -> MatchPlayer:
    if not isinstance(result, dict):
        raise UnexpectedAPIResponseError(f"Game result for {toon!r} is not an object")
    attributes = result.get("attributes") or {}
    if not attributes.get("race"):
        raise UnexpectedAPIResponseError(f"Player {toon!r} has no race attribute")
    if not attributes.get("team"):
        raise UnexpectedAPIResponseError(f"Player {toon!r} has no team attribute")

    return MatchPlayer(
        player_index=_int(attributes.get("gPlayerData_idx"), "gPlayerData_idx"),
        race=normalize_race(attributes["race"]),
        toon=toon,
        team=_int(attributes["team"], "team"),
        is_computer=bool(result.get("is_computer", False)),
        result=normalize_game_result(result.get("result")),
        profile_info=_profile_info(player),
    )


def _match_players(players: list[dict[str, Any]]) -> list[MatchPlayer]:
    game_results = _first_present(players, "game_result")
    if game_results is None:
        raise KnownUnreconcilableEntityError("Game results are missing")

    # An empty toon key shows up occasionally and carries nothing.
    results = {toon: r for toon, r in game_results.items() if toon != ""}
    if len(results) != 2:
        raise UnexpectedAPIResponseError(
            f"Game result object has {len(results)} players, expected 2"
        )

    by_name = {p.get("name"): p for p in players}
    return [_match_player(toon, r, by_name.get(toon)) for toon, r in results.items()]


def match_from_response(
    record: Any, requested_toon: str, requested_gateway_id: int
) -> Match | None:
    """
    Map one match history record.

    Returns None for games that are not 1v1. Raises
    ``KnownUnreconcilableEntityError`` when the record lacks game info or
    game results and ``UnexpectedAPIResponseError`` on any other shape
    violation.
    """
    match_id, info = _single_entry(record, "Match")
    players = _players(info)

    game_info = _first_present(players, "game_info")
    if game_info is None:
        raise KnownUnreconcilableEntityError("Game info is missing")
    attributes = game_info.get("attributes") or {}

    if _int(attributes.get("players_max"), "players_max") != 2:
        logger.warning("Match %s is not a 1v1 match, skipping", match_id)
        return None

    created = info.get("match_created")
    timestamp = (
        datetime.fromtimestamp(_int(created, "match_created"), tz=timezone.utc)
        if created is not None
        else None
    )

    return Match(
        id=match_id,
        game_id=_int(game_info.get("id"), "game_info.id"),
        name=str(game_info.get("name", "")),
        timestamp=timestamp,
        closed_slots=_int(attributes.get("closed_slots"), "closed_slots"),
        flags=str(attributes.get("flags", "")),
        game_speed=game_speed_from_id(attributes.get("game_speed")),
        host_name=str(attributes.get("host_name", "")),
        net_turn_rate=_int(attributes.get("net_turn_rate"), "net_turn_rate"),
        map=MatchMap(
            crc=_int(attributes.get("map_crc"), "map_crc"),
            file_name=str(attributes.get("map_file_name", "")),
            file_size=_int(attributes.get("map_file_size"), "map_file_size"),
            height=_int(attributes.get("map_height"), "map_height"),
            width=_int(attributes.get("map_width"), "map_width"),
            md5=str(attributes.get("map_md5", "")),
            display_name=str(attributes.get("map_name", "")),
            tileset=tileset_from_id(_int(attributes.get("map_tile_set"), "map_tile_set")),
        ),
        players=_match_players(players),
        requested_toon=requested_toon,
        requested_gateway_id=requested_gateway_id,
    )


def matches_from_response(
    response: Any, requested_toon: str, requested_gateway_id: int
) -> list[Match]:
    """Map a whole page, skipping records that cannot be reconciled."""
    if not isinstance(response, list):
        raise UnexpectedAPIResponseError(
            f"Unexpected match history response type: {type(response).__name__}"
        )
    matches: list[Match] = []
    for record in response:
        try:
            match = match_from_response(record, requested_toon, requested_gateway_id)
        except KnownUnreconcilableEntityError as e:
            logger.warning("Skipping unreconcilable match record: %s", e)
            continue
        if match is not None:
            matches.append(match)
    return matches
