"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Replays, the ladder map pool, player search and per-map statistics.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from ..errors import UnexpectedAPIResponseError
from ..models.common import GAME_MODE_ID_1V1, GameMode, Race, game_mode_from_id, normalize_race
from ..models.maps import GameMap, MapStats
from ..models.replay import Replay, Replays
from ..models.search import PlayerSearchResult
from .schemas import (
    MapEntry,
    MapStatsResponse,
    PlayerInfoResponse,
    SearchEntry,
    parse_response,
)

logger = logging.getLogger("bwladder.transformers")

MapStatsTree = dict[GameMode, dict[int, dict[str, dict[Race, MapStats]]]]


def _require_list(response: Any, what: str) -> list[Any]:
    if not isinstance(response, list):
        raise UnexpectedAPIResponseError(
            f"Unexpected {what} response type: {type(response).__name__}"
        )
    return response


def replays_from_response(response: Any) -> Replays:
    parsed = parse_response(PlayerInfoResponse, response, what="match player info")
    replays: list[Replay] = []
    for raw in parsed.replays:
        # Slots without an uploaded replay carry no url.
        url = raw.get("url")
        if not url:
            continue
        try:
            created = int(raw["create_time"])
        except (KeyError, TypeError, ValueError) as e:
            raise UnexpectedAPIResponseError(f"Replay {url} has no valid create_time") from e
        replays.append(Replay(url=url, timestamp=datetime.fromtimestamp(created, tz=timezone.utc)))
    return Replays(replays)


def maps_from_response(response: Any) -> list[GameMap]:
    maps: list[GameMap] = []
    for raw in _require_list(response, "map pool"):
        entry = parse_response(MapEntry, raw, what="map pool")
        attr = entry.attribute
        maps.append(
            GameMap(
                candidate=attr.map_candidate,
                description=attr.map_description,
                era=attr.map_era,
                height=attr.map_height,
                width=attr.map_width,
                path=attr.map_path,
                version=attr.map_version,
                replay_humans=attr.replay_humans,
                replay_max_players=attr.replay_max_players,
                replay_min_players=attr.replay_min_players,
                replay_opponents=attr.replay_opponents,
                season_id=attr.season_id,
                content_size=entry.content_size,
                content_type=entry.content_type,
                md5=entry.md5,
                modified=datetime.fromtimestamp(entry.modified_epoch, tz=timezone.utc),
                file_name=entry.name,
                display_name=attr.map_name,
                url=entry.url,
            )
        )
    return maps


def player_search_results_from_response(response: Any) -> list[PlayerSearchResult]:
    results: list[PlayerSearchResult] = []
    for raw in _require_list(response, "player search"):
        entry = parse_response(SearchEntry, raw, what="player search")
        results.append(
            PlayerSearchResult(
                avatar=entry.avatar,
                battletag=entry.battletag,
                gateway_id=entry.gateway_id,
                last_rank=entry.last_rank,
                name=entry.name,
                points=entry.points,
                rank=entry.rank,
            )
        )
    return results


def map_stats_from_response(response: Any) -> MapStatsTree:
    """
    Nest per-race map statistics as ``game mode -> season -> map md5 -> race``.

    Game modes other than 1v1 are skipped with a warning.
    """
    parsed = parse_response(MapStatsResponse, response, what="map stats")
    tree: MapStatsTree = {}

    for mode_id, seasons in parsed.map_stat.items():
        if mode_id != str(GAME_MODE_ID_1V1):
            logger.warning("Unknown game mode id %s in map stats, skipping", mode_id)
            continue
        game_mode = game_mode_from_id(GAME_MODE_ID_1V1)

        for season, maps in seasons.items():
            try:
                season_id = int(season)
            except ValueError as e:
                raise UnexpectedAPIResponseError(f"Invalid season in map stats: {season!r}") from e
            by_map = tree.setdefault(game_mode, {}).setdefault(season_id, {})

            for map_id, races in maps.items():
                by_map[map_id] = {
                    normalize_race(race): MapStats(
                        map_id=map_id,
                        games=stats.total_games,
                        wins=stats.total_wins,
                        global_games=stats.total_global_games,
                        global_wins=stats.total_global_wins,
                    )
                    for race, stats in races.items()
                }
    return tree
