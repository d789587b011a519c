"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Enumerated values reported by the upstream API and helpers to normalize them.
"""

from __future__ import annotations

import logging
from typing import Literal, TypeAlias

from ..errors import UnexpectedAPIResponseError

logger = logging.getLogger("bwladder.models")

Tier: TypeAlias = Literal["S", "A", "B", "C", "D", "E", "F", "Unranked"]
Race: TypeAlias = Literal["terran", "protoss", "zerg", "random"]
FeaturedRace: TypeAlias = Literal["terran", "protoss", "zerg"]
GameResult: TypeAlias = Literal["win", "loss", "draw", "undecided", "unknown"]
GameSpeed: TypeAlias = Literal[
    "fastest", "faster", "fast", "normal", "slow", "slower", "slowest", "unknown"
]
MapTileset: TypeAlias = Literal[
    "badlands",
    "space_platform",
    "installation",
    "ashworld",
    "jungle",
    "desert",
    "arctic",
    "twilight",
]
GameMode: TypeAlias = Literal["1v1"]
Region: TypeAlias = Literal["usw", "use", "eu", "asia", "kr", "global"]

GAME_MODE_ID_1V1 = 1

_TIERS_BY_BUCKET: dict[int, Tier] = {
    7: "S",
    6: "A",
    5: "B",
    4: "C",
    3: "D",
    2: "E",
    1: "F",
    0: "Unranked",
}

_TILESETS: tuple[MapTileset, ...] = (
    "badlands",
    "space_platform",
    "installation",
    "ashworld",
    "jungle",
    "desert",
    "arctic",
    "twilight",
)

_GAME_SPEEDS: dict[int, GameSpeed] = {
    6: "fastest",
    5: "faster",
    4: "fast",
    3: "normal",
    2: "slow",
    1: "slower",
    0: "slowest",
}

_RACES: dict[str, Race] = {"p": "protoss", "t": "terran", "z": "zerg", "r": "random"}

_RESULTS: dict[str, GameResult] = {
    "w": "win",
    "l": "loss",
    "d": "draw",
    "u": "undecided",
}


def bucket_to_tier(bucket: int) -> Tier:
    try:
        return _TIERS_BY_BUCKET[int(bucket)]
    except (KeyError, TypeError, ValueError) as e:
        raise UnexpectedAPIResponseError(f"Unknown bucket: {bucket!r}") from e


def tileset_from_id(tileset_id: int) -> MapTileset:
    if isinstance(tileset_id, int) and 0 <= tileset_id < len(_TILESETS):
        return _TILESETS[tileset_id]
    raise UnexpectedAPIResponseError(f"Unknown tileset id: {tileset_id!r}")


def game_speed_from_id(game_speed_id: str | int) -> GameSpeed:
    """Map a game speed id; some custom maps report ids outside the known set."""
    try:
        speed = _GAME_SPEEDS.get(int(game_speed_id))
    except (TypeError, ValueError):
        speed = None
    if speed is None:
        logger.warning('Unknown game speed id: %r, defaulting to "unknown"', game_speed_id)
        return "unknown"
    return speed


def normalize_race(value: str) -> Race:
    race = _RACES.get(value[:1].lower()) if isinstance(value, str) else None
    if race is None:
        raise UnexpectedAPIResponseError(f"Received invalid race from API: {value!r}")
    return race


def normalize_game_result(value: str) -> GameResult:
    result = _RESULTS.get(value[:1].lower()) if isinstance(value, str) else None
    if result is None:
        raise UnexpectedAPIResponseError(
            f"Received invalid game result from API: {value!r}"
        )
    return result


def game_mode_id(game_mode: GameMode) -> int:
    if game_mode == "1v1":
        return GAME_MODE_ID_1V1
    raise UnexpectedAPIResponseError(f"Unknown game mode: {game_mode!r}")


def game_mode_from_id(mode_id: int) -> GameMode:
    if mode_id == GAME_MODE_ID_1V1:
        return "1v1"
    raise UnexpectedAPIResponseError(f"Received invalid game mode id from API: {mode_id!r}")
