"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: models/__init__.py.
"""

from .account import Account, MatchMakedStats, ToonProfile
from .common import (
    FeaturedRace,
    GameMode,
    GameResult,
    GameSpeed,
    MapTileset,
    Race,
    Region,
    Tier,
    bucket_to_tier,
    game_mode_from_id,
    game_mode_id,
    game_speed_from_id,
    normalize_game_result,
    normalize_race,
    tileset_from_id,
)
from .gateway import GLOBAL_GATEWAY_ID, KNOWN_GATEWAYS, Gateway
from .leaderboard import Leaderboard, LeaderboardGateway
from .maps import GameMap, MapStats
from .match import Match, MatchMap, MatchPlayer, MatchPlayerProfileInfo, MatchPoints
from .ranking import AccountRankings, Ranking
from .replay import Replay, Replays
from .search import PlayerSearchResult

__all__ = [
    "Account",
    "AccountRankings",
    "FeaturedRace",
    "GLOBAL_GATEWAY_ID",
    "GameMap",
    "GameMode",
    "GameResult",
    "GameSpeed",
    "Gateway",
    "KNOWN_GATEWAYS",
    "Leaderboard",
    "LeaderboardGateway",
    "MapStats",
    "MapTileset",
    "Match",
    "MatchMakedStats",
    "MatchMap",
    "MatchPlayer",
    "MatchPlayerProfileInfo",
    "MatchPoints",
    "PlayerSearchResult",
    "Race",
    "Ranking",
    "Region",
    "Replay",
    "Replays",
    "Tier",
    "ToonProfile",
    "bucket_to_tier",
    "game_mode_from_id",
    "game_mode_id",
    "game_speed_from_id",
    "normalize_game_result",
    "normalize_race",
    "tileset_from_id",
]
