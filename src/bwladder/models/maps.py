"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: models/maps.py.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class GameMap:
    """One map of the current 1v1 ladder pool."""

    candidate: int
    description: str
    era: int
    height: int
    width: int
    path: str
    version: int
    replay_humans: int
    replay_max_players: int
    replay_min_players: int
    replay_opponents: int
    season_id: int
    content_size: int
    content_type: str
    md5: str
    modified: datetime
    file_name: str
    display_name: str
    url: str


@dataclass(frozen=True, slots=True)
class MapStats:
    """Per-race results of one player on one map, keyed by map md5."""

    map_id: str
    games: int
    wins: int
    global_games: int
    global_wins: int
