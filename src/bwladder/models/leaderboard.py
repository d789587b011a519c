"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: models/leaderboard.py.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .common import GameMode, Region, game_mode_id


@dataclass(frozen=True, slots=True)
class LeaderboardGateway:
    is_official: bool
    name: str
    region: Region
    id: int


@dataclass(frozen=True, slots=True)
class Leaderboard:
    """Game mode + gateway + season scope used by ranking and match queries."""

    benefactor_id: int
    game_mode: GameMode
    gateway: LeaderboardGateway
    id: int
    name: str
    last_update_time: datetime
    next_update_time: datetime
    program_id: str
    season_id: int
    season_name: str

    @property
    def game_mode_id(self) -> int:
        return game_mode_id(self.game_mode)
