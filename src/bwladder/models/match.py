"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: models/match.py.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime

from .common import GameResult, GameSpeed, MapTileset, Race, Tier

logger = logging.getLogger("bwladder.models")


@dataclass(frozen=True, slots=True)
class MatchPoints:
    previous: int
    delta: int
    previous_tier: Tier
    new_tier: Tier
    win_streak: int


@dataclass(frozen=True, slots=True)
class MatchPlayerProfileInfo:
    aurora_id: int
    avatar_url: str
    gateway_id: int
    battle_tag: str | None
    region: str | None
    points: MatchPoints


@dataclass(frozen=True, slots=True)
class MatchPlayer:
    player_index: int
    race: Race
    toon: str
    team: int
    is_computer: bool
    result: GameResult
    profile_info: MatchPlayerProfileInfo | None


@dataclass(frozen=True, slots=True)
class MatchMap:
    crc: int
    file_name: str
    file_size: int
    height: int
    width: int
    md5: str
    display_name: str
    tileset: MapTileset


@dataclass(frozen=True, slots=True)
class Match:
    """
    One completed ladder game, seen from the requesting player's side.

    ``id`` is the stable match identity used for deduplication; ``game_id``
    is the strictly increasing game sequence number used for ordering.
    """

    id: str
    game_id: int
    name: str
    timestamp: datetime | None
    closed_slots: int
    flags: str
    game_speed: GameSpeed
    host_name: str
    net_turn_rate: int
    map: MatchMap
    players: list[MatchPlayer] = field(default_factory=list)
    requested_toon: str = ""
    requested_gateway_id: int = 0

    @property
    def this_player(self) -> MatchPlayer | None:
        """The requesting player, matched by toon and gateway, else by unique toon."""
        for player in self.players:
            if (
                player.toon == self.requested_toon
                and player.profile_info is not None
                and player.profile_info.gateway_id == self.requested_gateway_id
            ):
                return player

        by_toon = [p for p in self.players if p.toon == self.requested_toon]
        if len(by_toon) == 1:
            return by_toon[0]

        logger.error(
            "Could not find player for toon %s and gateway %s in match %s",
            self.requested_toon,
            self.requested_gateway_id,
            self.id,
        )
        return None

    @property
    def opponent(self) -> MatchPlayer | None:
        me = self.this_player
        for player in self.players:
            if player is not me:
                return player
        return None
