"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Account and profile records produced from the profile endpoint.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .common import GameMode, Tier


@dataclass(frozen=True, slots=True)
class MatchMakedStats:
    """Ladder record of one toon for one season and game mode."""

    toon: str
    toon_guid: int
    season_id: int
    game_mode: GameMode
    tier: Tier
    rating: int
    highest_rating: int
    points: int
    highest_points: int
    wins: int
    losses: int
    disconnects: int
    win_streak: int
    loss_streak: int

    def __str__(self) -> str:
        return f"MMR: {self.rating} | Wins: {self.wins} | Losses: {self.losses}"


@dataclass(frozen=True, slots=True)
class ToonProfile:
    """
    One toon of an account.

    Optional fields are only populated by the richer profile masks.
    """

    toon: str
    toon_guid: int
    gateway_id: int
    matchmaked_stats: list[MatchMakedStats] = field(default_factory=list)
    games_last_week: int | None = None
    title: str | None = None
    description: str | None = None
    avatar: str | None = None


@dataclass(frozen=True, slots=True)
class Account:
    """An account (aurora id) and the toons it owns across gateways."""

    mask: str
    requested_toon: str
    requested_gateway_id: int
    aurora_id: int
    battle_tag: str
    country_code: str
    account_flags: list[str]
    current_season: int
    profiles: list[ToonProfile] = field(default_factory=list)
    recent_competitive_games: int | None = None

    @property
    def requested_profile(self) -> ToonProfile | None:
        for profile in self.profiles:
            if (
                profile.toon == self.requested_toon
                and profile.gateway_id == self.requested_gateway_id
            ):
                return profile
        return None
