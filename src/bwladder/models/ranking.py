"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: models/ranking.py.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .common import FeaturedRace, Tier


@dataclass(frozen=True, slots=True)
class Ranking:
    """A player's position and record within one leaderboard."""

    leaderboard_id: int
    rank: int
    last_rank: int
    gateway_id: int
    wins: int
    losses: int
    disconnects: int
    toon: str
    battletag: str
    avatar: str
    feature_race: FeaturedRace | str
    rating: int
    tier: Tier

    @property
    def total_games_played(self) -> int:
        return self.wins + self.losses + self.disconnects


@dataclass(frozen=True, slots=True)
class AccountRankings:
    """All rankings of the account that owns the requested toon."""

    aurora_id: int
    leaderboard_id: int
    rankings: list[Ranking] = field(default_factory=list)
    requested_toon: str = ""
    requested_gateway_id: int = 0

    @property
    def requested_ranking(self) -> Ranking | None:
        """
        Ranking of the toon/gateway pair the lookup was made with.

        None when that toon is unranked on the leaderboard.
        """
        for ranking in self.rankings:
            if (
                ranking.toon == self.requested_toon
                and ranking.gateway_id == self.requested_gateway_id
            ):
                return ranking
        return None
