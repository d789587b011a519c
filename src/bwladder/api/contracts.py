"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Endpoint contract shared by the raw API and the caching facade.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, TypeAlias

from ..errors import InvalidInputError

JSONValue: TypeAlias = Any


class ProfileMask(str, Enum):
    """Field masks accepted by the profile endpoint; each selects a response shape."""

    MM_GAME_LOADING = "scr_mmgameloading"
    MM_TOON_INFO = "scr_mmtooninfo"
    TOON_INFO = "scr_tooninfo"
    PROFILE = "scr_profile"

    @classmethod
    def coerce(cls, value: "ProfileMask | str") -> "ProfileMask":
        """Resolve a mask from its value, rejecting unknown masks."""
        if isinstance(value, ProfileMask):
            return value
        try:
            return cls(value)
        except ValueError as e:
            known = ", ".join(m.value for m in cls)
            raise InvalidInputError(
                f"Unknown profile mask '{value}' (expected one of: {known})"
            ) from e


class SCApiProtocol(Protocol):
    """One coroutine per logical upstream endpoint, each returning decoded JSON."""

    async def gateway(self) -> JSONValue: ...

    async def classic_files_global_maps_1v1(self) -> JSONValue: ...

    async def leaderboard(self) -> JSONValue: ...

    async def leaderboard_entity(
        self, leaderboard_id: int, offset: int, length: int
    ) -> JSONValue: ...

    async def leaderboard_name_search(
        self, leaderboard_id: int, toon: str
    ) -> JSONValue: ...

    async def leaderboard_rank_by_toon(
        self, leaderboard_id: int, toon: str, gateway: int
    ) -> JSONValue: ...

    async def map_stats_by_toon(self, toon: str, gateway: int) -> JSONValue: ...

    async def match_maker_game_info_by_toon(
        self,
        toon: str,
        gateway: int,
        game_mode: int,
        season: int,
        offset: int,
        limit: int,
    ) -> JSONValue: ...

    async def match_maker_game_info_player_info(self, match_id: str) -> JSONValue: ...

    async def aurora_profile_by_toon(
        self, toon: str, gateway: int, mask: ProfileMask
    ) -> JSONValue: ...
