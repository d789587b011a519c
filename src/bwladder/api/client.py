"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Raw endpoint client: builds paths, fetches through a connection, decodes JSON.
"""

from __future__ import annotations

import json
from urllib.parse import quote, urlencode

from ..connection.base import BroodWarConnection
from ..errors import UnexpectedAPIResponseError
from .contracts import JSONValue, ProfileMask


def _segment(value: object) -> str:
    return quote(str(value), safe="")


class SCApi:
    """Thin client over the upstream web API; one method per endpoint."""

    def __init__(self, connection: BroodWarConnection) -> None:
        self._connection = connection

    async def _get_json(self, path: str) -> JSONValue:
        text = await self._connection.fetch(path)
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise UnexpectedAPIResponseError(
                f"Invalid JSON response for '{path}': {text[:200]!r}"
            ) from e

    async def gateway(self) -> JSONValue:
        return await self._get_json("web-api/v1/gateway")

    async def classic_files_global_maps_1v1(self) -> JSONValue:
        return await self._get_json("web-api/v1/file-set/classic.files.global.maps-1v1")

    async def leaderboard(self) -> JSONValue:
        return await self._get_json("web-api/v1/leaderboard")

    async def leaderboard_entity(
        self, leaderboard_id: int, offset: int, length: int
    ) -> JSONValue:
        query = urlencode({"offset": offset, "length": length})
        return await self._get_json(
            f"web-api/v1/leaderboard/{_segment(leaderboard_id)}?{query}"
        )

    async def leaderboard_name_search(self, leaderboard_id: int, toon: str) -> JSONValue:
        return await self._get_json(
            f"web-api/v1/leaderboard-name-search/{_segment(leaderboard_id)}/{_segment(toon)}"
        )

    async def leaderboard_rank_by_toon(
        self, leaderboard_id: int, toon: str, gateway: int
    ) -> JSONValue:
        return await self._get_json(
            "web-api/v1/leaderboard-rank-by-toon/"
            f"{_segment(leaderboard_id)}/{_segment(toon)}/{_segment(gateway)}"
        )

    async def map_stats_by_toon(self, toon: str, gateway: int) -> JSONValue:
        return await self._get_json(
            f"web-api/v1/map-stats-by-toon/{_segment(toon)}/{_segment(gateway)}"
        )

    async def match_maker_game_info_by_toon(
        self,
        toon: str,
        gateway: int,
        game_mode: int,
        season: int,
        offset: int,
        limit: int,
    ) -> JSONValue:
        query = urlencode({"offset": offset, "limit": limit})
        return await self._get_json(
            "web-api/v1/matchmaker-gameinfo-by-toon/"
            f"{_segment(toon)}/{_segment(gateway)}/{_segment(game_mode)}/{_segment(season)}"
            f"?{query}"
        )

    async def match_maker_game_info_player_info(self, match_id: str) -> JSONValue:
        return await self._get_json(
            f"web-api/v1/matchmaker-gameinfo-playerinfo/{_segment(match_id)}"
        )

    async def aurora_profile_by_toon(
        self, toon: str, gateway: int, mask: ProfileMask | str
    ) -> JSONValue:
        resolved = ProfileMask.coerce(mask)
        query = urlencode({"request_flags": resolved.value})
        return await self._get_json(
            f"web-api/v2/aurora-profile-by-toon/{_segment(toon)}/{_segment(gateway)}?{query}"
        )
