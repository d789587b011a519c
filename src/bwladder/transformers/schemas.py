"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Pydantic envelopes for the response shapes the mappers rely on.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import UnexpectedAPIResponseError

M = TypeVar("M", bound=BaseModel)


class _Response(BaseModel):
    """Permissive base: unknown upstream fields are kept, not rejected."""

    model_config = ConfigDict(extra="allow")


def parse_response(model: type[M], payload: Any, *, what: str) -> M:
    """Validate ``payload`` against ``model`` or raise ``UnexpectedAPIResponseError``."""
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise UnexpectedAPIResponseError(
            f"Unexpected {what} response: {e.error_count()} validation error(s): {e}"
        ) from e


class GatewayStatus(_Response):
    is_official: bool = True
    name: str
    region: str
    online_users: int = 0


class GameModeInfo(_Response):
    name: str


class LeaderboardInfo(_Response):
    benefactor_id: int = 0
    gamemode_id: int
    gateway_id: int
    id: int
    last_update_time: int
    name: str
    next_update_time: int
    program_id: str = ""
    season_id: int
    season_name: str = ""


class LeaderboardResponse(_Response):
    gamemodes: dict[str, GameModeInfo]
    gateways: dict[str, GatewayStatus] = Field(default_factory=dict)
    leaderboards: dict[str, LeaderboardInfo]
    matchmaked_current_season: int


class LeaderboardEntityResponse(_Response):
    columns: list[str]
    rows: list[list[Any]]


class RankByToonEntry(_Response):
    rank: int
    last_rank: int
    gateway_id: int
    points: int
    wins: int
    losses: int
    disconnects: int
    name: str
    battletag: str
    avatar: str
    feature_stat: str
    rating: int
    bucket: int


class RankByToonResponse(_Response):
    aurora_id: int = 0
    leaderboard_id: int = 0
    toons: list[RankByToonEntry] = Field(default_factory=list)


class MapAttributes(_Response):
    map_candidate: int = 0
    map_description: str = ""
    map_era: int = 0
    map_height: int
    map_width: int
    map_path: str = "/"
    map_version: int = 0
    map_name: str
    replay_humans: int = 0
    replay_max_players: int = 0
    replay_min_players: int = 0
    replay_opponents: int = 0
    season_id: int = 0


class MapEntry(_Response):
    attribute: MapAttributes
    content_size: int
    content_type: str
    md5: str
    modified_epoch: int
    name: str
    url: str


class PlayerInfoResponse(_Response):
    replays: list[dict[str, Any]] = Field(default_factory=list)


class SearchEntry(_Response):
    avatar: str = ""
    battletag: str
    gateway_id: int
    last_rank: int = 0
    name: str
    points: int = 0
    rank: int = 0


class RaceMapStats(_Response):
    total_games: int = 0
    total_wins: int = 0
    total_global_games: int = 0
    total_global_wins: int = 0


class MapStatsResponse(_Response):
    # game mode id -> season -> map md5 -> race name -> stats
    map_stat: dict[str, dict[str, dict[str, dict[str, RaceMapStats]]]] = Field(
        default_factory=dict
    )


class MatchMakedStatsEntry(_Response):
    toon: str
    toon_guid: int = 0
    season_id: int
    game_mode_id: int
    bucket: int
    rating: int = 0
    highest_rating: int = 0
    points: int = 0
    highest_points: int = 0
    wins: int = 0
    losses: int = 0
    disconnects: int = 0
    win_streak: int = 0
    loss_streak: int = 0


class ToonEntry(_Response):
    guid: int
    toon: str = ""
    games_last_week: int = 0


class ProfileEntry(_Response):
    toon_guid: int
    toon: str = ""
    title: str = ""
    description: str = ""
    avatar_id: str = ""


class ProfileResponse(_Response):
    aurora_id: int = 0
    battle_tag: str = ""
    country_code: str = ""
    account_flags: str | None = None
    matchmaked_current_season: int = 0
    # gateway id -> toon -> toon guid
    toon_guid_by_gateway: dict[str, dict[str, int]] = Field(default_factory=dict)
    matchmaked_stats: list[MatchMakedStatsEntry] = Field(default_factory=list)
    toons: list[ToonEntry] = Field(default_factory=list)
    # null when none of the toons are ranked
    profiles: list[ProfileEntry] | None = None
    game_results: list[Any] = Field(default_factory=list)
