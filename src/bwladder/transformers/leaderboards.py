"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Gateway and leaderboard listings.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from ..errors import UnexpectedAPIResponseError
from ..models.gateway import GLOBAL_GATEWAY_ID, Gateway
from ..models.leaderboard import Leaderboard, LeaderboardGateway
from .schemas import GatewayStatus, LeaderboardResponse, parse_response

_GLOBAL_GATEWAY = GatewayStatus(is_official=True, name="Global", region="global")


def _from_epoch(seconds: int) -> datetime:
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def gateways_from_response(response: Any) -> dict[Gateway, int]:
    """Map the gateway listing to ``{gateway: online users}``."""
    if not isinstance(response, dict):
        raise UnexpectedAPIResponseError(
            f"Unexpected gateway response type: {type(response).__name__}"
        )
    out: dict[Gateway, int] = {}
    for gateway_id, raw in response.items():
        status = parse_response(GatewayStatus, raw, what="gateway")
        try:
            key = Gateway(int(gateway_id), status.name, status.region)  # type: ignore[arg-type]
        except ValueError as e:
            raise UnexpectedAPIResponseError(f"Invalid gateway id: {gateway_id!r}") from e
        out[key] = status.online_users
    return out


def leaderboards_from_response(response: Any) -> list[Leaderboard]:
    parsed = parse_response(LeaderboardResponse, response, what="leaderboard")

    leaderboards: list[Leaderboard] = []
    for info in parsed.leaderboards.values():
        if info.gateway_id == GLOBAL_GATEWAY_ID:
            gateway = _GLOBAL_GATEWAY
        else:
            gateway = parsed.gateways.get(str(info.gateway_id))
            if gateway is None:
                raise UnexpectedAPIResponseError(
                    f"Leaderboard {info.id} references unknown gateway {info.gateway_id}"
                )

        game_mode = parsed.gamemodes.get(str(info.gamemode_id))
        if game_mode is None or game_mode.name != "1v1":
            name = game_mode.name if game_mode is not None else info.gamemode_id
            raise UnexpectedAPIResponseError(f"Unexpected game mode {name}")

        leaderboards.append(
            Leaderboard(
                benefactor_id=info.benefactor_id,
                game_mode="1v1",
                gateway=LeaderboardGateway(
                    is_official=gateway.is_official,
                    name=gateway.name,
                    region=gateway.region,  # type: ignore[arg-type]
                    id=info.gateway_id,
                ),
                id=info.id,
                name=info.name,
                last_update_time=_from_epoch(info.last_update_time),
                next_update_time=_from_epoch(info.next_update_time),
                program_id=info.program_id,
                season_id=info.season_id,
                season_name=info.season_name,
            )
        )
    return leaderboards


def current_season_from_response(response: Any) -> int:
    parsed = parse_response(LeaderboardResponse, response, what="leaderboard")
    return parsed.matchmaked_current_season
