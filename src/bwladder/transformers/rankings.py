"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Leaderboard rows and rank-by-toon lookups.

The leaderboard entity endpoint returns a column header plus positional
rows; the mapping below is only valid for the exact column layout in
``EXPECTED_COLUMNS`` and refuses anything else.
"""

from __future__ import annotations

from typing import Any

from ..errors import UnexpectedAPIResponseError
from ..models.common import bucket_to_tier
from ..models.ranking import AccountRankings, Ranking
from .schemas import LeaderboardEntityResponse, RankByToonResponse, parse_response

EXPECTED_COLUMNS: tuple[str, ...] = (
    "rank",
    "last_rank",
    "gateway_id",
    "points",
    "wins",
    "losses",
    "disconnects",
    "toon",
    "battletag",
    "avatar",
    "feature_stat",
    "rating",
    "bucket",
)


def _int(value: Any, column: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise UnexpectedAPIResponseError(
            f"Column {column!r} is not an integer: {value!r}"
        ) from e


def _ranking_from_row(leaderboard_id: int, row: list[Any]) -> Ranking:
    if len(row) != len(EXPECTED_COLUMNS):
        raise UnexpectedAPIResponseError(
            f"Leaderboard row has {len(row)} values, expected {len(EXPECTED_COLUMNS)}"
        )
    fields = dict(zip(EXPECTED_COLUMNS, row))
    return Ranking(
        leaderboard_id=leaderboard_id,
        rank=_int(fields["rank"], "rank"),
        last_rank=_int(fields["last_rank"], "last_rank"),
        gateway_id=_int(fields["gateway_id"], "gateway_id"),
        wins=_int(fields["wins"], "wins"),
        losses=_int(fields["losses"], "losses"),
        disconnects=_int(fields["disconnects"], "disconnects"),
        toon=str(fields["toon"]),
        battletag=str(fields["battletag"]),
        avatar=str(fields["avatar"]),
        feature_race=str(fields["feature_stat"]),
        rating=_int(fields["rating"], "rating"),
        tier=bucket_to_tier(fields["bucket"]),
    )


def rankings_from_leaderboard_entity(leaderboard_id: int, response: Any) -> list[Ranking]:
    parsed = parse_response(
        LeaderboardEntityResponse, response, what="leaderboard entity"
    )
    if tuple(parsed.columns) != EXPECTED_COLUMNS:
        raise UnexpectedAPIResponseError(
            f"Unexpected leaderboard columns: {parsed.columns!r}"
        )
    return [_ranking_from_row(leaderboard_id, row) for row in parsed.rows]


def account_rankings_from_rank_by_toon(
    toon: str, gateway_id: int, response: Any
) -> AccountRankings | None:
    """None when the toon has no account or no rankings on the leaderboard."""
    parsed = parse_response(RankByToonResponse, response, what="rank by toon")
    if not parsed.aurora_id or not parsed.toons:
        return None

    rankings = [
        Ranking(
            leaderboard_id=parsed.leaderboard_id,
            rank=entry.rank,
            last_rank=entry.last_rank,
            gateway_id=entry.gateway_id,
            wins=entry.wins,
            losses=entry.losses,
            disconnects=entry.disconnects,
            toon=entry.name,
            battletag=entry.battletag,
            avatar=entry.avatar,
            feature_race=entry.feature_stat,
            # This endpoint reports the ladder rating in ``points``.
            rating=entry.points,
            tier=bucket_to_tier(entry.bucket),
        )
        for entry in parsed.toons
    ]
    return AccountRankings(
        aurora_id=parsed.aurora_id,
        leaderboard_id=parsed.leaderboard_id,
        rankings=rankings,
        requested_toon=toon,
        requested_gateway_id=gateway_id,
    )
