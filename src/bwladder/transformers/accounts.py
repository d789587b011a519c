"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Profile responses, one mapper per profile mask.

Every mask returns the same account header (aurora id, battle tag, flags,
current season) and the toon guid table. Richer masks add games played
last week, ladder profile data and recent game results on top.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from ..api.contracts import ProfileMask
from ..errors import UnexpectedAPIResponseError
from ..models.account import Account, MatchMakedStats, ToonProfile
from ..models.common import GAME_MODE_ID_1V1, bucket_to_tier, game_mode_from_id
from .schemas import ProfileEntry, ProfileResponse, ToonEntry, parse_response

logger = logging.getLogger("bwladder.transformers")


def _matchmaked_stats(parsed: ProfileResponse) -> dict[str, list[MatchMakedStats]]:
    by_toon: dict[str, list[MatchMakedStats]] = {}
    for entry in parsed.matchmaked_stats:
        if entry.game_mode_id != GAME_MODE_ID_1V1:
            logger.warning("Unexpected game mode id %s in profile stats, skipping", entry.game_mode_id)
            continue
        by_toon.setdefault(entry.toon, []).append(
            MatchMakedStats(
                toon=entry.toon,
                toon_guid=entry.toon_guid,
                season_id=entry.season_id,
                game_mode=game_mode_from_id(entry.game_mode_id),
                tier=bucket_to_tier(entry.bucket),
                rating=entry.rating,
                highest_rating=entry.highest_rating,
                points=entry.points,
                highest_points=entry.highest_points,
                wins=entry.wins,
                losses=entry.losses,
                disconnects=entry.disconnects,
                win_streak=entry.win_streak,
                loss_streak=entry.loss_streak,
            )
        )
    return by_toon


def _toon_entries(parsed: ProfileResponse) -> dict[int, ToonEntry]:
    return {t.guid: t for t in parsed.toons}


def _profile_entries(parsed: ProfileResponse) -> dict[int, ProfileEntry]:
    return {p.toon_guid: p for p in parsed.profiles or ()}


def _toon_profiles(
    parsed: ProfileResponse, *, with_activity: bool, with_ladder_profile: bool
) -> list[ToonProfile]:
    stats = _matchmaked_stats(parsed)
    toons = _toon_entries(parsed) if with_activity else {}
    ladder_profiles = _profile_entries(parsed) if with_ladder_profile else {}

    out: list[ToonProfile] = []
    for gateway_id, toon_to_guid in parsed.toon_guid_by_gateway.items():
        for toon, guid in toon_to_guid.items():
            games_last_week: int | None = None
            if with_activity:
                entry = toons.get(guid)
                if entry is None:
                    raise UnexpectedAPIResponseError(
                        f"Toon {guid} is listed by gateway but missing from toons"
                    )
                games_last_week = entry.games_last_week

            # Unranked toons have no ladder profile.
            ladder = ladder_profiles.get(guid)
            out.append(
                ToonProfile(
                    toon=toon,
                    toon_guid=guid,
                    gateway_id=int(gateway_id),
                    matchmaked_stats=stats.get(toon, []),
                    games_last_week=games_last_week,
                    title=ladder.title if ladder else None,
                    description=ladder.description if ladder else None,
                    avatar=ladder.avatar_id if ladder else None,
                )
            )
    return out


def _account(
    mask: ProfileMask,
    toon: str,
    gateway_id: int,
    parsed: ProfileResponse,
    profiles: list[ToonProfile],
    recent_competitive_games: int | None = None,
) -> Account:
    flags = parsed.account_flags.split(",") if parsed.account_flags else []
    return Account(
        mask=mask.value,
        requested_toon=toon,
        requested_gateway_id=gateway_id,
        aurora_id=parsed.aurora_id,
        battle_tag=parsed.battle_tag,
        country_code=parsed.country_code,
        account_flags=flags,
        current_season=parsed.matchmaked_current_season,
        profiles=profiles,
        recent_competitive_games=recent_competitive_games,
    )


def _mm_game_loading(toon: str, gateway_id: int, parsed: ProfileResponse) -> Account:
    profiles = _toon_profiles(parsed, with_activity=False, with_ladder_profile=False)
    return _account(ProfileMask.MM_GAME_LOADING, toon, gateway_id, parsed, profiles)


def _mm_toon_info(toon: str, gateway_id: int, parsed: ProfileResponse) -> Account:
    profiles = _toon_profiles(parsed, with_activity=True, with_ladder_profile=False)
    return _account(ProfileMask.MM_TOON_INFO, toon, gateway_id, parsed, profiles)


def _toon_info(toon: str, gateway_id: int, parsed: ProfileResponse) -> Account:
    profiles = _toon_profiles(parsed, with_activity=True, with_ladder_profile=True)
    return _account(ProfileMask.TOON_INFO, toon, gateway_id, parsed, profiles)


def _profile(toon: str, gateway_id: int, parsed: ProfileResponse) -> Account:
    profiles = _toon_profiles(parsed, with_activity=True, with_ladder_profile=True)
    return _account(
        ProfileMask.PROFILE,
        toon,
        gateway_id,
        parsed,
        profiles,
        recent_competitive_games=len(parsed.game_results),
    )


_MAPPERS: dict[ProfileMask, Callable[[str, int, ProfileResponse], Account]] = {
    ProfileMask.MM_GAME_LOADING: _mm_game_loading,
    ProfileMask.MM_TOON_INFO: _mm_toon_info,
    ProfileMask.TOON_INFO: _toon_info,
    ProfileMask.PROFILE: _profile,
}


def account_from_profile_response(
    mask: ProfileMask | str, toon: str, gateway_id: int, response: Any
) -> Account | None:
    """Map a profile response for ``mask``; None when no account owns the toon."""
    mask = ProfileMask.coerce(mask)
    parsed = parse_response(ProfileResponse, response, what=f"profile ({mask.value})")
    if parsed.aurora_id == 0:
        return None
    return _MAPPERS[mask](toon, gateway_id, parsed)
