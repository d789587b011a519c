"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Match history reconciliation.

The match history endpoint pages by offset/limit, but a full-size request
can come back with anywhere from zero to ``limit`` records. Page math is
therefore useless for termination; the player's ranking record supplies
the number of games played, which bounds how many distinct matches there
are to find. Records are deduplicated by match id because the same match
can show up on more than one page.
"""

from __future__ import annotations

import logging
from typing import AsyncIterator

from ..api.contracts import SCApiProtocol
from ..consts import MATCH_HISTORY_PAGE_SIZE
from ..errors import InvalidInputError
from ..models.leaderboard import Leaderboard
from ..models.match import Match
from ..models.ranking import Ranking
from ..transformers.matches import matches_from_response

logger = logging.getLogger("bwladder.pagination")


def _decode_page(response: object, toon: str, gateway_id: int) -> list[Match]:
    matches = matches_from_response(response, toon, gateway_id)
    # Records within a page are unordered; newest game first.
    matches.sort(key=lambda m: m.game_id, reverse=True)
    return matches


async def iter_match_history(
    api: SCApiProtocol,
    *,
    toon: str,
    gateway_id: int,
    leaderboard: Leaderboard,
    ranking: Ranking,
    limit: int | None = None,
) -> AsyncIterator[Match]:
    """
    Yield distinct matches of ``toon`` on ``leaderboard``, newest first per page.

    ``ranking`` is the player's ranking on the same leaderboard; its total
    games played is the expected number of matches. Enumeration stops when
    that many distinct matches were yielded, when ``limit`` is reached, or
    when the upstream returns an empty page. A page whose records were all
    skipped or already seen does not end the sequence.
    """
    if limit is not None and limit < 0:
        raise InvalidInputError(f"limit must be >= 0 (got {limit})")

    expected = ranking.total_games_played
    if limit is not None:
        expected = min(expected, limit)
    logger.info(
        "Expecting %s matches for %s@%s on leaderboard %s",
        expected,
        toon,
        gateway_id,
        leaderboard.id,
    )

    seen: set[str] = set()
    page = 0
    while len(seen) < expected:
        response = await api.match_maker_game_info_by_toon(
            toon,
            gateway_id,
            leaderboard.game_mode_id,
            leaderboard.season_id,
            page * MATCH_HISTORY_PAGE_SIZE,
            MATCH_HISTORY_PAGE_SIZE,
        )
        matches = _decode_page(response, toon, gateway_id)
        if not response:
            logger.info(
                "Page %s was empty, stopping at %s of %s", page, len(seen), expected
            )
            return

        for match in matches:
            if match.id in seen:
                continue
            seen.add(match.id)
            yield match
            if len(seen) >= expected:
                return
        page += 1
