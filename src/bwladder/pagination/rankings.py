"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Offset/limit pagination over a leaderboard.
"""

from __future__ import annotations

from typing import AsyncIterator

from ..api.contracts import SCApiProtocol
from ..consts import RANKINGS_PAGE_SIZE
from ..errors import InvalidInputError
from ..models.ranking import Ranking
from ..transformers.rankings import rankings_from_leaderboard_entity


async def iter_rankings(
    api: SCApiProtocol,
    leaderboard_id: int,
    *,
    begin: int = 0,
    limit: int | None = None,
) -> AsyncIterator[Ranking]:
    """
    Yield rankings of ``leaderboard_id`` starting at index ``begin``.

    Pages are requested at the protocol maximum, the last one shrunk to the
    remaining ``limit``. A page shorter than requested ends the sequence.
    """
    if begin < 0:
        raise InvalidInputError(f"begin must be >= 0 (got {begin})")
    if limit is not None and limit < 0:
        raise InvalidInputError(f"limit must be >= 0 (got {limit})")

    acquired = 0
    offset = begin
    while limit is None or acquired < limit:
        length = RANKINGS_PAGE_SIZE
        if limit is not None:
            length = min(RANKINGS_PAGE_SIZE, limit - acquired)

        response = await api.leaderboard_entity(leaderboard_id, offset, length)
        rows = rankings_from_leaderboard_entity(leaderboard_id, response)[:length]

        for ranking in rows:
            yield ranking
        acquired += len(rows)
        offset += RANKINGS_PAGE_SIZE

        if len(rows) < length:
            return
