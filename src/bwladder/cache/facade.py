"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Caching facade over the raw endpoint client.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from typing import TypeVar

from ..api.contracts import JSONValue, ProfileMask, SCApiProtocol
from ..consts import SINGULAR_KEY
from .base import ResponseCache
from .bounded import BoundedTTLCache
from .config import DEFAULT_CACHE_CONFIG, CacheConfig, CacheSpec
from .keys import cache_key
from .metrics import CacheMetrics, NullCacheMetrics

logger = logging.getLogger("bwladder.cache")

T = TypeVar("T")

_MISSING = object()


def _build_cache(
    spec: CacheSpec | None, clock: Callable[[], float]
) -> BoundedTTLCache | None:
    if spec is None:
        return None
    return BoundedTTLCache(spec.max_aggregate_bytes, spec.ttl_seconds, clock=clock)


class CachedSCApi:
    """
    Wrap an ``SCApiProtocol`` and memoize each endpoint independently.

    Every endpoint gets its own cache sized and aged by its ``CacheSpec``;
    endpoints whose spec is ``None`` call straight through. Concurrent misses
    on one key are not coalesced: each performs its own fetch and the last
    one to finish overwrites the slot.
    """

    def __init__(
        self,
        api: SCApiProtocol,
        config: CacheConfig = DEFAULT_CACHE_CONFIG,
        *,
        metrics: CacheMetrics | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._api = api
        self._config = config
        self._metrics = metrics or NullCacheMetrics()

        self._gateway_cache = _build_cache(config.gateways, clock)
        self._maps_cache = _build_cache(config.maps, clock)
        self._leaderboard_cache = _build_cache(config.leaderboard, clock)
        self._leaderboard_entity_cache = _build_cache(config.leaderboard_entity, clock)
        self._name_search_cache = _build_cache(config.leaderboard_name_search, clock)
        self._rank_by_toon_cache = _build_cache(config.leaderboard_rank_by_toon, clock)
        self._profile_cache = _build_cache(config.profile, clock)
        self._match_history_cache = _build_cache(config.match_history, clock)
        self._match_player_info_cache = _build_cache(config.match_player_info, clock)
        self._map_stats_cache = _build_cache(config.map_stats_by_toon, clock)

    @property
    def config(self) -> CacheConfig:
        return self._config

    async def cache_or(
        self,
        endpoint: str,
        cache: ResponseCache | None,
        key: str,
        producer: Callable[[], Awaitable[T]],
    ) -> T:
        """Return the cached value for ``key`` or produce, store and return it."""
        if cache is not None:
            cached = cache.get(key, _MISSING)
            if cached is not _MISSING:
                logger.debug("%s(%s) - cache hit", endpoint, key)
                self._metrics.hit(endpoint)
                return cached

        logger.debug("%s(%s) - cache miss", endpoint, key)
        self._metrics.miss(endpoint)
        result = await producer()
        if cache is not None:
            cache.set(key, result)
        return result

    async def gateway(self) -> JSONValue:
        return await self.cache_or(
            "gateway",
            self._gateway_cache,
            SINGULAR_KEY,
            self._api.gateway,
        )

    async def classic_files_global_maps_1v1(self) -> JSONValue:
        return await self.cache_or(
            "classic_files_global_maps_1v1",
            self._maps_cache,
            SINGULAR_KEY,
            self._api.classic_files_global_maps_1v1,
        )

    async def leaderboard(self) -> JSONValue:
        return await self.cache_or(
            "leaderboard",
            self._leaderboard_cache,
            SINGULAR_KEY,
            self._api.leaderboard,
        )

    async def leaderboard_entity(
        self, leaderboard_id: int, offset: int, length: int
    ) -> JSONValue:
        return await self.cache_or(
            "leaderboard_entity",
            self._leaderboard_entity_cache,
            cache_key(leaderboard_id=leaderboard_id, offset=offset, length=length),
            lambda: self._api.leaderboard_entity(leaderboard_id, offset, length),
        )

    async def leaderboard_name_search(self, leaderboard_id: int, toon: str) -> JSONValue:
        return await self.cache_or(
            "leaderboard_name_search",
            self._name_search_cache,
            cache_key(leaderboard_id=leaderboard_id, toon=toon),
            lambda: self._api.leaderboard_name_search(leaderboard_id, toon),
        )

    async def leaderboard_rank_by_toon(
        self, leaderboard_id: int, toon: str, gateway: int
    ) -> JSONValue:
        return await self.cache_or(
            "leaderboard_rank_by_toon",
            self._rank_by_toon_cache,
            cache_key(leaderboard_id=leaderboard_id, toon=toon, gateway=gateway),
            lambda: self._api.leaderboard_rank_by_toon(leaderboard_id, toon, gateway),
        )

    async def map_stats_by_toon(self, toon: str, gateway: int) -> JSONValue:
        return await self.cache_or(
            "map_stats_by_toon",
            self._map_stats_cache,
            cache_key(toon=toon, gateway=gateway),
            lambda: self._api.map_stats_by_toon(toon, gateway),
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
        return await self.cache_or(
            "match_maker_game_info_by_toon",
            self._match_history_cache,
            cache_key(
                toon=toon,
                gateway=gateway,
                game_mode=game_mode,
                season=season,
                offset=offset,
                limit=limit,
            ),
            lambda: self._api.match_maker_game_info_by_toon(
                toon, gateway, game_mode, season, offset, limit
            ),
        )

    async def match_maker_game_info_player_info(self, match_id: str) -> JSONValue:
        return await self.cache_or(
            "match_maker_game_info_player_info",
            self._match_player_info_cache,
            cache_key(match_id=match_id),
            lambda: self._api.match_maker_game_info_player_info(match_id),
        )

    async def aurora_profile_by_toon(
        self, toon: str, gateway: int, mask: ProfileMask | str
    ) -> JSONValue:
        resolved = ProfileMask.coerce(mask)
        return await self.cache_or(
            "aurora_profile_by_toon",
            self._profile_cache,
            cache_key(toon=toon, gateway=gateway, mask=resolved),
            lambda: self._api.aurora_profile_by_toon(toon, gateway, resolved),
        )
