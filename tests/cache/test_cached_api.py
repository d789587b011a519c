from __future__ import annotations

import asyncio

from bwladder.api import ProfileMask
from bwladder.cache import (
    CacheConfig,
    CachedSCApi,
    CacheSpec,
    InMemoryCacheMetrics,
    PrometheusCacheMetrics,
)
from bwladder.consts import SINGULAR_KEY


def run_async(coro):
    return asyncio.run(coro)


class _CountingApi:
    def __init__(self) -> None:
        self.calls: dict[str, int] = {}

    def _count(self, name: str, *args):
        self.calls[name] = self.calls.get(name, 0) + 1
        return {"endpoint": name, "args": list(args), "n": self.calls[name]}

    async def gateway(self):
        return self._count("gateway")

    async def classic_files_global_maps_1v1(self):
        return self._count("maps")

    async def leaderboard(self):
        return self._count("leaderboard")

    async def leaderboard_entity(self, leaderboard_id, offset, length):
        return self._count("leaderboard_entity", leaderboard_id, offset, length)

    async def leaderboard_name_search(self, leaderboard_id, toon):
        return self._count("leaderboard_name_search", leaderboard_id, toon)

    async def leaderboard_rank_by_toon(self, leaderboard_id, toon, gateway):
        return self._count("leaderboard_rank_by_toon", leaderboard_id, toon, gateway)

    async def map_stats_by_toon(self, toon, gateway):
        return self._count("map_stats_by_toon", toon, gateway)

    async def match_maker_game_info_by_toon(self, toon, gateway, game_mode, season, offset, limit):
        return self._count("match_history", toon, gateway, game_mode, season, offset, limit)

    async def match_maker_game_info_player_info(self, match_id):
        return self._count("match_player_info", match_id)

    async def aurora_profile_by_toon(self, toon, gateway, mask):
        return self._count("profile", toon, gateway, mask.value)


class _Clock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def test_second_call_within_ttl_is_served_from_cache():
    api = _CountingApi()
    cached = CachedSCApi(api)

    async def scenario():
        first = await cached.gateway()
        second = await cached.gateway()
        return first, second

    first, second = run_async(scenario())

    assert first == second
    assert api.calls["gateway"] == 1


def test_expired_entry_triggers_exactly_one_more_call():
    clock = _Clock()
    api = _CountingApi()
    cached = CachedSCApi(
        api,
        CacheConfig().with_overrides(map_stats_by_toon=CacheSpec(60, 1024 * 1024)),
        clock=clock,
    )

    async def scenario():
        await cached.map_stats_by_toon("dex", 10)
        clock.now = 59
        await cached.map_stats_by_toon("dex", 10)
        clock.now = 121
        await cached.map_stats_by_toon("dex", 10)
        await cached.map_stats_by_toon("dex", 10)

    run_async(scenario())

    assert api.calls["map_stats_by_toon"] == 2


def test_value_equal_arguments_share_a_slot():
    api = _CountingApi()
    cached = CachedSCApi(api)

    async def scenario():
        toon = "".join(["d", "e", "x"])
        await cached.aurora_profile_by_toon("dex", 10, ProfileMask.PROFILE)
        await cached.aurora_profile_by_toon(toon, int("10"), "scr_profile")
        await cached.aurora_profile_by_toon("dex", 10, ProfileMask.TOON_INFO)

    run_async(scenario())

    assert api.calls["profile"] == 2


def test_disabled_endpoint_does_not_affect_others():
    api = _CountingApi()
    cached = CachedSCApi(api, CacheConfig().with_overrides(leaderboard=None))

    async def scenario():
        for _ in range(3):
            await cached.leaderboard()
            await cached.gateway()
            await cached.leaderboard_entity(1, 0, 100)

    run_async(scenario())

    assert api.calls["leaderboard"] == 3
    assert api.calls["gateway"] == 1
    assert api.calls["leaderboard_entity"] == 1


def test_different_arguments_use_different_slots():
    api = _CountingApi()
    cached = CachedSCApi(api)

    async def scenario():
        await cached.leaderboard_entity(1, 0, 100)
        await cached.leaderboard_entity(1, 100, 100)
        await cached.match_maker_game_info_by_toon("dex", 10, 1, 20, 0, 50)
        await cached.match_maker_game_info_by_toon("dex", 10, 1, 20, 50, 50)
        await cached.match_maker_game_info_by_toon("dex", 10, 1, 20, 0, 50)

    run_async(scenario())

    assert api.calls["leaderboard_entity"] == 2
    assert api.calls["match_history"] == 2


def test_cache_or_records_hits_and_misses():
    api = _CountingApi()
    metrics = InMemoryCacheMetrics()
    cached = CachedSCApi(api, metrics=metrics)

    async def scenario():
        await cached.match_maker_game_info_player_info("m1")
        await cached.match_maker_game_info_player_info("m1")
        await cached.match_maker_game_info_player_info("m2")

    run_async(scenario())

    assert metrics.misses["match_maker_game_info_player_info"] == 2
    assert metrics.hits["match_maker_game_info_player_info"] == 1


def test_cache_or_without_cache_always_produces():
    cached = CachedSCApi(_CountingApi())
    produced = 0

    async def producer():
        nonlocal produced
        produced += 1
        return produced

    async def scenario():
        return [await cached.cache_or("custom", None, SINGULAR_KEY, producer) for _ in range(2)]

    assert run_async(scenario()) == [1, 2]


def test_prometheus_metrics_count_per_endpoint():
    from prometheus_client import CollectorRegistry

    registry = CollectorRegistry()
    cached = CachedSCApi(_CountingApi(), metrics=PrometheusCacheMetrics(registry=registry))

    async def scenario():
        await cached.gateway()
        await cached.gateway()

    run_async(scenario())

    labels = {"endpoint": "gateway"}
    assert registry.get_sample_value("bwladder_cache_hits_total", labels) == 1.0
    assert registry.get_sample_value("bwladder_cache_misses_total", labels) == 1.0
