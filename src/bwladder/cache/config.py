"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Per-endpoint cache policies.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

from ..consts import HOURS_S, MB_BYTES, MINUTES_S
from ..errors import InvalidInputError


@dataclass(frozen=True, slots=True)
class CacheSpec:
    """Freshness and memory bounds for one endpoint's cache."""

    ttl_seconds: float
    max_aggregate_bytes: int

    def __post_init__(self) -> None:
        if self.ttl_seconds <= 0:
            raise InvalidInputError(
                f"ttl_seconds must be positive, got {self.ttl_seconds}"
            )
        if self.max_aggregate_bytes <= 0:
            raise InvalidInputError(
                f"max_aggregate_bytes must be positive, got {self.max_aggregate_bytes}"
            )


@dataclass(frozen=True, slots=True)
class CacheConfig:
    """
    One ``CacheSpec`` per endpoint; ``None`` disables caching for that endpoint.

    The defaults follow each endpoint's real update cadence.
    """

    # rarely, if ever, updates
    gateways: CacheSpec | None = CacheSpec(1 * HOURS_S, 1 * MB_BYTES)
    # updates are per-season
    maps: CacheSpec | None = CacheSpec(1 * HOURS_S, 1 * MB_BYTES)
    # refreshed every 5 min, but only the update-time fields change
    leaderboard: CacheSpec | None = CacheSpec(1 * HOURS_S, 1 * MB_BYTES)
    # refreshed every 5 min
    leaderboard_entity: CacheSpec | None = CacheSpec(5 * MINUTES_S, 1 * MB_BYTES)
    # changes as profiles are created and deleted
    leaderboard_name_search: CacheSpec | None = CacheSpec(5 * MINUTES_S, 1 * MB_BYTES)
    # refreshed every 5 min
    leaderboard_rank_by_toon: CacheSpec | None = CacheSpec(5 * MINUTES_S, 1 * MB_BYTES)
    # changes with every game played
    profile: CacheSpec | None = CacheSpec(1 * MINUTES_S, 1 * MB_BYTES)
    match_history: CacheSpec | None = CacheSpec(1 * MINUTES_S, 1 * MB_BYTES)
    map_stats_by_toon: CacheSpec | None = CacheSpec(1 * MINUTES_S, 1 * MB_BYTES)
    # detail of a played match never changes
    match_player_info: CacheSpec | None = CacheSpec(24 * HOURS_S, 1 * MB_BYTES)

    @classmethod
    def disabled(cls) -> "CacheConfig":
        """Config with caching turned off for every endpoint."""
        return cls(**{f.name: None for f in fields(cls)})

    def with_overrides(self, **specs: CacheSpec | None) -> "CacheConfig":
        """Return a copy with the named endpoints replaced."""
        known = {f.name for f in fields(self)}
        unknown = sorted(set(specs) - known)
        if unknown:
            raise InvalidInputError(f"Unknown cache endpoints: {', '.join(unknown)}")
        return replace(self, **specs)


DEFAULT_CACHE_CONFIG = CacheConfig()
