"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Metrics adapters for cache hit/miss observability.
"""

from __future__ import annotations

from typing import Protocol


class CacheMetrics(Protocol):
    """Sink for per-endpoint cache outcomes."""

    def hit(self, endpoint: str) -> None: ...

    def miss(self, endpoint: str) -> None: ...


class NullCacheMetrics:
    """Discard all cache metrics."""

    def hit(self, endpoint: str) -> None:
        return None

    def miss(self, endpoint: str) -> None:
        return None


class InMemoryCacheMetrics:
    """Count cache outcomes per endpoint in plain dicts."""

    def __init__(self) -> None:
        self.hits: dict[str, int] = {}
        self.misses: dict[str, int] = {}

    def hit(self, endpoint: str) -> None:
        self.hits[endpoint] = self.hits.get(endpoint, 0) + 1

    def miss(self, endpoint: str) -> None:
        self.misses[endpoint] = self.misses.get(endpoint, 0) + 1


class PrometheusCacheMetrics:
    """
    Prometheus-backed cache metrics adapter.

    Requires `prometheus_client` package.
    """

    def __init__(self, *, namespace: str = "bwladder", registry=None) -> None:
        try:
            from prometheus_client import REGISTRY, Counter
        except ModuleNotFoundError as exc:  # pragma: no cover
            raise RuntimeError(
                "PrometheusCacheMetrics requires `prometheus_client` to be installed."
            ) from exc

        target = registry if registry is not None else REGISTRY
        self._hits = Counter(
            name="cache_hits",
            documentation="Responses served from the endpoint cache",
            namespace=namespace,
            labelnames=("endpoint",),
            registry=target,
        )
        self._misses = Counter(
            name="cache_misses",
            documentation="Responses fetched from the upstream API",
            namespace=namespace,
            labelnames=("endpoint",),
            registry=target,
        )

    def hit(self, endpoint: str) -> None:
        self._hits.labels(endpoint).inc()

    def miss(self, endpoint: str) -> None:
        self._misses.labels(endpoint).inc()
