"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Retrying wrapper for the mis-reported transient failures of the upstream API.
"""

from __future__ import annotations

from collections.abc import Callable

from ..errors import RetryableInternalServerError
from .base import BroodWarConnection
from .retry import RetryPolicy, is_transient, with_retry


class ResilientConnection:
    """
    Decorate a connection with bounded retry on false-error bodies.

    The upstream intermittently answers valid requests with an
    "internal (server) error" body, sometimes with a 200 or 400 status.
    Only that signature is retried; every other body passes through verbatim.
    """

    def __init__(
        self,
        inner: BroodWarConnection,
        *,
        policy: RetryPolicy | None = None,
        classifier: Callable[[str], bool] = is_transient,
    ) -> None:
        self._inner = inner
        self._policy = policy or RetryPolicy()
        self._classifier = classifier

    @property
    def policy(self) -> RetryPolicy:
        return self._policy

    async def _fetch_once(self, path: str) -> str:
        text = await self._inner.fetch(path)
        if self._classifier(text):
            raise RetryableInternalServerError(
                f"Internal server error fetching '{path}'"
            )
        return text

    async def fetch(self, path: str) -> str:
        return await with_retry(lambda: self._fetch_once(path), policy=self._policy)
