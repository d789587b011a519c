"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: connection/retry.py.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

from ..consts import DEFAULT_MAX_ATTEMPTS, TRANSIENT_ERROR_PREFIXES
from ..errors import InvalidInputError, RetryableInternalServerError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class RetryPolicy:
    """Bounded, immediate retry semantics for one request path."""

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    retry_on: tuple[type[BaseException], ...] = (RetryableInternalServerError,)

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise InvalidInputError(
                f"max_attempts must be at least 1, got {self.max_attempts}"
            )


def is_transient(body: str) -> bool:
    """Return True when a response body carries a known false-error signature."""
    lowered = body.lower()
    return any(lowered.startswith(prefix) for prefix in TRANSIENT_ERROR_PREFIXES)


async def with_retry(
    operation: Callable[[], Awaitable[T]],
    *,
    policy: RetryPolicy,
) -> T:
    """Run ``operation`` until it succeeds or ``policy.max_attempts`` is spent."""
    for attempt in range(1, policy.max_attempts + 1):
        try:
            return await operation()
        except policy.retry_on:
            if attempt >= policy.max_attempts:
                raise
    raise RetryableInternalServerError("Retry loop exhausted")  # pragma: no cover
