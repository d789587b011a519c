"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Client settings and explicit environment loading.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .consts import DEFAULT_HOST, DEFAULT_MAX_ATTEMPTS


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no", "off", ""}


@dataclass(frozen=True, slots=True)
class BWLadderSettings:
    """Explicit settings used to assemble the default client stack."""

    host: str = DEFAULT_HOST
    token: str | None = None
    user: str | None = None
    password: str | None = None
    timeout_s: float | None = None
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    cache_enabled: bool = True
    log_level: str = "WARNING"

    @staticmethod
    def from_env() -> "BWLadderSettings":
        """Load settings from environment variables."""
        timeout = os.getenv("BWLADDER_TIMEOUT_S")
        return BWLadderSettings(
            host=os.getenv("BWLADDER_HOST", DEFAULT_HOST),
            token=os.getenv("BWLADDER_TOKEN"),
            user=os.getenv("BWLADDER_USER"),
            password=os.getenv("BWLADDER_PASSWORD"),
            timeout_s=float(timeout) if timeout else None,
            max_attempts=int(
                os.getenv("BWLADDER_MAX_ATTEMPTS", str(DEFAULT_MAX_ATTEMPTS))
            ),
            cache_enabled=_env_flag("BWLADDER_CACHE", True),
            log_level=os.getenv("BWLADDER_LOG_LEVEL", "WARNING").upper(),
        )
