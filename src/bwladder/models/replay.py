"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: models/replay.py.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True, slots=True)
class Replay:
    url: str
    timestamp: datetime


@dataclass(frozen=True, slots=True)
class Replays:
    """Replays uploaded for one match; each player may have uploaded one."""

    replays: list[Replay] = field(default_factory=list)

    @property
    def last_replay_uploaded(self) -> Replay | None:
        return max(self.replays, key=lambda r: r.timestamp, default=None)

    @property
    def first_replay_uploaded(self) -> Replay | None:
        return min(self.replays, key=lambda r: r.timestamp, default=None)

    @property
    def any_replay(self) -> Replay | None:
        return self.replays[0] if self.replays else None
