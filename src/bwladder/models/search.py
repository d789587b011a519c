"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: models/search.py.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PlayerSearchResult:
    avatar: str
    battletag: str
    gateway_id: int
    last_rank: int
    name: str
    points: int
    rank: int
