"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: models/gateway.py.
"""

from __future__ import annotations

from dataclasses import dataclass

from .common import Region

GLOBAL_GATEWAY_ID = 0


@dataclass(frozen=True, slots=True)
class Gateway:
    """One regional server cluster."""

    id: int
    name: str
    region: Region


# Static copy of /web-api/v1/gateway minus the live user counts.
KNOWN_GATEWAYS: tuple[Gateway, ...] = (
    Gateway(10, "U.S. West", "usw"),
    Gateway(11, "U.S. East", "use"),
    Gateway(20, "Europe", "eu"),
    Gateway(30, "Korea", "kr"),
    Gateway(45, "Asia", "asia"),
)
