"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: connection/base.py.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Protocol


class BroodWarConnection(Protocol):
    """Protocol implemented by every connection to the upstream web API."""

    async def fetch(self, path: str) -> str: ...


class Credential(Protocol):
    """One credential rendered as an ``Authorization`` header value."""

    def authorization(self) -> str: ...


@dataclass(frozen=True, slots=True)
class BearerCredential:
    """Static bearer token credential."""

    token: str

    def authorization(self) -> str:
        return f"Bearer {self.token}"


@dataclass(frozen=True, slots=True)
class BasicCredential:
    """User/password credential for password-protected deployments."""

    user: str
    password: str

    def authorization(self) -> str:
        raw = f"{self.user}:{self.password}".encode("utf-8")
        return "Basic " + base64.b64encode(raw).decode("ascii")
