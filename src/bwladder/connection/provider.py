"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Providers that resolve the host address of the local game client web API.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Protocol

from ..errors import ClientProviderError

logger = logging.getLogger("bwladder.connection")

_IPV4 = re.compile(r"^\d+\.\d+\.\d+\.\d+$")


class ClientProvider(Protocol):
    """Resolve the ``scheme://host:port`` of the upstream web API."""

    def provide(self) -> str: ...


class StaticHostnameClientProvider:
    """Return a fixed host; useful for tests or a known forwarded port."""

    def __init__(self, host: str) -> None:
        self._host = host

    def provide(self) -> str:
        return self._host


class WSLHostnameClientProvider:
    """
    Resolve the Windows host from inside WSL.

    Assumes the game client port has been forwarded to a static port on the
    Windows side; the Windows host IP is the nameserver in ``resolv.conf``.
    57421 is an arbitrary default.
    """

    def __init__(
        self,
        port: int = 57421,
        *,
        resolv_conf: str | Path = "/etc/resolv.conf",
    ) -> None:
        self._port = port
        self._resolv_conf = Path(resolv_conf)

    def provide(self) -> str:
        try:
            lines = self._resolv_conf.read_text(encoding="utf-8").splitlines()
        except OSError as e:
            raise ClientProviderError(
                f"Could not read {self._resolv_conf}: {e}"
            ) from e

        for line in lines:
            parts = line.split()
            if len(parts) >= 2 and parts[0] == "nameserver" and _IPV4.match(parts[1]):
                host = f"http://{parts[1]}:{self._port}"
                logger.info("Using hostname for game client as %s", host)
                return host

        raise ClientProviderError(
            f"Could not find windows hostname in {self._resolv_conf}"
        )
