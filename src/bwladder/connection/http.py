"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Plain HTTP connection performing the literal network call.
"""

from __future__ import annotations

import asyncio
import urllib.error
import urllib.request
from collections.abc import Callable, Mapping

from ..errors import ConnectionFailedError
from .base import Credential

HttpGet = Callable[[str, Mapping[str, str], "float | None"], str]


class HttpConnection:
    """
    Connection that issues ``GET {host}/{path}`` and returns the body text.

    Error statuses are not raised: the upstream reports transient failures
    with a 400/500 status and an error body, so the body is handed back for
    the resilient layer to classify.
    """

    def __init__(
        self,
        host: str,
        *,
        credential: Credential | None = None,
        timeout_s: float | None = None,
        get: HttpGet | None = None,
    ) -> None:
        self._host = host.rstrip("/")
        self._credential = credential
        self._timeout_s = timeout_s
        self._get = get or self.http_get

    @property
    def host(self) -> str:
        return self._host

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._credential is not None:
            headers["Authorization"] = self._credential.authorization()
        return headers

    async def fetch(self, path: str) -> str:
        url = f"{self._host}/{path.lstrip('/')}"
        return await asyncio.to_thread(self._get, url, self._headers(), self._timeout_s)

    def http_get(
        self,
        url: str,
        headers: Mapping[str, str],
        timeout_s: float | None,
    ) -> str:
        req = urllib.request.Request(url, method="GET", headers=dict(headers))
        try:
            if timeout_s is None:
                resp = urllib.request.urlopen(req)  # noqa: S310
            else:
                resp = urllib.request.urlopen(req, timeout=timeout_s)  # noqa: S310
            with resp:
                return resp.read().decode("utf-8", errors="replace")
        except urllib.error.HTTPError as e:
            try:
                return e.read().decode("utf-8", errors="replace")
            finally:
                e.close()
        except urllib.error.URLError as e:
            raise ConnectionFailedError(
                f"Network error calling '{url}': {e.reason}"
            ) from e
