from __future__ import annotations

import asyncio
import base64

import pytest

from bwladder.connection import (
    BasicCredential,
    BearerCredential,
    HttpConnection,
    StaticHostnameClientProvider,
    WSLHostnameClientProvider,
)
from bwladder.errors import ClientProviderError


def run_async(coro):
    return asyncio.run(coro)


class _RecordingGet:
    def __init__(self, body: str = "{}") -> None:
        self.body = body
        self.calls: list[tuple[str, dict[str, str], float | None]] = []

    def __call__(self, url, headers, timeout_s):
        self.calls.append((url, dict(headers), timeout_s))
        return self.body


def test_http_connection_joins_host_and_path():
    get = _RecordingGet('{"a": 1}')
    connection = HttpConnection("http://127.0.0.1:57421/", get=get, timeout_s=2.5)

    body = run_async(connection.fetch("/web-api/v1/gateway"))

    assert body == '{"a": 1}'
    url, headers, timeout_s = get.calls[0]
    assert url == "http://127.0.0.1:57421/web-api/v1/gateway"
    assert headers["Content-Type"] == "application/json"
    assert "Authorization" not in headers
    assert timeout_s == 2.5


def test_http_connection_attaches_bearer_credential():
    get = _RecordingGet()
    connection = HttpConnection("http://h", credential=BearerCredential("tok"), get=get)

    run_async(connection.fetch("p"))

    assert get.calls[0][1]["Authorization"] == "Bearer tok"


def test_basic_credential_encodes_user_and_password():
    value = BasicCredential("user", "pa:ss").authorization()
    assert value.startswith("Basic ")
    assert base64.b64decode(value[len("Basic "):]).decode() == "user:pa:ss"


def test_static_provider_returns_host():
    assert StaticHostnameClientProvider("http://h:1").provide() == "http://h:1"


def test_wsl_provider_reads_nameserver(tmp_path):
    resolv = tmp_path / "resolv.conf"
    resolv.write_text(
        "# generated by WSL\nsearch lan\nnameserver 172.22.96.1\n", encoding="utf-8"
    )

    host = WSLHostnameClientProvider(port=5000, resolv_conf=resolv).provide()

    assert host == "http://172.22.96.1:5000"


def test_wsl_provider_without_nameserver_raises(tmp_path):
    resolv = tmp_path / "resolv.conf"
    resolv.write_text("search lan\n", encoding="utf-8")

    with pytest.raises(ClientProviderError):
        WSLHostnameClientProvider(resolv_conf=resolv).provide()


def test_wsl_provider_missing_file_raises(tmp_path):
    with pytest.raises(ClientProviderError):
        WSLHostnameClientProvider(resolv_conf=tmp_path / "missing").provide()
