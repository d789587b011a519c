"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: connection/__init__.py.
"""

from .base import BasicCredential, BearerCredential, BroodWarConnection, Credential
from .http import HttpConnection
from .provider import (
    ClientProvider,
    StaticHostnameClientProvider,
    WSLHostnameClientProvider,
)
from .resilient import ResilientConnection
from .retry import RetryPolicy, is_transient, with_retry

__all__ = [
    "BroodWarConnection",
    "Credential",
    "BearerCredential",
    "BasicCredential",
    "HttpConnection",
    "ResilientConnection",
    "RetryPolicy",
    "is_transient",
    "with_retry",
    "ClientProvider",
    "StaticHostnameClientProvider",
    "WSLHostnameClientProvider",
]
