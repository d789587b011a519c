"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

bwladder: a cached, retrying read layer over the StarCraft: Remastered
ladder web API.
"""

from .api import JSONValue, ProfileMask, SCApi, SCApiProtocol
from .cache import CacheConfig, CachedSCApi, CacheSpec, DEFAULT_CACHE_CONFIG
from .client import LadderClient
from .connection import HttpConnection, ResilientConnection, RetryPolicy, is_transient
from .errors import (
    BWLadderError,
    ClientProviderError,
    ConnectionFailedError,
    EntityNotFoundError,
    InvalidInputError,
    KnownUnreconcilableEntityError,
    RetryableInternalServerError,
    UnexpectedAPIResponseError,
)
from .pagination import iter_match_history, iter_rankings
from .settings import BWLadderSettings

__version__ = "0.1.0"

__all__ = [
    "BWLadderError",
    "BWLadderSettings",
    "CacheConfig",
    "CacheSpec",
    "CachedSCApi",
    "ClientProviderError",
    "ConnectionFailedError",
    "DEFAULT_CACHE_CONFIG",
    "EntityNotFoundError",
    "HttpConnection",
    "InvalidInputError",
    "JSONValue",
    "KnownUnreconcilableEntityError",
    "LadderClient",
    "ProfileMask",
    "ResilientConnection",
    "RetryPolicy",
    "RetryableInternalServerError",
    "SCApi",
    "SCApiProtocol",
    "UnexpectedAPIResponseError",
    "is_transient",
    "iter_match_history",
    "iter_rankings",
]
