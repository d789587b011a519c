"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: consts.py.
"""

from __future__ import annotations

MINUTES_S = 60
HOURS_S = 60 * MINUTES_S

KB_BYTES = 1024
MB_BYTES = 1024 * KB_BYTES

# Single slot key used by endpoints that take no arguments.
SINGULAR_KEY = "SingularKey"

# Protocol maximums accepted by the upstream paging endpoints.
RANKINGS_PAGE_SIZE = 100
MATCH_HISTORY_PAGE_SIZE = 50

# Lower-cased body prefixes the upstream returns for transient failures,
# sometimes alongside a 200 or 400 status.
TRANSIENT_ERROR_PREFIXES = ("internal error", "internal server error")
DEFAULT_MAX_ATTEMPTS = 3

DEFAULT_HOST = "http://127.0.0.1:57421"
