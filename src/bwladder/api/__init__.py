"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: api/__init__.py.
"""

from .client import SCApi
from .contracts import JSONValue, ProfileMask, SCApiProtocol

__all__ = ["SCApi", "SCApiProtocol", "ProfileMask", "JSONValue"]
