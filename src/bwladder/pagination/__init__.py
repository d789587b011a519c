"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: pagination/__init__.py.
"""

from .match_history import iter_match_history
from .rankings import iter_rankings

__all__ = ["iter_match_history", "iter_rankings"]
