"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Mappers from decoded upstream JSON to ``bwladder.models`` records.
"""

from .accounts import account_from_profile_response
from .files import (
    MapStatsTree,
    map_stats_from_response,
    maps_from_response,
    player_search_results_from_response,
    replays_from_response,
)
from .leaderboards import (
    current_season_from_response,
    gateways_from_response,
    leaderboards_from_response,
)
from .matches import match_from_response, matches_from_response
from .rankings import (
    EXPECTED_COLUMNS,
    account_rankings_from_rank_by_toon,
    rankings_from_leaderboard_entity,
)
from .schemas import parse_response

__all__ = [
    "EXPECTED_COLUMNS",
    "MapStatsTree",
    "account_from_profile_response",
    "account_rankings_from_rank_by_toon",
    "current_season_from_response",
    "gateways_from_response",
    "leaderboards_from_response",
    "map_stats_from_response",
    "maps_from_response",
    "match_from_response",
    "matches_from_response",
    "parse_response",
    "player_search_results_from_response",
    "rankings_from_leaderboard_entity",
    "replays_from_response",
]
