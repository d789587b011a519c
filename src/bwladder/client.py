"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

High-level ladder client: resolves gateways and leaderboards, maps raw
responses to model records and exposes the two paginated sequences.
"""

from __future__ import annotations

import logging
from typing import AsyncIterator

from .api.client import SCApi
from .api.contracts import ProfileMask, SCApiProtocol
from .cache.config import DEFAULT_CACHE_CONFIG, CacheConfig
from .cache.facade import CachedSCApi
from .cache.metrics import CacheMetrics
from .connection.base import BasicCredential, BearerCredential, Credential
from .connection.http import HttpConnection
from .connection.provider import ClientProvider
from .connection.resilient import ResilientConnection
from .connection.retry import RetryPolicy
from .errors import EntityNotFoundError, InvalidInputError
from .models.account import Account
from .models.common import GameMode
from .models.gateway import GLOBAL_GATEWAY_ID, KNOWN_GATEWAYS, Gateway
from .models.leaderboard import Leaderboard
from .models.maps import GameMap
from .models.match import Match
from .models.ranking import AccountRankings, Ranking
from .models.replay import Replays
from .models.search import PlayerSearchResult
from .pagination.match_history import iter_match_history
from .pagination.rankings import iter_rankings
from .settings import BWLadderSettings
from .transformers.accounts import account_from_profile_response
from .transformers.files import (
    MapStatsTree,
    map_stats_from_response,
    maps_from_response,
    player_search_results_from_response,
    replays_from_response,
)
from .transformers.leaderboards import (
    current_season_from_response,
    gateways_from_response,
    leaderboards_from_response,
)
from .transformers.rankings import account_rankings_from_rank_by_toon

logger = logging.getLogger("bwladder.client")


def _credential(settings: BWLadderSettings) -> Credential | None:
    if settings.token:
        return BearerCredential(settings.token)
    if settings.user and settings.password:
        return BasicCredential(settings.user, settings.password)
    return None


class LadderClient:
    """Entry point for ladder lookups over a (usually cached) endpoint client."""

    def __init__(self, api: SCApiProtocol) -> None:
        self._api = api

    @property
    def api(self) -> SCApiProtocol:
        return self._api

    @classmethod
    def create(
        cls,
        settings: BWLadderSettings | None = None,
        *,
        provider: ClientProvider | None = None,
        cache_config: CacheConfig | None = None,
        metrics: CacheMetrics | None = None,
    ) -> "LadderClient":
        """
        Build the default stack: cache facade over the raw client over a
        retrying connection over plain HTTP.

        ``provider`` overrides ``settings.host`` when given.
        """
        settings = settings or BWLadderSettings.from_env()
        host = provider.provide() if provider is not None else settings.host

        connection = ResilientConnection(
            HttpConnection(
                host,
                credential=_credential(settings),
                timeout_s=settings.timeout_s,
            ),
            policy=RetryPolicy(max_attempts=settings.max_attempts),
        )

        if cache_config is None:
            cache_config = (
                DEFAULT_CACHE_CONFIG if settings.cache_enabled else CacheConfig.disabled()
            )
        logger.debug("Ladder client for %s (cache enabled: %s)", host, settings.cache_enabled)
        return cls(CachedSCApi(SCApi(connection), cache_config, metrics=metrics))

    # Gateways

    def gateways(self) -> list[Gateway]:
        return list(KNOWN_GATEWAYS)

    def gateway(self, gateway_id: int | None = None, region: str | None = None) -> Gateway:
        """Look up a gateway by exactly one of ``gateway_id`` or ``region``."""
        if (gateway_id is None) == (region is None):
            raise InvalidInputError("Specify exactly one of gateway_id or region")
        for gateway in KNOWN_GATEWAYS:
            if gateway_id is not None and gateway.id == gateway_id:
                return gateway
            if region is not None and gateway.region == region:
                return gateway
        raise EntityNotFoundError(
            f"No such gateway could be found (gateway_id={gateway_id}, region={region})"
        )

    async def online_users(
        self, gateway_id: int | None = None, region: str | None = None
    ) -> int:
        gateway = self.gateway(gateway_id=gateway_id, region=region)
        counts = gateways_from_response(await self._api.gateway())
        for live, users in counts.items():
            if live.id == gateway.id:
                return users
        raise EntityNotFoundError(f"Gateway {gateway.id} is not reporting online users")

    # Seasons and leaderboards

    async def maps(self) -> list[GameMap]:
        return maps_from_response(await self._api.classic_files_global_maps_1v1())

    async def current_season(self) -> int:
        return current_season_from_response(await self._api.leaderboard())

    async def leaderboards(self) -> list[Leaderboard]:
        return leaderboards_from_response(await self._api.leaderboard())

    async def leaderboard(
        self,
        leaderboard_id: int | None = None,
        *,
        game_mode: GameMode = "1v1",
        gateway_id: int = GLOBAL_GATEWAY_ID,
        season_id: int | None = None,
    ) -> Leaderboard:
        """
        Resolve a leaderboard by id, or by game mode, gateway and season.

        Without arguments this is the global 1v1 leaderboard of the current
        season.
        """
        leaderboards = await self.leaderboards()

        if leaderboard_id is not None:
            found = next((lb for lb in leaderboards if lb.id == leaderboard_id), None)
        else:
            if season_id is None:
                season_id = await self.current_season()
            found = next(
                (
                    lb
                    for lb in leaderboards
                    if lb.game_mode == game_mode
                    and lb.gateway.id == gateway_id
                    and lb.season_id == season_id
                ),
                None,
            )

        if found is None:
            raise EntityNotFoundError(
                "No such leaderboard could be found "
                f"(leaderboard_id={leaderboard_id}, game_mode={game_mode}, "
                f"gateway_id={gateway_id}, season_id={season_id})"
            )
        return found

    # Accounts

    async def account(
        self, toon: str, gateway_id: int, mask: ProfileMask | str = ProfileMask.MM_GAME_LOADING
    ) -> Account:
        mask = ProfileMask.coerce(mask)
        gateway = self.gateway(gateway_id=gateway_id)
        response = await self._api.aurora_profile_by_toon(toon, gateway.id, mask)
        account = account_from_profile_response(mask, toon, gateway.id, response)
        if account is None:
            raise EntityNotFoundError(
                f"No such account could be found for {toon}@{gateway.id}"
            )
        return account

    async def minimal_account(self, toon: str, gateway_id: int) -> Account:
        return await self.account(toon, gateway_id, ProfileMask.MM_GAME_LOADING)

    async def minimal_account_with_games_played_last_week(
        self, toon: str, gateway_id: int
    ) -> Account:
        return await self.account(toon, gateway_id, ProfileMask.MM_TOON_INFO)

    async def full_account(self, toon: str, gateway_id: int) -> Account:
        return await self.account(toon, gateway_id, ProfileMask.PROFILE)

    async def full_account_minus_game_history(self, toon: str, gateway_id: int) -> Account:
        return await self.account(toon, gateway_id, ProfileMask.TOON_INFO)

    async def account_rankings_by_toon(
        self,
        toon: str,
        gateway_id: int,
        *,
        leaderboard_id: int | None = None,
        game_mode: GameMode = "1v1",
        leaderboard_gateway_id: int = GLOBAL_GATEWAY_ID,
        season_id: int | None = None,
    ) -> AccountRankings:
        """
        Rankings of the account owning ``toon`` on one leaderboard.

        ``gateway_id`` is the toon's gateway; the leaderboard is resolved
        separately from ``leaderboard_gateway_id`` (global by default).
        """
        gateway = self.gateway(gateway_id=gateway_id)
        leaderboard = await self.leaderboard(
            leaderboard_id,
            game_mode=game_mode,
            gateway_id=leaderboard_gateway_id,
            season_id=season_id,
        )
        response = await self._api.leaderboard_rank_by_toon(leaderboard.id, toon, gateway.id)
        rankings = account_rankings_from_rank_by_toon(toon, gateway.id, response)
        if rankings is None:
            raise EntityNotFoundError(
                f"No account rankings for {toon}@{gateway.id} on leaderboard {leaderboard.id}"
            )
        return rankings

    async def map_stats_by_toon(self, toon: str, gateway_id: int) -> MapStatsTree:
        gateway = self.gateway(gateway_id=gateway_id)
        return map_stats_from_response(await self._api.map_stats_by_toon(toon, gateway.id))

    # Rankings

    async def ranking(
        self,
        index: int,
        *,
        leaderboard_id: int | None = None,
        game_mode: GameMode = "1v1",
        gateway_id: int = GLOBAL_GATEWAY_ID,
        season_id: int | None = None,
    ) -> Ranking:
        rankings = self.rankings(
            leaderboard_id=leaderboard_id,
            game_mode=game_mode,
            gateway_id=gateway_id,
            season_id=season_id,
            begin=index,
            limit=1,
        )
        try:
            async for ranking in rankings:
                return ranking
        finally:
            await rankings.aclose()
        raise EntityNotFoundError(f"No ranking at index {index}")

    async def rankings(
        self,
        *,
        leaderboard_id: int | None = None,
        game_mode: GameMode = "1v1",
        gateway_id: int = GLOBAL_GATEWAY_ID,
        season_id: int | None = None,
        begin: int = 0,
        limit: int | None = None,
    ) -> AsyncIterator[Ranking]:
        """Yield rankings of the resolved leaderboard; see ``iter_rankings``."""
        leaderboard = await self.leaderboard(
            leaderboard_id, game_mode=game_mode, gateway_id=gateway_id, season_id=season_id
        )
        pages = iter_rankings(self._api, leaderboard.id, begin=begin, limit=limit)
        try:
            async for ranking in pages:
                yield ranking
        finally:
            await pages.aclose()

    # Matches

    async def match_history(
        self,
        toon: str,
        gateway_id: int,
        *,
        leaderboard_id: int | None = None,
        game_mode: GameMode = "1v1",
        leaderboard_gateway_id: int = GLOBAL_GATEWAY_ID,
        season_id: int | None = None,
        limit: int | None = None,
    ) -> AsyncIterator[Match]:
        """
        Yield the player's distinct matches, newest first within each page.

        The leaderboard is resolved from ``leaderboard_id`` or from
        ``game_mode``, ``leaderboard_gateway_id`` and ``season_id``.
        Raises ``EntityNotFoundError`` before the first match when the player
        has no ranking on the resolved leaderboard.
        """
        if limit is not None and limit < 0:
            raise InvalidInputError(f"limit must be >= 0 (got {limit})")
        gateway = self.gateway(gateway_id=gateway_id)
        leaderboard = await self.leaderboard(
            leaderboard_id,
            game_mode=game_mode,
            gateway_id=leaderboard_gateway_id,
            season_id=season_id,
        )
        account_rankings = await self.account_rankings_by_toon(
            toon, gateway.id, leaderboard_id=leaderboard.id
        )
        ranking = account_rankings.requested_ranking
        if ranking is None:
            raise EntityNotFoundError(
                f"No ranking for {toon}@{gateway.id} on leaderboard {leaderboard.id}"
            )

        matches = iter_match_history(
            self._api,
            toon=toon,
            gateway_id=gateway.id,
            leaderboard=leaderboard,
            ranking=ranking,
            limit=limit,
        )
        try:
            async for match in matches:
                yield match
        finally:
            await matches.aclose()

    async def replays(self, match_id: str) -> Replays:
        return replays_from_response(
            await self._api.match_maker_game_info_player_info(match_id)
        )

    async def player_search(self, search: str) -> list[PlayerSearchResult]:
        """Search toons by name on the current global leaderboard."""
        leaderboard = await self.leaderboard()
        return player_search_results_from_response(
            await self._api.leaderboard_name_search(leaderboard.id, search)
        )
