"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Command line entry point.

Usage:
    bwladder gateways
    bwladder rankings --limit 10
    bwladder matches <toon> --gateway 10 --limit 5
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from contextlib import aclosing
from dataclasses import replace
from typing import Sequence

from .client import LadderClient
from .errors import BWLadderError
from .settings import BWLadderSettings


def _print_rows(rows: list[dict[str, object]]) -> None:
    for row in rows:
        print(" ".join(f"{key}={value}" for key, value in row.items()))


async def _gateways(client: LadderClient, args: argparse.Namespace) -> None:
    _print_rows(
        [{"id": g.id, "name": g.name, "region": g.region} for g in client.gateways()]
    )


async def _leaderboards(client: LadderClient, args: argparse.Namespace) -> None:
    leaderboards = sorted(await client.leaderboards(), key=lambda lb: (-lb.season_id, lb.id))
    _print_rows(
        [
            {
                "id": lb.id,
                "season": lb.season_id,
                "gateway": lb.gateway.name,
                "mode": lb.game_mode,
            }
            for lb in leaderboards
        ]
    )


async def _rankings(client: LadderClient, args: argparse.Namespace) -> None:
    rankings = client.rankings(
        leaderboard_id=args.leaderboard_id,
        gateway_id=args.gateway,
        begin=args.begin,
        limit=args.limit,
    )
    async with aclosing(rankings):
        async for r in rankings:
            _print_rows(
                [
                    {
                        "rank": r.rank,
                        "toon": r.toon,
                        "gateway": r.gateway_id,
                        "rating": r.rating,
                        "tier": r.tier,
                        "race": r.feature_race,
                        "wins": r.wins,
                        "losses": r.losses,
                    }
                ]
            )


async def _matches(client: LadderClient, args: argparse.Namespace) -> None:
    matches = client.match_history(
        args.toon,
        args.gateway,
        leaderboard_id=args.leaderboard_id,
        leaderboard_gateway_id=args.leaderboard_gateway,
        limit=args.limit,
    )
    async with aclosing(matches):
        async for m in matches:
            me, opponent = m.this_player, m.opponent
            _print_rows(
                [
                    {
                        "id": m.id,
                        "time": m.timestamp.isoformat() if m.timestamp else "-",
                        "map": m.map.display_name,
                        "race": me.race if me else "-",
                        "result": me.result if me else "-",
                        "opponent": opponent.toon if opponent else "-",
                        "opponent_race": opponent.race if opponent else "-",
                    }
                ]
            )


async def _replays(client: LadderClient, args: argparse.Namespace) -> None:
    replays = await client.replays(args.match_id)
    _print_rows(
        [{"url": r.url, "uploaded": r.timestamp.isoformat()} for r in replays.replays]
    )


async def _search(client: LadderClient, args: argparse.Namespace) -> None:
    results = await client.player_search(args.name)
    _print_rows(
        [
            {"toon": p.name, "battletag": p.battletag, "gateway": p.gateway_id, "rank": p.rank}
            for p in results
        ]
    )


async def _stats(client: LadderClient, args: argparse.Namespace) -> None:
    tree = await client.map_stats_by_toon(args.toon, args.gateway)
    rows: list[dict[str, object]] = []
    for mode, seasons in tree.items():
        for season, maps in sorted(seasons.items(), reverse=True):
            for map_id, races in maps.items():
                for race, stats in races.items():
                    if not stats.games:
                        continue
                    rows.append(
                        {
                            "mode": mode,
                            "season": season,
                            "map": map_id,
                            "race": race,
                            "games": stats.games,
                            "wins": stats.wins,
                            "win_ratio": f"{stats.wins / stats.games:.2%}",
                        }
                    )
    _print_rows(rows)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bwladder", description="StarCraft: Remastered ladder lookups"
    )
    parser.add_argument("--host", type=str, default=None)
    parser.add_argument("--log-level", type=str, default=None)
    parser.add_argument("--no-cache", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("gateways", help="list gateways").set_defaults(handler=_gateways)
    sub.add_parser("leaderboards", help="list leaderboards").set_defaults(
        handler=_leaderboards
    )

    rankings = sub.add_parser("rankings", help="display rankings")
    rankings.add_argument("--leaderboard-id", type=int, default=None)
    rankings.add_argument("--gateway", type=int, default=0)
    rankings.add_argument("--begin", type=int, default=0)
    rankings.add_argument("--limit", type=int, default=None)
    rankings.set_defaults(handler=_rankings)

    matches = sub.add_parser("matches", help="display a player's match history")
    matches.add_argument("toon", type=str)
    matches.add_argument("--gateway", type=int, required=True)
    matches.add_argument("--leaderboard-id", type=int, default=None)
    matches.add_argument("--leaderboard-gateway", type=int, default=0)
    matches.add_argument("--limit", type=int, default=None)
    matches.set_defaults(handler=_matches)

    replays = sub.add_parser("replays", help="list replays uploaded for a match")
    replays.add_argument("match_id", type=str)
    replays.set_defaults(handler=_replays)

    search = sub.add_parser("search", help="search players by name")
    search.add_argument("name", type=str)
    search.set_defaults(handler=_search)

    stats = sub.add_parser("stats", help="display a player's map statistics")
    stats.add_argument("toon", type=str)
    stats.add_argument("--gateway", type=int, required=True)
    stats.set_defaults(handler=_stats)
    return parser


def _settings(args: argparse.Namespace) -> BWLadderSettings:
    settings = BWLadderSettings.from_env()
    if args.host:
        settings = replace(settings, host=args.host)
    if args.log_level:
        settings = replace(settings, log_level=args.log_level.upper())
    if args.no_cache:
        settings = replace(settings, cache_enabled=False)
    return settings


def main(argv: Sequence[str] | None = None, *, client: LadderClient | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = _settings(args)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        client = client or LadderClient.create(settings)
        asyncio.run(args.handler(client, args))
    except BWLadderError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
