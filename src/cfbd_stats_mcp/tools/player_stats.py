"""Player statistics retrieval tool.

This module provides the get_player_stats MCP tool for retrieving
season statistics for every player on a team, optionally limited to
one stat category (passing, rushing, receiving, defensive, kicking...).
"""

from typing import Any

from cfbd_stats_mcp.core.models import FetchResult, PlayerStatLine
from cfbd_stats_mcp.data.fetcher import StatisticFetcher
from cfbd_stats_mcp.utils.constants import (
    DEFAULT_STAT_CATEGORY,
    UNKNOWN_LABEL,
    UNKNOWN_POSITION,
)
from cfbd_stats_mcp.utils.enums import StatKind
from cfbd_stats_mcp.utils.types import FetcherDefinition


def reshape_player_stats(records: list[dict[str, Any]], team: str) -> dict[str, Any]:
    """Group per-stat-line records by player, then by category.

    CFBD returns one record per (player, category, statType). Each player
    entry keeps the latest raw line of each category under
    ``stats[category]``, and every line's value under
    ``stat_types[category][statType]`` so earlier lines are not lost.

    Args:
        records: Raw /stats/player/season records.
        team: The normalized team name (unused).

    Returns:
        A dict with a "players" mapping keyed by player name.
    """
    players: dict[str, dict[str, Any]] = {}
    for record in records:
        line = PlayerStatLine.model_validate(record)
        name = line.player or UNKNOWN_LABEL
        if name not in players:
            players[name] = {
                "name": name,
                "position": line.position or UNKNOWN_POSITION,
                "stats": {},
                "stat_types": {},
            }
        category = line.category or DEFAULT_STAT_CATEGORY
        players[name]["stats"][category] = record
        if line.stat_type is not None:
            players[name]["stat_types"].setdefault(category, {})[line.stat_type] = line.stat
    return {"players": players}


PLAYER_STATS = FetcherDefinition(
    kind=StatKind.PLAYER,
    endpoint="/stats/player/season",
    reshape=reshape_player_stats,
    label="player stats",
    filter_param="category",
)


async def get_player_stats_impl(
    fetcher: StatisticFetcher,
    team: str,
    year: int | None = None,
    category: str | None = None,
) -> FetchResult:
    """Get individual player season statistics for a team.

    Args:
        fetcher: The statistic fetcher.
        team: Team name or alias (e.g. "Oklahoma", "OU").
        year: Season year (defaults to the current year).
        category: Optional stat category; all categories if omitted.

    Returns:
        FetchSuccess with players grouped by name, or FetchFailure.
    """
    return await fetcher.fetch(PLAYER_STATS, team, year, category)
