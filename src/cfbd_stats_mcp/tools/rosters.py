"""Roster data retrieval tool.

This module provides the get_roster MCP tool for retrieving a team's
roster for a season. Roster data includes:
- Player identification (full name, jersey number)
- Position and class year
- Physical attributes (height, weight)
- Hometown
"""

from typing import Any

from cfbd_stats_mcp.core.models import FetchResult, RosterPlayer
from cfbd_stats_mcp.data.fetcher import StatisticFetcher
from cfbd_stats_mcp.utils.constants import UNKNOWN_LABEL
from cfbd_stats_mcp.utils.enums import StatKind
from cfbd_stats_mcp.utils.helpers import format_full_name, format_hometown
from cfbd_stats_mcp.utils.types import FetcherDefinition


def summarize_player(player: RosterPlayer) -> dict[str, Any]:
    """Convert a roster record into the flat player entry.

    Args:
        player: The upstream roster record.

    Returns:
        A dict with name, jersey, position, year, height, weight, hometown.
    """
    return {
        "name": format_full_name(player.first_name, player.last_name),
        "jersey": player.jersey,
        "position": player.position or UNKNOWN_LABEL,
        "year": player.year,
        "height": player.height or None,
        "weight": player.weight or None,
        "hometown": format_hometown(player.home_city, player.home_state),
    }


def reshape_roster(records: list[dict[str, Any]], team: str) -> dict[str, Any]:
    """Group a roster by position and build the flat player list.

    Args:
        records: Raw /roster records.
        team: The normalized team name (unused).

    Returns:
        A dict with total_players, by_position and all_players. Positions
        keep the order in which they first appear.
    """
    players = [RosterPlayer.model_validate(r) for r in records]

    by_position: dict[str, list[dict[str, Any]]] = {}
    for player in players:
        position = player.position or UNKNOWN_LABEL
        by_position.setdefault(position, []).append(
            {
                "name": format_full_name(player.first_name, player.last_name),
                "jersey": player.jersey,
                "year": player.year,
            }
        )

    return {
        "total_players": len(players),
        "by_position": by_position,
        "all_players": [summarize_player(p) for p in players],
    }


ROSTER = FetcherDefinition(
    kind=StatKind.ROSTER,
    endpoint="/roster",
    reshape=reshape_roster,
    label="roster",
)


async def get_roster_impl(
    fetcher: StatisticFetcher,
    team: str,
    year: int | None = None,
) -> FetchResult:
    """Get a team's complete roster.

    Args:
        fetcher: The statistic fetcher.
        team: Team name or alias (e.g. "Texas", "Longhorns").
        year: Season year (defaults to the current year).

    Returns:
        FetchSuccess with players grouped by position plus a flat list,
        or FetchFailure.
    """
    return await fetcher.fetch(ROSTER, team, year)
