"""Team season statistics retrieval tool."""

from typing import Any

from cfbd_stats_mcp.core.models import FetchResult
from cfbd_stats_mcp.data.fetcher import StatisticFetcher
from cfbd_stats_mcp.utils.enums import StatKind
from cfbd_stats_mcp.utils.types import FetcherDefinition


def reshape_team_stats(records: list[dict[str, Any]], team: str) -> dict[str, Any]:
    """Unwrap the single-element array CFBD returns for a team/season."""
    return {"stats": records[0]}


TEAM_STATS = FetcherDefinition(
    kind=StatKind.TEAM,
    endpoint="/stats/season",
    reshape=reshape_team_stats,
    label="team stats",
)


async def get_team_stats_impl(
    fetcher: StatisticFetcher,
    team: str,
    year: int | None = None,
) -> FetchResult:
    """Get team season totals (yards, points, turnovers...)."""
    return await fetcher.fetch(TEAM_STATS, team, year)
