"""Team talent composite retrieval tool.

CFBD's /talent endpoint returns every ranked team for a season; this tool
picks out the requested team and reports its position in that list.
"""

from typing import Any

from cfbd_stats_mcp.core.errors import EmptyResultError
from cfbd_stats_mcp.core.models import FetchResult, TalentEntry
from cfbd_stats_mcp.data.fetcher import StatisticFetcher
from cfbd_stats_mcp.utils.enums import StatKind
from cfbd_stats_mcp.utils.types import FetcherDefinition


def reshape_talent(records: list[dict[str, Any]], team: str) -> dict[str, Any]:
    """Find ``team`` in the season's talent list.

    The national rank is the 1-based position of the first exact school
    match in the order the API returned. The list is not re-sorted by
    rating.

    Args:
        records: Raw /talent records for one season.
        team: The normalized team name.

    Returns:
        A dict with talent_rating, national_rank and total_teams_ranked.

    Raises:
        EmptyResultError: If the team is not in the list.
    """
    entries = [TalentEntry.model_validate(r) for r in records]
    for index, entry in enumerate(entries):
        if entry.school == team:
            return {
                "talent_rating": entry.talent,
                "national_rank": index + 1,
                "total_teams_ranked": len(entries),
            }
    raise EmptyResultError(f"{team} is not among {len(entries)} ranked teams")


TALENT_RATING = FetcherDefinition(
    kind=StatKind.TALENT,
    endpoint="/talent",
    reshape=reshape_talent,
    label="talent data",
    sends_team=False,
)


async def get_talent_rating_impl(
    fetcher: StatisticFetcher,
    team: str,
    year: int | None = None,
) -> FetchResult:
    """Get a team's roster talent composite and national ranking."""
    return await fetcher.fetch(TALENT_RATING, team, year)
