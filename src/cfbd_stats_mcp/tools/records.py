"""Team win-loss records retrieval tool."""

from typing import Any

from cfbd_stats_mcp.core.models import FetchResult, TeamRecord, WinLossRecord
from cfbd_stats_mcp.data.fetcher import StatisticFetcher
from cfbd_stats_mcp.utils.enums import StatKind
from cfbd_stats_mcp.utils.types import FetcherDefinition


def _triple(record: WinLossRecord | None) -> dict[str, int]:
    return (record or WinLossRecord()).to_dict()


def reshape_records(records: list[dict[str, Any]], team: str) -> dict[str, Any]:
    """Extract overall, conference, home and away records.

    Any missing split, or missing count within a split, is reported as 0.
    """
    record = TeamRecord.model_validate(records[0])
    return {
        "overall": _triple(record.total),
        "conference": _triple(record.conference_games),
        "home": _triple(record.home_games),
        "away": _triple(record.away_games),
    }


TEAM_RECORDS = FetcherDefinition(
    kind=StatKind.RECORDS,
    endpoint="/records",
    reshape=reshape_records,
    label="records",
)


async def get_team_records_impl(
    fetcher: StatisticFetcher,
    team: str,
    year: int | None = None,
) -> FetchResult:
    """Get a team's win-loss records (overall, conference, home, away).

    Args:
        fetcher: The statistic fetcher.
        team: Team name or alias.
        year: Season year (defaults to the current year).

    Returns:
        FetchSuccess with the four record splits, or FetchFailure.
    """
    return await fetcher.fetch(TEAM_RECORDS, team, year)
