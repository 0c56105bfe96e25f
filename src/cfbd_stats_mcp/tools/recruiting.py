"""Recruiting data retrieval tools.

This module provides two MCP tools:
- get_recruiting_rankings: a team's recruiting class ranking for a year
- get_recruits: the individual commits in that class, broken out by stars
"""

from typing import Any

from cfbd_stats_mcp.core.models import FetchResult, Recruit
from cfbd_stats_mcp.data.fetcher import StatisticFetcher
from cfbd_stats_mcp.utils.constants import (
    FIVE_STAR,
    FOUR_STAR,
    THREE_STAR,
    UNKNOWN_LABEL,
)
from cfbd_stats_mcp.utils.enums import StatKind
from cfbd_stats_mcp.utils.helpers import format_hometown
from cfbd_stats_mcp.utils.types import FetcherDefinition


def reshape_recruiting_rankings(
    records: list[dict[str, Any]], team: str
) -> dict[str, Any]:
    """Unwrap the single-element array returned for a team's class."""
    return {"ranking": records[0]}


def summarize_recruit(recruit: Recruit) -> dict[str, Any]:
    """Convert a recruit record into the normalized field names.

    Args:
        recruit: The upstream recruit record.

    Returns:
        A dict with name, position, hometown, high_school, stars, rating,
        rank_overall, rank_position, rank_state, height and weight.
    """
    return {
        "name": recruit.name,
        "position": recruit.position,
        "hometown": format_hometown(recruit.city, recruit.state_province),
        "high_school": recruit.school or UNKNOWN_LABEL,
        "stars": recruit.stars or 0,
        "rating": recruit.rating or 0,
        "rank_overall": recruit.ranking or None,
        "rank_position": recruit.position_ranking or None,
        "rank_state": recruit.state_ranking or None,
        "height": recruit.height or None,
        "weight": recruit.weight or None,
    }


def reshape_recruits(records: list[dict[str, Any]], team: str) -> dict[str, Any]:
    """Partition a recruiting class by star rating.

    The star subsets hold the raw upstream records and match on exact
    ``stars`` equality, so two-star and unrated commits appear only in
    ``all_recruits``.

    Args:
        records: Raw /recruiting/players records.
        team: The normalized team name (unused).

    Returns:
        A dict with total_commits, five_stars, four_stars, three_stars and
        all_recruits.
    """
    recruits = [Recruit.model_validate(r) for r in records]
    return {
        "total_commits": len(records),
        "five_stars": [r for r, m in zip(records, recruits) if m.stars == FIVE_STAR],
        "four_stars": [r for r, m in zip(records, recruits) if m.stars == FOUR_STAR],
        "three_stars": [r for r, m in zip(records, recruits) if m.stars == THREE_STAR],
        "all_recruits": [summarize_recruit(m) for m in recruits],
    }


RECRUITING_RANKINGS = FetcherDefinition(
    kind=StatKind.RECRUITING_RANK,
    endpoint="/recruiting/teams",
    reshape=reshape_recruiting_rankings,
    label="recruiting rankings",
)

RECRUITS = FetcherDefinition(
    kind=StatKind.RECRUITS,
    endpoint="/recruiting/players",
    reshape=reshape_recruits,
    label="recruits",
    filter_param="position",
)


async def get_recruiting_rankings_impl(
    fetcher: StatisticFetcher,
    team: str,
    year: int | None = None,
) -> FetchResult:
    """Get a team's recruiting class ranking.

    Args:
        fetcher: The statistic fetcher.
        team: Team name or alias.
        year: Recruiting class year (defaults to the current year).

    Returns:
        FetchSuccess with the class "ranking" record, or FetchFailure.
    """
    return await fetcher.fetch(RECRUITING_RANKINGS, team, year)


async def get_recruits_impl(
    fetcher: StatisticFetcher,
    team: str,
    year: int | None = None,
    position: str | None = None,
) -> FetchResult:
    """Get individual recruits for a team, optionally for one position.

    Args:
        fetcher: The statistic fetcher.
        team: Team name or alias.
        year: Recruiting class year (defaults to the current year).
        position: Optional position filter (e.g. "QB", "WR").

    Returns:
        FetchSuccess with star subsets and the full list, or FetchFailure.
    """
    return await fetcher.fetch(RECRUITS, team, year, position)
