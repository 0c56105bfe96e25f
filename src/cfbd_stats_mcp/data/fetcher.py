"""Statistic fetcher with normalization, caching and error handling.

This module provides the StatisticFetcher class that runs every statistic
lookup through the same template: normalize the team, resolve the year,
consult the cache, query the CFBD API, reshape the records and cache the
result. Upstream failures and empty answers come back as FetchFailure
values instead of exceptions.
"""

import logging
from typing import Any

from pydantic import ValidationError

from cfbd_stats_mcp.core.errors import EmptyResultError, UpstreamError
from cfbd_stats_mcp.core.models import FetchFailure, FetchResult, FetchSuccess
from cfbd_stats_mcp.data.client import UpstreamClient
from cfbd_stats_mcp.utils.cache import ResponseCache, build_cache_key
from cfbd_stats_mcp.utils.constants import get_current_year
from cfbd_stats_mcp.utils.enums import UpstreamErrorKind
from cfbd_stats_mcp.utils.teams import normalize_team_name
from cfbd_stats_mcp.utils.types import FetcherDefinition

logger = logging.getLogger(__name__)

# error_kind reported for answers that hold no data
EMPTY_ERROR_KIND = "empty"


class StatisticFetcher:
    """Fetches CFBD statistics with caching and failure absorption.

    The fetcher owns no global state: the upstream client and cache are
    passed in, so servers and tests each use their own instances.

    Concurrent misses for the same key are not de-duplicated; both calls
    query the API and the later write wins.
    """

    def __init__(self, client: UpstreamClient, cache: ResponseCache | None = None) -> None:
        """Initialize the StatisticFetcher.

        Args:
            client: The CFBD API client.
            cache: The response cache. A fresh one is created if omitted.
        """
        self.client = client
        self.cache = cache if cache is not None else ResponseCache()

    def _build_params(
        self,
        definition: FetcherDefinition,
        team: str,
        year: int,
        sub_filter: str | None,
    ) -> dict[str, Any]:
        """Build the query parameters for a definition."""
        params: dict[str, Any] = {"year": year}
        if definition.sends_team:
            params["team"] = team
        if definition.filter_param is not None:
            params[definition.filter_param] = sub_filter
        return params

    def _empty_message(
        self,
        definition: FetcherDefinition,
        team: str,
        year: int,
        sub_filter: str | None,
    ) -> str:
        message = f"No {definition.label} found for {team} in {year}"
        if sub_filter and definition.filter_param == "position":
            message = f"{message} at {sub_filter}"
        return message

    async def fetch(
        self,
        definition: FetcherDefinition,
        team: str,
        year: int | None = None,
        sub_filter: str | None = None,
    ) -> FetchResult:
        """Fetch one statistic kind for a team and season.

        Args:
            definition: The statistic kind to fetch.
            team: Team name as supplied by the caller.
            year: Season year. Defaults to the current calendar year.
            sub_filter: Optional category/position filter for kinds that
                        support one; ignored otherwise.

        Returns:
            FetchSuccess with the reshaped data, or FetchFailure describing
            why no data could be returned.
        """
        normalized_team = normalize_team_name(team)
        resolved_year = year if year is not None else get_current_year()
        if definition.filter_param is None:
            sub_filter = None

        cache_key = build_cache_key(
            definition.kind,
            normalized_team,
            resolved_year,
            sub_filter,
            has_filter=definition.filter_param is not None,
        )
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached

        params = self._build_params(definition, normalized_team, resolved_year, sub_filter)

        try:
            records = await self.client.query(definition.endpoint, params)
        except UpstreamError as e:
            logger.warning(f"Error fetching {definition.kind} for {normalized_team}: {e}")
            return FetchFailure(
                team=normalized_team,
                year=resolved_year,
                message=str(e),
                error_kind=str(e.kind),
            )

        if not records or not isinstance(records, list):
            if records and not isinstance(records, list):
                logger.warning(
                    f"Unexpected {type(records).__name__} from {definition.endpoint}, "
                    "expected a list"
                )
            return FetchFailure(
                team=normalized_team,
                year=resolved_year,
                message=self._empty_message(definition, normalized_team, resolved_year, sub_filter),
                error_kind=EMPTY_ERROR_KIND,
            )

        try:
            data = definition.reshape(records, normalized_team)
        except EmptyResultError as e:
            logger.info(f"{definition.kind} lookup came back empty: {e}")
            return FetchFailure(
                team=normalized_team,
                year=resolved_year,
                message=self._empty_message(definition, normalized_team, resolved_year, sub_filter),
                error_kind=EMPTY_ERROR_KIND,
            )
        except ValidationError as e:
            logger.warning(f"Unexpected record format from {definition.endpoint}: {e}")
            return FetchFailure(
                team=normalized_team,
                year=resolved_year,
                message=f"Unexpected CFBD response format from {definition.endpoint}",
                error_kind=str(UpstreamErrorKind.PARSE),
            )

        result = FetchSuccess(team=normalized_team, year=resolved_year, data=data)
        self.cache.put(cache_key, result)
        return result
