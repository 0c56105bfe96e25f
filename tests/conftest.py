"""Shared pytest fixtures for CFBD Stats MCP tests.

This module provides a fake upstream client, a controllable clock and
sample CFBD records shaped like the real API's JSON. All fixtures avoid
network access.
"""

import asyncio
from typing import Any

import pytest

from cfbd_stats_mcp.core.dispatcher import ToolDispatcher
from cfbd_stats_mcp.core.errors import UpstreamError
from cfbd_stats_mcp.data.fetcher import StatisticFetcher
from cfbd_stats_mcp.utils.cache import ResponseCache

# =============================================================================
# Fakes
# =============================================================================


class FakeClock:
    """A manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeUpstreamClient:
    """Stands in for UpstreamClient and records every query.

    Set ``response`` to the JSON value the next queries return, or
    ``error`` to an UpstreamError they raise.
    """

    def __init__(self, response: Any = None, api_key: str | None = "test-key") -> None:
        self.response = response
        self.error: UpstreamError | None = None
        self.api_key = api_key
        self.calls: list[tuple[str, dict[str, Any]]] = []

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def query(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        self.calls.append((endpoint, dict(params or {})))
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock."""
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> ResponseCache:
    """Create a response cache driven by the fake clock."""
    return ResponseCache(clock=clock)


@pytest.fixture
def upstream() -> FakeUpstreamClient:
    """Create a fake upstream client with no response configured."""
    return FakeUpstreamClient()


@pytest.fixture
def fetcher(upstream: FakeUpstreamClient, cache: ResponseCache) -> StatisticFetcher:
    """Create a StatisticFetcher over the fake client and cache."""
    return StatisticFetcher(upstream, cache)  # type: ignore[arg-type]


@pytest.fixture
def dispatcher(fetcher: StatisticFetcher) -> ToolDispatcher:
    """Create a ToolDispatcher over the test fetcher."""
    return ToolDispatcher(fetcher)


# =============================================================================
# Sample CFBD records
# =============================================================================


@pytest.fixture
def sample_player_stat_lines() -> list[dict[str, Any]]:
    """Stat lines from /stats/player/season for two players."""
    return [
        {
            "season": 2024,
            "playerId": "1",
            "player": "Jackson Arnold",
            "team": "Oklahoma",
            "position": "QB",
            "category": "passing",
            "statType": "YDS",
            "stat": "1421",
        },
        {
            "season": 2024,
            "playerId": "1",
            "player": "Jackson Arnold",
            "team": "Oklahoma",
            "position": "QB",
            "category": "passing",
            "statType": "TD",
            "stat": "12",
        },
        {
            "season": 2024,
            "playerId": "1",
            "player": "Jackson Arnold",
            "team": "Oklahoma",
            "position": "QB",
            "category": "rushing",
            "statType": "YDS",
            "stat": "402",
        },
        {
            "season": 2024,
            "playerId": "2",
            "player": "Deion Burks",
            "team": "Oklahoma",
            "position": "WR",
            "category": "receiving",
            "statType": "REC",
            "stat": "30",
        },
    ]


@pytest.fixture
def sample_games() -> list[dict[str, Any]]:
    """Games from /games/teams: one home win, one away loss, one unplayed."""
    return [
        {
            "id": 401,
            "week": 1,
            "startDate": "2024-08-31T23:00:00.000Z",
            "homeTeam": "Oklahoma",
            "awayTeam": "Temple",
            "homePoints": 51,
            "awayPoints": 3,
        },
        {
            "id": 402,
            "week": 7,
            "startDate": "2024-10-12T19:30:00.000Z",
            "homeTeam": "Texas",
            "awayTeam": "Oklahoma",
            "homePoints": 34,
            "awayPoints": 3,
        },
        {
            "id": 403,
            "week": 14,
            "startDate": "2024-11-30T00:00:00.000Z",
            "homeTeam": "LSU",
            "awayTeam": "Oklahoma",
            "homePoints": None,
            "awayPoints": None,
        },
    ]


@pytest.fixture
def sample_recruits() -> list[dict[str, Any]]:
    """Recruits from /recruiting/players with a spread of star ratings."""
    return [
        {
            "name": "Five Star",
            "position": "QB",
            "city": "Austin",
            "stateProvince": "TX",
            "school": "Westlake",
            "stars": 5,
            "rating": 0.9912,
            "ranking": 3,
            "positionRanking": 1,
            "stateRanking": 1,
            "height": 75,
            "weight": 210,
        },
        {"name": "Four A", "position": "WR", "stars": 4, "rating": 0.92, "stateProvince": "OK"},
        {"name": "Four B", "position": "CB", "stars": 4, "rating": 0.91},
        {"name": "Three Star", "position": "OL", "stars": 3, "rating": 0.86},
        {"name": "Two Star", "position": "LS", "stars": 2, "rating": 0.79},
    ]


@pytest.fixture
def sample_roster() -> list[dict[str, Any]]:
    """Players from /roster across two positions."""
    return [
        {
            "id": "10",
            "firstName": "Arch",
            "lastName": "Manning",
            "team": "Texas",
            "jersey": 16,
            "position": "QB",
            "year": 2,
            "height": 76,
            "weight": 219,
            "homeCity": "New Orleans",
            "homeState": "LA",
        },
        {
            "id": "11",
            "firstName": "Quinn",
            "lastName": "Ewers",
            "team": "Texas",
            "jersey": 3,
            "position": "QB",
            "year": 3,
            "homeState": "TX",
        },
        {
            "id": "12",
            "firstName": "Jaydon",
            "lastName": "Blue",
            "team": "Texas",
            "jersey": 23,
            "position": "RB",
            "year": 3,
        },
    ]
