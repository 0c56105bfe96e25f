"""Type definitions for the CFBD Stats MCP server.

This module provides typed structures for fetcher definitions and other
reusable type aliases used throughout the package.
"""

from collections.abc import Callable
from typing import Any, NamedTuple

from cfbd_stats_mcp.utils.enums import StatKind

# Reshapes raw upstream records for a team into a kind-specific result
Reshaper = Callable[[list[dict[str, Any]], str], dict[str, Any]]


class FetcherDefinition(NamedTuple):
    """Definition of one statistic kind and how to fetch it.

    Attributes:
        kind: The statistic kind (leading segment of cache keys).
        endpoint: CFBD endpoint path, e.g. "/roster".
        reshape: Callable turning the raw records and normalized team
                 into the result's data mapping.
        label: Noun used in "No <label> found" messages.
        filter_param: Name of the optional sub-filter query parameter
                      ("category", "position"), or None.
        sends_team: Whether the team is passed upstream. False for
                    endpoints that return every team for the season.
    """

    kind: StatKind
    endpoint: str
    reshape: Reshaper
    label: str
    filter_param: str | None = None
    sends_team: bool = True
