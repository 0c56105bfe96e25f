"""Data fetching for the CFBD Stats MCP server.

This package contains the CFBD API client and the statistic fetcher that
adds normalization, caching and failure handling on top of it.
"""

from cfbd_stats_mcp.data.client import UpstreamClient
from cfbd_stats_mcp.data.fetcher import StatisticFetcher

__all__ = [
    "StatisticFetcher",
    "UpstreamClient",
]
