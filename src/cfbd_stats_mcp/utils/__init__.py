"""Utility modules for the CFBD Stats MCP server.

This package contains constants, enums, type definitions, team-name
normalization, formatting helpers and the response cache. Argument
validation lives in utils.validation and is imported from there, since it
depends on core.errors.
"""

from cfbd_stats_mcp.utils.cache import ResponseCache, build_cache_key
from cfbd_stats_mcp.utils.constants import (
    CACHE_TTL_SECONDS,
    CFBD_API_BASE,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    MAX_REQUEST_TIMEOUT_SECONDS,
    get_cfbd_api_base,
    get_cfbd_api_key,
    get_current_year,
    get_mcp_api_key,
    get_request_timeout,
)
from cfbd_stats_mcp.utils.enums import StatKind, ToolName, UpstreamErrorKind
from cfbd_stats_mcp.utils.helpers import format_full_name, format_hometown
from cfbd_stats_mcp.utils.teams import TEAM_ALIASES, normalize_team_name
from cfbd_stats_mcp.utils.types import FetcherDefinition

__all__ = [
    # Cache
    "ResponseCache",
    "build_cache_key",
    # Constants
    "CACHE_TTL_SECONDS",
    "CFBD_API_BASE",
    "DEFAULT_REQUEST_TIMEOUT_SECONDS",
    "MAX_REQUEST_TIMEOUT_SECONDS",
    "get_cfbd_api_base",
    "get_cfbd_api_key",
    "get_current_year",
    "get_mcp_api_key",
    "get_request_timeout",
    # Enums
    "StatKind",
    "ToolName",
    "UpstreamErrorKind",
    # Helpers
    "format_full_name",
    "format_hometown",
    # Teams
    "TEAM_ALIASES",
    "normalize_team_name",
    # Types
    "FetcherDefinition",
]
