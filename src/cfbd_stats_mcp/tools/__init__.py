"""MCP tool definitions for college football statistics.

This package contains all MCP tools exposed by the CFBD Stats MCP server.
Tools are organized by category:

- player_stats: Player season statistics
- team_stats: Team season totals
- games: Game-by-game results
- recruiting: Recruiting class rankings and individual recruits
- talent: Roster talent composite
- records: Win-loss records
- rosters: Team rosters
- catalog: Static tool list for capability discovery
- registry: FastMCP tool registration (register_tools function)
"""

from cfbd_stats_mcp.tools.catalog import TOOL_CATALOG, list_tools
from cfbd_stats_mcp.tools.games import get_game_stats_impl
from cfbd_stats_mcp.tools.player_stats import get_player_stats_impl
from cfbd_stats_mcp.tools.recruiting import (
    get_recruiting_rankings_impl,
    get_recruits_impl,
)
from cfbd_stats_mcp.tools.records import get_team_records_impl
from cfbd_stats_mcp.tools.rosters import get_roster_impl
from cfbd_stats_mcp.tools.talent import get_talent_rating_impl
from cfbd_stats_mcp.tools.team_stats import get_team_stats_impl

__all__ = [
    "TOOL_CATALOG",
    "get_game_stats_impl",
    "get_player_stats_impl",
    "get_recruiting_rankings_impl",
    "get_recruits_impl",
    "get_roster_impl",
    "get_talent_rating_impl",
    "get_team_records_impl",
    "get_team_stats_impl",
    "list_tools",
]
