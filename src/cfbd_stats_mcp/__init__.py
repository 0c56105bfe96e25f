"""CFBD Stats MCP Server.

An MCP server that exposes college football statistics from the
CollegeFootballData.com API to AI assistants as a small set of tools.

Package Structure:
- core/: Server, dispatcher, JSON-RPC handling, errors and response models
- data/: CFBD API client and the caching statistic fetcher
- utils/: Constants, enums, validation, team names and caching utilities
- tools/: One module per statistic kind plus the tool catalog and registry
"""

__version__ = "0.1.0"

# Only expose the main entry point at the top level
from cfbd_stats_mcp.core.server import main

__all__ = [
    "__version__",
    "main",
]
