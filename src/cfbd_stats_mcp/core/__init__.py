"""Core components for the CFBD Stats MCP server.

This package contains the server implementation, the tool dispatcher,
JSON-RPC handling, error types and response models. Only the models and
errors are re-exported here; import the server and dispatcher from their
modules.
"""

from cfbd_stats_mcp.core.errors import (
    CFBDStatsError,
    DispatchError,
    EmptyResultError,
    InvalidArgumentsError,
    UnknownToolError,
    UpstreamError,
)
from cfbd_stats_mcp.core.models import (
    FetchFailure,
    FetchResult,
    FetchSuccess,
    ToolCall,
    ToolResult,
    create_tool_result,
)

__all__ = [
    # Errors
    "CFBDStatsError",
    "DispatchError",
    "EmptyResultError",
    "InvalidArgumentsError",
    "UnknownToolError",
    "UpstreamError",
    # Models
    "FetchFailure",
    "FetchResult",
    "FetchSuccess",
    "ToolCall",
    "ToolResult",
    "create_tool_result",
]
