"""Tool dispatcher mapping tool calls onto statistic fetchers.

The dispatcher knows nothing about the wire protocol: it takes a parsed
ToolCall, validates its arguments, runs the matching fetcher and wraps the
outcome in a ToolResult. Fetch failures are returned as results; only an
unknown tool or invalid arguments raise.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any, NamedTuple

from cfbd_stats_mcp.core.errors import UnknownToolError
from cfbd_stats_mcp.core.models import FetchResult, ToolCall, ToolResult, create_tool_result
from cfbd_stats_mcp.data.client import UpstreamClient
from cfbd_stats_mcp.data.fetcher import StatisticFetcher
from cfbd_stats_mcp.tools.catalog import list_tools
from cfbd_stats_mcp.tools.games import get_game_stats_impl
from cfbd_stats_mcp.tools.player_stats import get_player_stats_impl
from cfbd_stats_mcp.tools.recruiting import get_recruiting_rankings_impl, get_recruits_impl
from cfbd_stats_mcp.tools.records import get_team_records_impl
from cfbd_stats_mcp.tools.rosters import get_roster_impl
from cfbd_stats_mcp.tools.talent import get_talent_rating_impl
from cfbd_stats_mcp.tools.team_stats import get_team_stats_impl
from cfbd_stats_mcp.utils.cache import ResponseCache
from cfbd_stats_mcp.utils.enums import ToolName
from cfbd_stats_mcp.utils.validation import validate_tool_arguments

logger = logging.getLogger(__name__)


class ToolBinding(NamedTuple):
    """A tool's implementation and the name of its optional sub-filter."""

    impl: Callable[..., Awaitable[FetchResult]]
    filter_param: str | None = None


TOOL_BINDINGS: dict[str, ToolBinding] = {
    ToolName.PLAYER_STATS: ToolBinding(get_player_stats_impl, "category"),
    ToolName.TEAM_STATS: ToolBinding(get_team_stats_impl),
    ToolName.GAME_STATS: ToolBinding(get_game_stats_impl),
    ToolName.RECRUITING_RANKINGS: ToolBinding(get_recruiting_rankings_impl),
    ToolName.RECRUITS: ToolBinding(get_recruits_impl, "position"),
    ToolName.TALENT_RATING: ToolBinding(get_talent_rating_impl),
    ToolName.TEAM_RECORDS: ToolBinding(get_team_records_impl),
    ToolName.ROSTER: ToolBinding(get_roster_impl),
}


class ToolDispatcher:
    """Routes tool calls to statistic fetchers.

    Attributes:
        fetcher: The StatisticFetcher shared by every tool.
    """

    def __init__(self, fetcher: StatisticFetcher) -> None:
        self.fetcher = fetcher

    @classmethod
    def from_env(cls) -> "ToolDispatcher":
        """Build a dispatcher with a fresh cache and an environment-configured client."""
        return cls(StatisticFetcher(UpstreamClient.from_env(), ResponseCache()))

    def list_tools(self) -> list[dict[str, Any]]:
        """Return the static list of supported tools and their argument schemas."""
        return list_tools()

    async def call(self, name: str, arguments: dict[str, Any] | None = None) -> FetchResult:
        """Run a tool and return its raw FetchResult.

        Args:
            name: The tool name.
            arguments: The tool arguments.

        Returns:
            The fetcher's FetchSuccess or FetchFailure.

        Raises:
            UnknownToolError: If no tool with that name is registered.
            InvalidArgumentsError: If the arguments fail validation.
        """
        binding = TOOL_BINDINGS.get(name)
        if binding is None:
            raise UnknownToolError(name)

        validated = validate_tool_arguments(arguments, binding.filter_param)
        logger.info(f"Tool called: {name} with args: {validated}")
        return await binding.impl(self.fetcher, **validated)

    async def dispatch(self, tool_call: ToolCall) -> ToolResult:
        """Dispatch a parsed tool call and package the result.

        Args:
            tool_call: The tool name and arguments.

        Returns:
            A ToolResult. A failed fetch still yields a ToolResult, with
            is_error set and the failure message in its text.

        Raises:
            UnknownToolError: If no tool with that name is registered.
            InvalidArgumentsError: If the arguments fail validation.
        """
        result = await self.call(tool_call.name, tool_call.arguments)
        return create_tool_result(result)
