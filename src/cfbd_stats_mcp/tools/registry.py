"""FastMCP tool wrappers for the CFBD statistics tools.

Each statistic kind is exposed as an `@mcp.tool()` function whose signature and
docstring are what MCP clients discover. The wrappers hold no logic of their
own: they hand their arguments to the shared ToolDispatcher, the same one the
plain JSON-RPC route uses, and turn dispatch errors into ToolError.
"""

from typing import Annotated, Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from cfbd_stats_mcp.core.dispatcher import ToolDispatcher
from cfbd_stats_mcp.core.errors import DispatchError
from cfbd_stats_mcp.utils.enums import ToolName

TeamArg = Annotated[
    str,
    Field(description='Team name or common alias (e.g., "Oklahoma", "OU", "Longhorns").'),
]
YearArg = Annotated[
    int | None,
    Field(description="Season year (defaults to the current year).", ge=1869),
]
ClassYearArg = Annotated[
    int | None,
    Field(description="Recruiting class year (defaults to the current year).", ge=1869),
]


async def run_tool(
    dispatcher: ToolDispatcher,
    name: str,
    arguments: dict[str, Any],
) -> dict[str, Any]:
    """Run a tool through the dispatcher and return its JSON payload.

    Args:
        dispatcher: The dispatcher to run the call on.
        name: The tool name.
        arguments: The tool arguments.

    Returns:
        The flattened FetchSuccess or FetchFailure payload.

    Raises:
        ToolError: If the dispatcher rejects the call.
    """
    try:
        result = await dispatcher.call(name, arguments)
    except DispatchError as e:
        raise ToolError(str(e)) from e
    return result.to_payload()


def register_tools(mcp: FastMCP, dispatcher: ToolDispatcher) -> None:
    """Attach the eight statistics tools to a FastMCP server.

    Args:
        mcp: The server to register on.
        dispatcher: The dispatcher the tools delegate to.
    """

    @mcp.tool()
    async def get_player_stats(
        team: TeamArg,
        year: YearArg = None,
        category: Annotated[
            str | None,
            Field(
                description='Stat category: "passing", "rushing", "receiving", '
                '"defensive", "kicking". Returns all categories if omitted.'
            ),
        ] = None,
    ) -> dict[str, Any]:
        """Get individual player statistics for a specific team.

        Use this when asked about a specific player or "player stats".
        Each player has the latest raw stat line per category under "stats"
        and every stat value under "stat_types" by category and stat type.

        Args:
            team: Team name (e.g., "Oklahoma", "Texas").
            year: Season year (defaults to current year).
            category: Optional stat category filter.

        Returns:
            Players keyed by name with position and per-category stats, or a
            message explaining why no data was found.

        Examples:
            All stats: get_player_stats("Oklahoma", 2024)
            Passing only: get_player_stats("OU", 2024, category="passing")
        """
        return await run_tool(
            dispatcher,
            ToolName.PLAYER_STATS,
            {"team": team, "year": year, "category": category},
        )

    @mcp.tool()
    async def get_team_stats(team: TeamArg, year: YearArg = None) -> dict[str, Any]:
        """Get team season totals (total yards, points, turnovers, etc.).

        Use this when asked about team performance or "team stats".

        Args:
            team: Team name (e.g., "Oklahoma", "Texas").
            year: Season year (defaults to current year).

        Returns:
            The team's season statistics record.
        """
        return await run_tool(dispatcher, ToolName.TEAM_STATS, {"team": team, "year": year})

    @mcp.tool()
    async def get_game_stats(team: TeamArg, year: YearArg = None) -> dict[str, Any]:
        """Get game-by-game results and statistics for a team.

        Use this when asked about "game by game" or "results by game". Each
        game lists the opponent, home/away, W/L and both scores from the
        team's point of view. Games without both scores are listed as "L".

        Args:
            team: Team name (e.g., "Oklahoma", "Texas").
            year: Season year (defaults to current year).

        Returns:
            A list of games for the season.
        """
        return await run_tool(dispatcher, ToolName.GAME_STATS, {"team": team, "year": year})

    @mcp.tool()
    async def get_recruiting_rankings(
        team: TeamArg, year: ClassYearArg = None
    ) -> dict[str, Any]:
        """Get a team's recruiting class ranking.

        Use when asked about "recruiting class", "recruiting ranking", or
        "how many stars". Includes rank, points and class composition.

        Args:
            team: Team name (e.g., "Oklahoma", "Texas").
            year: Recruiting class year (defaults to current year).

        Returns:
            The class ranking record.
        """
        return await run_tool(
            dispatcher, ToolName.RECRUITING_RANKINGS, {"team": team, "year": year}
        )

    @mcp.tool()
    async def get_recruits(
        team: TeamArg,
        year: ClassYearArg = None,
        position: Annotated[
            str | None,
            Field(description='Filter by position (e.g., "QB", "RB", "WR").'),
        ] = None,
    ) -> dict[str, Any]:
        """Get individual recruits with positions, hometowns, stars and rankings.

        Use when asked "who did we sign", "show me recruits", or about specific
        recruit names. Five-, four- and three-star commits are broken out
        alongside the full list.

        Args:
            team: Team name (e.g., "Oklahoma", "Texas").
            year: Recruiting class year (defaults to current year).
            position: Optional position filter.

        Returns:
            total_commits, star subsets and all_recruits.

        Examples:
            Whole class: get_recruits("Texas", 2025)
            Quarterbacks: get_recruits("Texas", 2025, position="QB")
        """
        return await run_tool(
            dispatcher,
            ToolName.RECRUITS,
            {"team": team, "year": year, "position": position},
        )

    @mcp.tool()
    async def get_talent_rating(team: TeamArg, year: YearArg = None) -> dict[str, Any]:
        """Get a team's roster talent composite rating and national ranking.

        Use when asked "how talented is the roster", "talent rating", or
        "how stacked are we".

        Args:
            team: Team name (e.g., "Oklahoma", "Texas").
            year: Season year (defaults to current year).

        Returns:
            talent_rating, national_rank and total_teams_ranked.
        """
        return await run_tool(
            dispatcher, ToolName.TALENT_RATING, {"team": team, "year": year}
        )

    @mcp.tool()
    async def get_team_records(team: TeamArg, year: YearArg = None) -> dict[str, Any]:
        """Get team win-loss records (overall, conference, home, away).

        Use when asked about "our record", "conference record", "home record",
        or "away record".

        Args:
            team: Team name (e.g., "Oklahoma", "Texas").
            year: Season year (defaults to current year).

        Returns:
            wins/losses/ties for each split.
        """
        return await run_tool(dispatcher, ToolName.TEAM_RECORDS, {"team": team, "year": year})

    @mcp.tool()
    async def get_roster(team: TeamArg, year: YearArg = None) -> dict[str, Any]:
        """Get a complete team roster.

        Includes player names, positions, jersey numbers, class year and
        hometowns. Use when asked "who's on the team", "show me the roster",
        or about specific position groups.

        Args:
            team: Team name (e.g., "Oklahoma", "Texas").
            year: Season year (defaults to current year).

        Returns:
            total_players, players grouped by position, and a flat list.
        """
        return await run_tool(dispatcher, ToolName.ROSTER, {"team": team, "year": year})
