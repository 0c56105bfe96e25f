"""Static tool catalog for capability discovery.

The catalog is fixed data: it is what tools/list returns and is never
computed from the registered fetchers.
"""

from cfbd_stats_mcp.core.models import ToolParameter, ToolSpec
from cfbd_stats_mcp.utils.enums import ToolName

TEAM_PARAMETER = ToolParameter(
    name="team",
    type="string",
    description='Team name (e.g., "Oklahoma", "Texas")',
    required=True,
)

YEAR_PARAMETER = ToolParameter(
    name="year",
    type="number",
    description="Season year (defaults to current year)",
)

CLASS_YEAR_PARAMETER = ToolParameter(
    name="year",
    type="number",
    description="Recruiting class year (defaults to current year)",
)

CATEGORY_PARAMETER = ToolParameter(
    name="category",
    type="string",
    description=(
        'Stat category: "passing", "rushing", "receiving", "defensive", '
        '"kicking" (optional - returns all if omitted)'
    ),
)

POSITION_PARAMETER = ToolParameter(
    name="position",
    type="string",
    description='Filter by position (e.g., "QB", "RB", "WR") - optional',
)

TOOL_CATALOG: tuple[ToolSpec, ...] = (
    ToolSpec(
        name=ToolName.PLAYER_STATS,
        description=(
            "Get individual player statistics (passing, rushing, receiving, etc.) "
            "for a specific team. Use this when asked about a specific player or "
            '"player stats".'
        ),
        parameters=[TEAM_PARAMETER, YEAR_PARAMETER, CATEGORY_PARAMETER],
    ),
    ToolSpec(
        name=ToolName.TEAM_STATS,
        description=(
            "Get team season totals (total yards, points, turnovers, etc.). "
            'Use this when asked about team performance or "team stats".'
        ),
        parameters=[TEAM_PARAMETER, YEAR_PARAMETER],
    ),
    ToolSpec(
        name=ToolName.GAME_STATS,
        description=(
            "Get game-by-game results and statistics for a team. Use this when "
            'asked about "game by game" or "results by game".'
        ),
        parameters=[TEAM_PARAMETER, YEAR_PARAMETER],
    ),
    ToolSpec(
        name=ToolName.RECRUITING_RANKINGS,
        description=(
            "Get team recruiting class rankings with total commits, average rating, "
            'and star distribution. Use when asked about "recruiting class", '
            '"recruiting ranking", or "how many stars".'
        ),
        parameters=[TEAM_PARAMETER, CLASS_YEAR_PARAMETER],
    ),
    ToolSpec(
        name=ToolName.RECRUITS,
        description=(
            "Get individual recruits with names, positions, hometowns, star ratings, "
            'and rankings. Use when asked about "who did we sign", "show me recruits", '
            "or asking about specific recruit names."
        ),
        parameters=[TEAM_PARAMETER, CLASS_YEAR_PARAMETER, POSITION_PARAMETER],
    ),
    ToolSpec(
        name=ToolName.TALENT_RATING,
        description=(
            "Get team roster talent composite rating and national ranking. Use when "
            'asked about "how talented is the roster", "talent rating", or '
            '"how stacked are we".'
        ),
        parameters=[TEAM_PARAMETER, YEAR_PARAMETER],
    ),
    ToolSpec(
        name=ToolName.TEAM_RECORDS,
        description=(
            "Get team win-loss records (overall, conference, home, away). Use when "
            'asked about "our record", "conference record", "home record", or '
            '"away record".'
        ),
        parameters=[TEAM_PARAMETER, YEAR_PARAMETER],
    ),
    ToolSpec(
        name=ToolName.ROSTER,
        description=(
            "Get complete team roster with player names, positions, jersey numbers, "
            "year (Fr/So/Jr/Sr), and hometowns. Use when asked \"who's on the team\", "
            '"show me the roster", or asking about specific position groups.'
        ),
        parameters=[TEAM_PARAMETER, YEAR_PARAMETER],
    ),
)


def list_tools() -> list[dict]:
    """Return the catalog in MCP tools/list format."""
    return [spec.to_dict() for spec in TOOL_CATALOG]
