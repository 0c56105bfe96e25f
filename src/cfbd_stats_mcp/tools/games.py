"""Game-by-game results retrieval tool.

This module provides the get_game_stats MCP tool. Each game is reported
from the queried team's point of view: opponent, home or away, the result
and both scores.
"""

from typing import Any

from cfbd_stats_mcp.core.models import FetchResult, GameRecord
from cfbd_stats_mcp.data.fetcher import StatisticFetcher
from cfbd_stats_mcp.utils.enums import StatKind
from cfbd_stats_mcp.utils.types import FetcherDefinition


def summarize_game(game: GameRecord, team: str) -> dict[str, Any]:
    """Describe one game from the perspective of ``team``.

    The team counts as the home side only when its canonical name equals
    the game's home_team exactly; otherwise it is treated as the away side.

    Args:
        game: The upstream game record.
        team: The normalized team name.

    Returns:
        A dict with week, date, opponent, home_away, result, score_us,
        score_them and stats. result is "W" when the team outscored the
        opponent and "L" otherwise. A tie or a missing score, as for a game
        not yet played, counts as "L".
    """
    is_home = game.home_team == team
    if is_home:
        opponent, score_us, score_them = game.away_team, game.home_points, game.away_points
    else:
        opponent, score_us, score_them = game.home_team, game.away_points, game.home_points

    won = score_us is not None and score_them is not None and score_us > score_them
    result = "W" if won else "L"

    return {
        "week": game.week,
        "date": game.start_date,
        "opponent": opponent,
        "home_away": "home" if is_home else "away",
        "result": result,
        "score_us": score_us,
        "score_them": score_them,
        "stats": game.stats or {},
    }


def reshape_games(records: list[dict[str, Any]], team: str) -> dict[str, Any]:
    """Summarize every game in the season for ``team``."""
    return {
        "games": [summarize_game(GameRecord.model_validate(r), team) for r in records],
    }


GAME_STATS = FetcherDefinition(
    kind=StatKind.GAMES,
    endpoint="/games/teams",
    reshape=reshape_games,
    label="game stats",
)


async def get_game_stats_impl(
    fetcher: StatisticFetcher,
    team: str,
    year: int | None = None,
) -> FetchResult:
    """Get game-by-game results and statistics for a team.

    Args:
        fetcher: The statistic fetcher.
        team: Team name or alias.
        year: Season year (defaults to the current year).

    Returns:
        FetchSuccess with a "games" list, or FetchFailure.
    """
    return await fetcher.fetch(GAME_STATS, team, year)
