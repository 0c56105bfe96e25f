"""Enumerations for the CFBD Stats MCP server.

This module provides StrEnum classes for commonly used string constants,
improving type safety and IDE support while maintaining backward compatibility
with string-based JSON responses.
"""

from enum import StrEnum


class ToolName(StrEnum):
    """Tool names exposed through the MCP server."""

    PLAYER_STATS = "get_player_stats"
    TEAM_STATS = "get_team_stats"
    GAME_STATS = "get_game_stats"
    RECRUITING_RANKINGS = "get_recruiting_rankings"
    RECRUITS = "get_recruits"
    TALENT_RATING = "get_talent_rating"
    TEAM_RECORDS = "get_team_records"
    ROSTER = "get_roster"


class StatKind(StrEnum):
    """Statistic kinds, used as the leading segment of cache keys."""

    PLAYER = "player"
    TEAM = "team"
    GAMES = "games"
    RECRUITING_RANK = "recruiting_rank"
    RECRUITS = "recruits"
    TALENT = "talent"
    RECORDS = "records"
    ROSTER = "roster"


class UpstreamErrorKind(StrEnum):
    """Classification of upstream API failures."""

    STATUS = "status"
    TIMEOUT = "timeout"
    PARSE = "parse"
    NETWORK = "network"
