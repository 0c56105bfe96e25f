"""Data models for tool results and upstream CFBD records.

This module defines the response schemas returned by every tool, the
envelope handed to the protocol layer, and typed views over the raw JSON
records the CFBD API returns. Upstream models tolerate missing fields and
keep unknown ones, since the API adds fields over time.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

# =============================================================================
# Tool catalog
# =============================================================================


@dataclass
class ToolParameter:
    """Schema information for a single tool argument.

    Attributes:
        name: The argument name (e.g., "team").
        type: The JSON schema type ("string", "number").
        description: Help text shown to the calling assistant.
        required: Whether the argument must be supplied.
    """

    name: str
    type: str
    description: str
    required: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON schema property."""
        return {"type": self.type, "description": self.description}


@dataclass
class ToolSpec:
    """Static description of one tool for capability discovery.

    Attributes:
        name: The tool name.
        description: What the tool returns and when to use it.
        parameters: The tool's arguments in display order.
    """

    name: str
    description: str
    parameters: list[ToolParameter] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the MCP tools/list entry format."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": {
                "type": "object",
                "properties": {p.name: p.to_dict() for p in self.parameters},
                "required": [p.name for p in self.parameters if p.required],
            },
        }


# =============================================================================
# Fetch results
# =============================================================================


class FetchSuccess(BaseModel):
    """Result of a fetch that produced data.

    Attributes:
        success: Always True.
        team: The normalized team name that was queried.
        year: The season year that was queried.
        data: The kind-specific reshaped result.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    success: Literal[True] = Field(default=True, description="Always True")
    team: str = Field(description="Normalized team name")
    year: int = Field(description="Season year")
    data: dict[str, Any] = Field(
        default_factory=dict,
        description="Reshaped statistics",
    )

    def to_payload(self) -> dict[str, Any]:
        """Flatten into the caller-facing JSON object."""
        return {"success": True, "team": self.team, "year": self.year, **self.data}


class FetchFailure(BaseModel):
    """Result of a fetch that could not produce data.

    Failures are ordinary results, not exceptions: the tool call itself
    succeeds and carries this descriptive message back to the caller.

    Attributes:
        success: Always False.
        team: The normalized team name that was queried.
        year: The season year that was queried.
        message: Description of what went wrong.
        error_kind: Optional classification ("status", "timeout", "empty"...).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    success: Literal[False] = Field(default=False, description="Always False")
    team: str = Field(description="Normalized team name")
    year: int = Field(description="Season year")
    message: str = Field(description="Failure description")
    error_kind: str | None = Field(default=None, description="Failure class")

    def to_payload(self) -> dict[str, Any]:
        """Flatten into the caller-facing JSON object."""
        return {
            "success": False,
            "team": self.team,
            "year": self.year,
            "message": self.message,
        }


FetchResult = FetchSuccess | FetchFailure


# =============================================================================
# Protocol envelope
# =============================================================================


class ToolCall(BaseModel):
    """A parsed tool invocation: a tool name plus its arguments."""

    model_config = ConfigDict(extra="ignore")

    name: str
    arguments: dict[str, Any] = Field(default_factory=dict)


class TextContent(BaseModel):
    """A text content block in a tool result."""

    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """The protocol-level result of a dispatched tool call.

    Attributes:
        content: Content blocks; a single pretty-printed JSON text block.
        structured: The same payload as a JSON object.
        is_error: Whether the fetch failed. A failed fetch is still a
            successful dispatch.
    """

    content: list[TextContent] = Field(default_factory=list)
    structured: dict[str, Any] = Field(default_factory=dict)
    is_error: bool = False

    def to_rpc_result(self) -> dict[str, Any]:
        """Convert to the JSON-RPC ``result`` member of a tools/call reply.

        Returns:
            A dict with ``content``, ``structuredContent`` and ``isError``.
        """
        return {
            "content": [block.model_dump() for block in self.content],
            "structuredContent": self.structured,
            "isError": self.is_error,
        }


def create_tool_result(result: FetchResult) -> ToolResult:
    """Factory function to wrap a FetchResult in a ToolResult.

    Args:
        result: The fetch outcome, success or failure.

    Returns:
        A ToolResult whose text block is the payload as indented JSON.
    """
    payload = result.to_payload()
    return ToolResult(
        content=[TextContent(text=json.dumps(payload, indent=2, default=str))],
        structured=payload,
        is_error=not result.success,
    )


# =============================================================================
# Upstream CFBD records
# =============================================================================


class UpstreamRecord(BaseModel):
    """Base for typed views over CFBD JSON records."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class PlayerStatLine(UpstreamRecord):
    """One stat line from /stats/player/season (one player, one statType)."""

    player: str | None = None
    position: str | None = None
    category: str | None = None
    stat_type: str | None = Field(
        default=None, validation_alias=AliasChoices("statType", "stat_type")
    )
    stat: Any = None


class GameRecord(UpstreamRecord):
    """One game from /games/teams."""

    week: int | None = None
    start_date: str | None = Field(
        default=None, validation_alias=AliasChoices("start_date", "startDate")
    )
    home_team: str | None = Field(
        default=None, validation_alias=AliasChoices("home_team", "homeTeam")
    )
    away_team: str | None = Field(
        default=None, validation_alias=AliasChoices("away_team", "awayTeam")
    )
    home_points: int | float | None = Field(
        default=None, validation_alias=AliasChoices("home_points", "homePoints")
    )
    away_points: int | float | None = Field(
        default=None, validation_alias=AliasChoices("away_points", "awayPoints")
    )
    stats: Any = None


class Recruit(UpstreamRecord):
    """One recruit from /recruiting/players."""

    name: str | None = None
    position: str | None = None
    city: str | None = None
    state_province: str | None = Field(
        default=None,
        validation_alias=AliasChoices("stateProvince", "state_province"),
    )
    school: str | None = None
    stars: int | None = None
    rating: int | float | None = None
    ranking: int | None = None
    position_ranking: int | None = Field(
        default=None,
        validation_alias=AliasChoices("positionRanking", "position_ranking"),
    )
    state_ranking: int | None = Field(
        default=None,
        validation_alias=AliasChoices("stateRanking", "state_ranking"),
    )
    height: int | float | None = None
    weight: int | float | None = None


class TalentEntry(UpstreamRecord):
    """One team's composite from /talent."""

    school: str | None = None
    talent: int | float | str | None = None


class WinLossRecord(UpstreamRecord):
    """A wins/losses/ties triple nested in a /records entry."""

    wins: int | None = None
    losses: int | None = None
    ties: int | None = None

    def to_dict(self) -> dict[str, int]:
        """Convert to a triple with missing counts reported as 0."""
        return {
            "wins": self.wins or 0,
            "losses": self.losses or 0,
            "ties": self.ties or 0,
        }


class TeamRecord(UpstreamRecord):
    """One season record from /records."""

    total: WinLossRecord | None = None
    conference_games: WinLossRecord | None = Field(
        default=None,
        validation_alias=AliasChoices("conferenceGames", "conference_games"),
    )
    home_games: WinLossRecord | None = Field(
        default=None, validation_alias=AliasChoices("homeGames", "home_games")
    )
    away_games: WinLossRecord | None = Field(
        default=None, validation_alias=AliasChoices("awayGames", "away_games")
    )


class RosterPlayer(UpstreamRecord):
    """One player from /roster."""

    first_name: str | None = Field(
        default=None, validation_alias=AliasChoices("first_name", "firstName")
    )
    last_name: str | None = Field(
        default=None, validation_alias=AliasChoices("last_name", "lastName")
    )
    jersey: int | None = None
    position: str | None = None
    year: int | None = None
    height: int | float | None = None
    weight: int | float | None = None
    home_city: str | None = Field(
        default=None, validation_alias=AliasChoices("home_city", "homeCity")
    )
    home_state: str | None = Field(
        default=None, validation_alias=AliasChoices("home_state", "homeState")
    )
