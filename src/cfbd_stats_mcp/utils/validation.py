"""Shared validation utilities for tool arguments.

This module checks and coerces the arguments of incoming tool calls before
they reach a fetcher. Every tool requires a team; year and the optional
sub-filters are type-checked here so fetchers can trust their inputs.
"""

from typing import Any

from cfbd_stats_mcp.core.errors import InvalidArgumentsError


def validate_team(team: Any) -> str:
    """Validate the required team argument.

    Args:
        team: The raw team value from the tool call.

    Returns:
        The team name with surrounding whitespace removed.

    Raises:
        InvalidArgumentsError: If team is missing, not a string, or blank.
    """
    if team is None:
        raise InvalidArgumentsError("Missing required argument: team")
    if not isinstance(team, str):
        raise InvalidArgumentsError(
            f"Argument 'team' must be a string, got {type(team).__name__}"
        )
    team = team.strip()
    if not team:
        raise InvalidArgumentsError("Argument 'team' must not be empty")
    return team


def validate_year(year: Any) -> int | None:
    """Validate and coerce the optional year argument.

    JSON clients often send numbers as floats (2024.0) or strings ("2024");
    both are accepted when they hold a whole number. Booleans are rejected
    even though Python treats them as integers.

    Args:
        year: The raw year value, or None to use the current year.

    Returns:
        The year as an int, or None if it was omitted.

    Raises:
        InvalidArgumentsError: If year is not a whole number.
    """
    if year is None:
        return None
    if isinstance(year, bool):
        raise InvalidArgumentsError("Argument 'year' must be an integer")
    if isinstance(year, int):
        return year
    if isinstance(year, float) and year.is_integer():
        return int(year)
    if isinstance(year, str) and year.strip().isdigit():
        return int(year.strip())
    raise InvalidArgumentsError(f"Argument 'year' must be an integer, got {year!r}")


def validate_optional_string(name: str, value: Any) -> str | None:
    """Validate an optional string filter such as category or position.

    Args:
        name: The argument name, used in error messages.
        value: The raw value.

    Returns:
        The stripped string, or None if omitted or blank.

    Raises:
        InvalidArgumentsError: If the value is present but not a string.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidArgumentsError(
            f"Argument '{name}' must be a string, got {type(value).__name__}"
        )
    return value.strip() or None


def validate_tool_arguments(
    arguments: dict[str, Any] | None,
    filter_param: str | None = None,
) -> dict[str, Any]:
    """Validate the full argument mapping of a tool call.

    Args:
        arguments: The caller-supplied arguments (may be None).
        filter_param: Name of the tool's optional sub-filter, if it has one.

    Returns:
        A dict with "team", "year" and, when applicable, the filter key.
        Unrecognized arguments are dropped.

    Raises:
        InvalidArgumentsError: If arguments is not a mapping or any value
            fails validation.
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, dict):
        raise InvalidArgumentsError("Tool arguments must be an object")

    validated: dict[str, Any] = {
        "team": validate_team(arguments.get("team")),
        "year": validate_year(arguments.get("year")),
    }
    if filter_param is not None:
        validated[filter_param] = validate_optional_string(
            filter_param, arguments.get(filter_param)
        )
    return validated
