"""Utility functions for the CFBD Stats MCP server.

This module provides small formatting helpers shared by the reshaping
functions of several tools.
"""

from cfbd_stats_mcp.utils.constants import UNKNOWN_LABEL


def format_hometown(city: str | None, state: str | None) -> str:
    """Synthesize a hometown string from a city and a state.

    Args:
        city: City name, may be missing.
        state: State or province, may be missing.

    Returns:
        "City, ST" when both are present, the state alone when only it is
        present, otherwise "Unknown".

    Examples:
        >>> format_hometown("Austin", "TX")
        "Austin, TX"
        >>> format_hometown(None, "TX")
        "TX"
        >>> format_hometown("Austin", None)
        "Unknown"
    """
    if city and state:
        return f"{city}, {state}"
    return state or UNKNOWN_LABEL


def format_full_name(first_name: str | None, last_name: str | None) -> str:
    """Join first and last name, skipping missing parts.

    Returns:
        The full name, or "Unknown" if both parts are missing.
    """
    full_name = " ".join(part for part in (first_name, last_name) if part)
    return full_name or UNKNOWN_LABEL
