"""Constants for the CFBD Stats MCP server.

This module centralizes configuration constants used throughout the package.
Update values here to change behavior across the codebase. Values that can be
overridden at runtime are read through the getter functions below.
"""

import os
from datetime import date

# Base URL of the CollegeFootballData REST API
CFBD_API_BASE: str = "https://api.collegefootballdata.com"

# Upstream request timeout (seconds). Overridable via CFBD_TIMEOUT_SECONDS,
# but never beyond MAX_REQUEST_TIMEOUT_SECONDS.
DEFAULT_REQUEST_TIMEOUT_SECONDS: float = 10.0
MAX_REQUEST_TIMEOUT_SECONDS: float = 15.0

# Response cache time-to-live (seconds). Fixed: 5 minutes.
CACHE_TTL_SECONDS: int = 5 * 60

# Server identity reported by the initialize handshake and /health
SERVER_NAME: str = "cfbd-stats-mcp"
SERVER_VERSION: str = "0.1.0"
PROTOCOL_VERSION: str = "2025-06-18"

# Default network settings for the SSE and HTTP transports
DEFAULT_HOST: str = "0.0.0.0"
DEFAULT_PORT: int = 8000

# Star ratings broken out by get_recruits
FIVE_STAR: int = 5
FOUR_STAR: int = 4
THREE_STAR: int = 3

# Fallback labels used when reshaping upstream records
UNKNOWN_LABEL: str = "Unknown"
UNKNOWN_POSITION: str = "N/A"
DEFAULT_STAT_CATEGORY: str = "general"


def get_cfbd_api_key() -> str | None:
    """Get the CFBD API credential from the CFBD_API_KEY environment variable.

    Returns:
        The API key, or None if it is unset or blank.
    """
    value = os.environ.get("CFBD_API_KEY", "").strip()
    return value or None


def get_mcp_api_key() -> str | None:
    """Get the optional caller access token from MCP_API_KEY.

    When unset, the JSON-RPC route accepts unauthenticated requests.

    Returns:
        The access token, or None if it is unset or blank.
    """
    value = os.environ.get("MCP_API_KEY", "").strip()
    return value or None


def get_cfbd_api_base() -> str:
    """Get the upstream base URL, honoring CFBD_API_BASE_URL if set.

    Returns:
        The base URL without a trailing slash.
    """
    value = os.environ.get("CFBD_API_BASE_URL", "").strip()
    return (value or CFBD_API_BASE).rstrip("/")


def get_request_timeout() -> float:
    """Get the upstream request timeout in seconds.

    Reads from the CFBD_TIMEOUT_SECONDS environment variable if set to a
    positive number, otherwise uses DEFAULT_REQUEST_TIMEOUT_SECONDS. The
    result is capped at MAX_REQUEST_TIMEOUT_SECONDS.

    Returns:
        The timeout in seconds.
    """
    env_value = os.environ.get("CFBD_TIMEOUT_SECONDS")
    if env_value is not None:
        try:
            timeout = float(env_value)
            if timeout > 0:
                return min(timeout, MAX_REQUEST_TIMEOUT_SECONDS)
        except ValueError:
            pass
    return DEFAULT_REQUEST_TIMEOUT_SECONDS


def get_log_level() -> str:
    """Get the logging level name from LOG_LEVEL (default INFO)."""
    return os.environ.get("LOG_LEVEL", "INFO").upper()


def get_current_year() -> int:
    """Return the current calendar year, the default season for every tool.

    College football lookups use the calendar year as-is, so a query in
    February targets the upcoming signing class.

    Returns:
        The current calendar year as an integer.
    """
    return date.today().year
