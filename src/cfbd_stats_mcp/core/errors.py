"""Exception types for the CFBD Stats MCP server.

Fetchers absorb UpstreamError and EmptyResultError into failure results;
only dispatch errors (unknown tool, invalid arguments) reach the protocol
layer.
"""

from cfbd_stats_mcp.utils.enums import UpstreamErrorKind


class CFBDStatsError(Exception):
    """Base class for all errors raised by this package."""

    pass


class UpstreamError(CFBDStatsError):
    """Raised when a CFBD API call fails.

    Attributes:
        kind: Failure classification (status, timeout, parse, network).
        detail: Human-readable description of the failure.
        status_code: HTTP status for status-classified failures.
        body: Response body text for status-classified failures.
    """

    def __init__(
        self,
        kind: UpstreamErrorKind,
        detail: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        self.kind = kind
        self.detail = detail
        self.status_code = status_code
        self.body = body
        super().__init__(detail)


class EmptyResultError(CFBDStatsError):
    """Raised when the upstream answer is valid but holds no usable data."""

    pass


class DispatchError(CFBDStatsError):
    """Base class for errors reported to the caller as protocol errors."""

    pass


class UnknownToolError(DispatchError):
    """Raised when a tool call names a tool that is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class InvalidArgumentsError(DispatchError):
    """Raised when tool arguments are missing or have the wrong type."""

    pass
