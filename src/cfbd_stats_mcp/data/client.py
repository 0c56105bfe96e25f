"""CollegeFootballData (CFBD) API client.

API docs: https://api.collegefootballdata.com/
Requires a free API key sent as a bearer token.
"""

import asyncio
import json
import logging
from typing import Any

import httpx

from cfbd_stats_mcp.core.errors import UpstreamError
from cfbd_stats_mcp.utils.constants import (
    CFBD_API_BASE,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    get_cfbd_api_base,
    get_cfbd_api_key,
    get_request_timeout,
)
from cfbd_stats_mcp.utils.enums import UpstreamErrorKind

logger = logging.getLogger(__name__)

# Response bodies quoted in error messages are cut to this many characters
MAX_ERROR_BODY_CHARS = 500


def _build_params(params: dict[str, Any] | None) -> dict[str, Any]:
    """Drop parameters whose value is None."""
    if not params:
        return {}
    return {key: value for key, value in params.items() if value is not None}


class UpstreamClient:
    """Issues authenticated GET queries against the CFBD API.

    Each query opens its own httpx.AsyncClient, so concurrent tool calls
    never share connection state. Calls are not retried.
    """

    def __init__(
        self,
        api_key: str | None,
        base_url: str = CFBD_API_BASE,
        timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: CFBD API key. When None the request is still sent and
                the API's 401 surfaces as a status-classified error.
            base_url: API root; endpoint paths are appended to it.
            timeout: Wall-clock limit in seconds for the whole request,
                including reading the body.
            transport: Optional httpx transport (e.g. httpx.MockTransport).
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_env(cls) -> "UpstreamClient":
        """Build a client from CFBD_API_KEY, CFBD_API_BASE_URL and CFBD_TIMEOUT_SECONDS."""
        return cls(
            api_key=get_cfbd_api_key(),
            base_url=get_cfbd_api_base(),
            timeout=get_request_timeout(),
        )

    @property
    def is_configured(self) -> bool:
        """Whether an API key is available."""
        return bool(self.api_key)

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key or ''}",
            "Accept": "application/json",
        }

    async def query(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        """Fetch one CFBD endpoint and return the parsed JSON body.

        Args:
            endpoint: Path below the base URL (e.g. '/roster').
            params: Query parameters; entries whose value is None are omitted.

        Returns:
            The decoded JSON value (usually a list of records).

        Raises:
            UpstreamError: On timeout, transport failure, non-2xx status,
                or a body that is not valid JSON.
        """
        url = f"{self.base_url}{endpoint}"
        query_params = _build_params(params)

        # Wall-clock bound; httpx.Timeout alone restarts on every read
        try:
            async with asyncio.timeout(self.timeout):
                async with httpx.AsyncClient(
                    timeout=httpx.Timeout(self.timeout),
                    transport=self._transport,
                ) as client:
                    response = await client.get(
                        url, params=query_params, headers=self._headers()
                    )
                    logger.debug(f"CFBD API call: {response.request.url}")
        except (TimeoutError, httpx.TimeoutException) as exc:
            raise UpstreamError(
                UpstreamErrorKind.TIMEOUT,
                f"CFBD API request timed out after {self.timeout:g}s: {endpoint}",
            ) from exc
        except httpx.HTTPError as exc:
            raise UpstreamError(
                UpstreamErrorKind.NETWORK,
                f"CFBD API request failed: {exc}",
            ) from exc

        if not response.is_success:
            body = response.text[:MAX_ERROR_BODY_CHARS]
            detail = f"CFBD API error: {response.status_code} {response.reason_phrase}"
            if body:
                detail = f"{detail} - {body}"
            raise UpstreamError(
                UpstreamErrorKind.STATUS,
                detail,
                status_code=response.status_code,
                body=body,
            )

        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise UpstreamError(
                UpstreamErrorKind.PARSE,
                f"CFBD API returned invalid JSON for {endpoint}: {exc}",
            ) from exc
