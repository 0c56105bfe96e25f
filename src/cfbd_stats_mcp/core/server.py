"""FastMCP server for college football statistics.

This module builds the FastMCP application, registers the statistics tools,
adds the plain JSON-RPC and health routes, and provides the CLI entry point
for running the server over stdio, SSE or streamable HTTP.
"""

import argparse
import logging
from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Any

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from cfbd_stats_mcp.core.dispatcher import ToolDispatcher
from cfbd_stats_mcp.core.rpc import INVALID_REQUEST, handle_rpc_request, rpc_error
from cfbd_stats_mcp.tools.catalog import TOOL_CATALOG
from cfbd_stats_mcp.tools.registry import register_tools
from cfbd_stats_mcp.utils.constants import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    SERVER_NAME,
    SERVER_VERSION,
    get_log_level,
    get_mcp_api_key,
)

logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    "College football statistics from CollegeFootballData.com: player and team "
    "stats, game-by-game results, recruiting classes and recruits, roster talent, "
    "win-loss records and rosters. Every tool takes a team name (aliases like "
    '"OU" or "Longhorns" work) and an optional season year.'
)

Lifespan = Callable[[FastMCP], AbstractAsyncContextManager[dict[str, Any]]]


def build_lifespan(dispatcher: ToolDispatcher, access_token: str | None) -> Lifespan:
    """Build the server lifespan for a dispatcher.

    Args:
        dispatcher: The dispatcher the server will use.
        access_token: The /rpc access token, used only for the startup log.

    Returns:
        An async context manager factory suitable for FastMCP(lifespan=...).
    """

    @asynccontextmanager
    async def lifespan(server: FastMCP) -> AsyncIterator[dict[str, Any]]:
        """Report configuration at startup and expose the dispatcher.

        Args:
            server: The FastMCP server instance.

        Yields:
            A dictionary containing the shared ToolDispatcher.
        """
        if dispatcher.fetcher.client.is_configured:
            logger.info("CFBD API key: configured")
        else:
            logger.warning("CFBD API key: MISSING (set CFBD_API_KEY)")
        logger.info(f"JSON-RPC auth: {'enabled' if access_token else 'disabled'}")
        yield {"dispatcher": dispatcher}

    return lifespan


def create_server(
    dispatcher: ToolDispatcher | None = None,
    access_token: str | None = None,
) -> FastMCP:
    """Build the FastMCP application.

    Args:
        dispatcher: The dispatcher serving tool calls. Built from the
            environment (CFBD_API_KEY etc.) when omitted.
        access_token: Bearer token required on the /rpc route. Read from
            MCP_API_KEY when omitted; no token disables the check.

    Returns:
        The configured FastMCP server.
    """
    if dispatcher is None:
        dispatcher = ToolDispatcher.from_env()
    if access_token is None:
        access_token = get_mcp_api_key()

    mcp = FastMCP(
        name=SERVER_NAME,
        instructions=INSTRUCTIONS,
        lifespan=build_lifespan(dispatcher, access_token),
    )
    register_tools(mcp, dispatcher)

    @mcp.custom_route("/health", methods=["GET"])
    async def health(request: Request) -> JSONResponse:
        return JSONResponse(
            {
                "status": "healthy",
                "service": SERVER_NAME,
                "version": SERVER_VERSION,
                "cfbd_configured": dispatcher.fetcher.client.is_configured,
                "tools": [spec.name for spec in TOOL_CATALOG],
            }
        )

    @mcp.custom_route("/rpc", methods=["POST"])
    async def rpc(request: Request) -> JSONResponse:
        try:
            body = await request.json()
        except ValueError:
            return JSONResponse(rpc_error(INVALID_REQUEST, "Invalid JSON body"), status_code=400)
        status, payload = await handle_rpc_request(
            body,
            dispatcher,
            authorization=request.headers.get("authorization"),
            access_token=access_token,
        )
        return JSONResponse(payload, status_code=status)

    return mcp


# Initialize the FastMCP application
mcp = create_server()


def main() -> None:
    """Run the MCP server.

    This is the entry point for the `cfbd-stats-mcp` command defined in
    pyproject.toml. It uses stdio transport by default; --sse or --http
    serve over the network on --host/--port.
    """
    parser = argparse.ArgumentParser(
        prog=SERVER_NAME,
        description="College football statistics MCP server backed by the CFBD API.",
    )
    transport = parser.add_mutually_exclusive_group()
    transport.add_argument("--sse", action="store_true", help="Serve over SSE")
    transport.add_argument(
        "--http", action="store_true", help="Serve over streamable HTTP"
    )
    parser.add_argument("--host", default=DEFAULT_HOST, help="Bind address")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="Bind port")
    args = parser.parse_args()

    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.sse:
        mcp.run(transport="sse", host=args.host, port=args.port)
    elif args.http:
        mcp.run(transport="http", host=args.host, port=args.port)
    else:
        mcp.run()


if __name__ == "__main__":
    main()
