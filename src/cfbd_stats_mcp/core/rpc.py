"""JSON-RPC request handling for the plain HTTP endpoint.

Some MCP clients post bare JSON-RPC messages (initialize, tools/list,
tools/call) to a single URL with a bearer token instead of speaking a
FastMCP transport. This module answers those messages using the same
ToolDispatcher the FastMCP tools use.
"""

import hmac
import logging
from typing import Any

from cfbd_stats_mcp.core.dispatcher import ToolDispatcher
from cfbd_stats_mcp.core.errors import InvalidArgumentsError, UnknownToolError
from cfbd_stats_mcp.core.models import ToolCall
from cfbd_stats_mcp.utils.constants import PROTOCOL_VERSION, SERVER_NAME, SERVER_VERSION

logger = logging.getLogger(__name__)

JSONRPC_VERSION = "2.0"

# JSON-RPC error codes
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603
UNAUTHORIZED = -32001


def verify_bearer_token(authorization: str | None, expected_token: str | None) -> str | None:
    """Compare an Authorization header against the configured access token.

    Args:
        authorization: The raw Authorization header value, if any.
        expected_token: The configured token. None disables the check.

    Returns:
        None if the caller is authorized, otherwise an error message.
    """
    if expected_token is None:
        return None
    if not authorization or not authorization.startswith("Bearer "):
        return "Missing or invalid authorization header"
    token = authorization[len("Bearer "):]
    if not hmac.compare_digest(token.encode(), expected_token.encode()):
        return "Invalid API key"
    return None


def rpc_error(code: int, message: str, request_id: Any = None) -> dict[str, Any]:
    """Build a JSON-RPC error response body."""
    return {
        "jsonrpc": JSONRPC_VERSION,
        "error": {"code": code, "message": message},
        "id": request_id,
    }


def rpc_result(result: dict[str, Any], request_id: Any = None) -> dict[str, Any]:
    """Build a JSON-RPC success response body."""
    return {"jsonrpc": JSONRPC_VERSION, "result": result, "id": request_id}


def initialize_result() -> dict[str, Any]:
    """Return the initialize handshake result."""
    return {
        "protocolVersion": PROTOCOL_VERSION,
        "capabilities": {"tools": {}},
        "serverInfo": {"name": SERVER_NAME, "version": SERVER_VERSION},
    }


async def handle_rpc_request(
    body: Any,
    dispatcher: ToolDispatcher,
    authorization: str | None = None,
    access_token: str | None = None,
) -> tuple[int, dict[str, Any]]:
    """Answer one JSON-RPC message.

    Args:
        body: The decoded request body.
        dispatcher: The dispatcher that runs tool calls.
        authorization: The request's Authorization header.
        access_token: The configured access token, or None for no auth.

    Returns:
        A tuple of (HTTP status code, JSON response body).
    """
    request_id = body.get("id") if isinstance(body, dict) else None

    auth_error = verify_bearer_token(authorization, access_token)
    if auth_error is not None:
        logger.warning(f"Rejected JSON-RPC request: {auth_error}")
        return 401, rpc_error(UNAUTHORIZED, auth_error, request_id)

    if not isinstance(body, dict) or not isinstance(body.get("method"), str):
        return 400, rpc_error(INVALID_REQUEST, "Invalid JSON-RPC request", request_id)

    method = body["method"]
    params = body.get("params") or {}

    if method == "initialize":
        return 200, rpc_result(initialize_result(), request_id)

    if method == "tools/list":
        return 200, rpc_result({"tools": dispatcher.list_tools()}, request_id)

    if method == "tools/call":
        if not isinstance(params, dict) or not isinstance(params.get("name"), str):
            return 400, rpc_error(INVALID_PARAMS, "tools/call requires a tool name", request_id)
        arguments = params.get("arguments") or {}
        if not isinstance(arguments, dict):
            return 400, rpc_error(INVALID_PARAMS, "Tool arguments must be an object", request_id)
        try:
            tool_call = ToolCall(name=params["name"], arguments=arguments)
            result = await dispatcher.dispatch(tool_call)
        except UnknownToolError as e:
            return 400, rpc_error(METHOD_NOT_FOUND, str(e), request_id)
        except InvalidArgumentsError as e:
            return 400, rpc_error(INVALID_PARAMS, str(e), request_id)
        except Exception as e:
            logger.exception(f"Unexpected error handling tools/call: {e}")
            return 500, rpc_error(INTERNAL_ERROR, str(e), request_id)
        return 200, rpc_result(result.to_rpc_result(), request_id)

    return 400, rpc_error(METHOD_NOT_FOUND, f"Unknown method: {method}", request_id)
