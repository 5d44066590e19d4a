"""
JSON-RPC 2.0 dispatcher for the MCP transcript tools.

Shared by the stdio loop and the HTTP endpoint.
"""

import json
import traceback
from typing import Any, Dict, Optional

from pydantic import ValidationError
from pydantic_core import to_jsonable_python

from transcript_pro.api.schemas import ToolInput
from transcript_pro.api.tools import TOOL_DEFINITIONS, TOOLS
from transcript_pro.config import config
from transcript_pro.utils.error_handling import ErrorCodes, RPCError, TranscriptError, to_rpc_error
from transcript_pro.utils.logger import logging


def handle_initialize(params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Handle the MCP initialize request."""
    return {
        "protocolVersion": config.PROTOCOL_VERSION,
        "serverInfo": {"name": config.SERVER_NAME, "version": config.APP_VERSION},
        "capabilities": {"tools": {}},
    }


def handle_tools_list(params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Handle the MCP tools/list request."""
    return {"tools": TOOL_DEFINITIONS}


def handle_tools_call(params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Handle the MCP tools/call request.

    Args:
        params: ``{"name": <tool name>, "arguments": {...}}``

    Returns:
        MCP tool result with a single text content item
    """
    if params is None:
        params = {}
    if not isinstance(params, dict):
        raise RPCError(ErrorCodes.INVALID_PARAMS, "Invalid params: expected an object")

    name = params.get("name")
    arguments = params.get("arguments")

    if not name or not isinstance(arguments, dict):
        raise RPCError(ErrorCodes.INVALID_PARAMS, "Missing required parameters: name and arguments")

    tool = TOOLS.get(name)
    if tool is None:
        raise RPCError(ErrorCodes.METHOD_NOT_FOUND, f"Unknown tool: {name}")

    if not arguments.get("url"):
        raise RPCError(ErrorCodes.INVALID_PARAMS, "Missing required parameter: url")

    tool_input = ToolInput.model_validate(arguments)
    logging.info(f"Calling tool {name} for {tool_input.url}")
    result = tool(tool_input)

    if isinstance(result, str):
        text = result
    else:
        text = json.dumps(to_jsonable_python(result, by_alias=True), indent=2, ensure_ascii=False)

    return {"content": [{"type": "text", "text": text}]}


def handle_ping(params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    return {}


METHODS = {
    "initialize": handle_initialize,
    "tools/list": handle_tools_list,
    "tools/call": handle_tools_call,
    "ping": handle_ping,
}


def error_response(code: int, message: str, request_id: Any = None) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "error": {"code": code, "message": message}, "id": request_id}


def handle_request(request: Any) -> Optional[Dict[str, Any]]:
    """
    Handle a decoded JSON-RPC request.

    Requests without an ``id`` are notifications: they are processed but
    produce no response.

    Args:
        request: Decoded JSON-RPC request object

    Returns:
        The JSON-RPC response, or None for notifications
    """
    if not isinstance(request, dict) or request.get("jsonrpc") != "2.0":
        request_id = request.get("id") if isinstance(request, dict) else None
        return error_response(ErrorCodes.INVALID_REQUEST, "Invalid JSON-RPC version (must be 2.0)", request_id)

    is_notification = "id" not in request
    response: Dict[str, Any] = {"jsonrpc": "2.0", "id": request.get("id")}

    method = request.get("method")
    handler = METHODS.get(method)

    try:
        if handler is None:
            if is_notification:
                logging.debug(f"Ignoring notification: {method}")
                return None
            raise RPCError(ErrorCodes.METHOD_NOT_FOUND, f"Method not found: {method}")
        response["result"] = handler(request.get("params"))
    except (RPCError, ValidationError, TranscriptError) as e:
        logging.error(f"Error handling {method}: {str(e)}")
        response["error"] = to_rpc_error(e)
    except Exception as e:
        logging.error(f"Unexpected error handling {method}: {str(e)}")
        logging.error(traceback.format_exc())
        response["error"] = to_rpc_error(e)

    if is_notification:
        return None
    return response


def handle_line(line: str) -> Optional[Dict[str, Any]]:
    """Decode one line of JSON and handle it as a request."""
    try:
        request = json.loads(line)
    except json.JSONDecodeError as e:
        return {
            "jsonrpc": "2.0",
            "error": {"code": ErrorCodes.PARSE_ERROR, "message": "Parse error", "data": {"error": str(e)}},
            "id": None,
        }
    return handle_request(request)
