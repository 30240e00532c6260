"""
MCP over HTTP Routes

Single-shot edge endpoint: one JSON request in, one JSON result out.
Accepts both the short method names (list_tools, call_tool) and the
MCP names (tools/list, tools/call).
"""
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from mcp.shared.exceptions import McpError

from together_mcp.core.handler import ImageGenerationHandler

logger = logging.getLogger(__name__)

router = APIRouter()

LIST_TOOLS_METHODS = ("list_tools", "tools/list")
CALL_TOOL_METHODS = ("call_tool", "tools/call")


class ToolRequest(BaseModel):
    """Invocation envelope posted to the edge endpoint."""
    method: str
    params: Optional[Dict[str, Any]] = None


def get_handler(request: Request) -> ImageGenerationHandler:
    return request.app.state.handler


def _error_response(message: str, code: Optional[int] = None) -> JSONResponse:
    content: Dict[str, Any] = {"error": message}
    if code is not None:
        content["code"] = code
    return JSONResponse(status_code=500, content=content)


async def dispatch(envelope: ToolRequest, handler: ImageGenerationHandler) -> Dict[str, Any]:
    """Route an envelope to the registry or the invocation handler."""
    if envelope.method in LIST_TOOLS_METHODS:
        result = handler.list_tools()
    elif envelope.method in CALL_TOOL_METHODS:
        params = envelope.params or {}
        result = await handler.call_tool(params.get("name"), params.get("arguments"))
    else:
        raise ValueError(f"Unknown method: {envelope.method}")

    return result.model_dump(mode="json", by_alias=True, exclude_none=True)


@router.post("/")
async def handle_request(request: Request, handler: ImageGenerationHandler = Depends(get_handler)):
    """
    Handle one tool request.

    Every fault comes back as HTTP 500 with {"error": message};
    protocol faults also carry the JSON-RPC error code.
    """
    try:
        body = await request.json()
        envelope = ToolRequest(**body)
        return JSONResponse(content=await dispatch(envelope, handler))
    except McpError as e:
        logger.info(f"[Edge] Rejected request: {e.error.message}")
        return _error_response(e.error.message, e.error.code)
    except Exception as e:
        logger.error(f"[MCP Error] {type(e).__name__}: {e}")
        return _error_response(str(e))
