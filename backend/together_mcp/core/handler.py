"""
Invocation Handler

Turns one generate_image call into one Together API request and maps
the outcome back to a tool result.

Faults:
- Unknown tool          -> McpError(METHOD_NOT_FOUND)
- Bad arguments         -> McpError(INVALID_PARAMS), no request is made
- Upstream non-2xx      -> CallToolResult(isError=True), not raised
- No upstream response  -> httpx.TransportError, raised
"""
import logging
from typing import Any, Optional

import httpx
from mcp import types
from mcp.shared.exceptions import McpError

from together_mcp.core.config import ConfigurationError, Settings
from together_mcp.core.registry import GENERATE_IMAGE, list_tools
from together_mcp.core.proxy import (
    resolve_request,
    call_together_api,
    success_result,
    api_error_result,
)

logger = logging.getLogger(__name__)


class ImageGenerationHandler:
    """
    Stateless handler shared by the stdio and HTTP transports.

    Holds only read-only configuration, so one instance can serve
    concurrent invocations.
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        if not settings.api_key:
            raise ConfigurationError("TOGETHER_API_KEY is required")
        self._settings = settings
        self._transport = transport

    def list_tools(self) -> types.ListToolsResult:
        return list_tools()

    async def call_tool(self, name: str, arguments: Any) -> types.CallToolResult:
        """
        Invoke a tool by name.

        Args:
            name: Tool name from the invocation envelope.
            arguments: The raw arguments object (may be None or any JSON value).

        Returns:
            The tool result; check isError for upstream API failures.
        """
        if name != GENERATE_IMAGE:
            raise McpError(types.ErrorData(code=types.METHOD_NOT_FOUND, message=f"Unknown tool: {name}"))

        request = resolve_request(
            arguments,
            policy=self._settings.mistyped_fields,
            falsy_fallback=self._settings.falsy_fallback,
        )
        logger.info(
            f"[ImageGen] Generating {request.n} image(s) with {request.model} "
            f"({request.width}x{request.height}, {request.steps} steps, {request.response_format})"
        )

        try:
            body = await call_together_api(
                request.model_dump(),
                self._settings.api_key,
                endpoint=self._settings.endpoint,
                timeout=self._settings.timeout,
                transport=self._transport,
            )
        except httpx.HTTPStatusError as e:
            logger.warning(f"[ImageGen] Upstream returned {e.response.status_code}")
            return api_error_result(e)

        return success_result(body)
