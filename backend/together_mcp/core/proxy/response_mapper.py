"""
Together to Tool Result Mapper

Wraps upstream responses into tool-call results. Successful bodies are
re-serialized as text without being restructured.
"""
import json

import httpx
from mcp import types

from together_mcp.models.image import ImageGenerationResult


def success_result(body: ImageGenerationResult) -> types.CallToolResult:
    """Return the upstream body as pretty-printed JSON text."""
    return types.CallToolResult(
        content=[
            types.TextContent(type="text", text=json.dumps(body, indent=2, ensure_ascii=False))
        ]
    )


def extract_error_message(error: httpx.HTTPStatusError) -> str:
    """
    Pull the human readable message out of an upstream error response.

    Together returns either {"message": ...} or an OpenAI style
    {"error": {"message": ...}} envelope. Falls back to the status line.
    """
    try:
        data = error.response.json()
    except ValueError:
        data = None

    if isinstance(data, dict):
        message = data.get("message")
        if message:
            return str(message)

        nested = data.get("error")
        if isinstance(nested, dict) and isinstance(nested.get("message"), str) and nested["message"]:
            return nested["message"]
        if isinstance(nested, str) and nested:
            return nested

    return f"Request failed with status code {error.response.status_code}"


def api_error_result(error: httpx.HTTPStatusError) -> types.CallToolResult:
    """Return a non-throwing error result for an upstream API failure."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=f"API Error: {extract_error_message(error)}")],
        isError=True,
    )
