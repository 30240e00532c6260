"""
Upstream Client

Handles making requests to the Together AI image generation API.
"""
import httpx
from typing import Any, Dict, Optional

from together_mcp.core.config import TOGETHER_API_ENDPOINT
from together_mcp.models.image import ImageGenerationResult


async def call_together_api(
    payload: Dict[str, Any],
    api_key: str,
    endpoint: str = TOGETHER_API_ENDPOINT,
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ImageGenerationResult:
    """
    Make a single image generation request to Together AI.

    Args:
        payload: The resolved request body (model, prompt, width, height, steps, n, response_format).
        api_key: Together API key, sent as a Bearer token.
        endpoint: The images/generations URL.
        timeout: Seconds to wait for the upstream, None waits indefinitely.
        transport: Optional httpx transport (used by tests).

    Returns:
        The decoded JSON response body.

    Raises:
        httpx.HTTPStatusError: The upstream answered with a non-2xx status.
        httpx.TransportError: No response was received at all.
    """
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }

    async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
        response = await client.post(endpoint, json=payload, headers=headers)
        response.raise_for_status()
        return response.json()
