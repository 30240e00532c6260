from typing import Optional
import logging

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from together_mcp.api import routes_mcp
from together_mcp.core.config import SERVER_NAME, SERVER_VERSION, Settings
from together_mcp.core.handler import ImageGenerationHandler
from together_mcp.core.registry import GENERATE_IMAGE

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    Build the HTTP edge application.

    Settings are read from the environment here when not given, so a
    missing API key fails at startup rather than on the first request.
    """
    if settings is None:
        settings = Settings.from_env()

    app = FastAPI(
        title="Together Image Generation MCP",
        description="Tool-invocation adapter for Together AI image generation",
        version=SERVER_VERSION
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.handler = ImageGenerationHandler(settings, transport=transport)

    @app.get("/health")
    async def health_check():
        return {
            "status": "ok",
            "name": SERVER_NAME,
            "version": SERVER_VERSION,
            "tool": GENERATE_IMAGE,
        }

    app.include_router(routes_mcp.router, tags=["MCP"])

    logger.info(f"{SERVER_NAME} {SERVER_VERSION} HTTP edge ready")
    return app
