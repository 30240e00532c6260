"""
Stdio Transport

Serves the handler over a long-lived MCP session on stdin/stdout.
"""
import logging

from mcp import types
from mcp.server.lowlevel import Server, NotificationOptions
from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from together_mcp.core.config import SERVER_NAME, SERVER_VERSION
from together_mcp.core.handler import ImageGenerationHandler

logger = logging.getLogger(__name__)


def build_server(handler: ImageGenerationHandler) -> Server:
    """
    Create an MCP server whose tools/list and tools/call delegate to handler.

    The handlers go straight into request_handlers rather than through the
    call_tool() decorator: the decorator turns McpError into an isError
    result and validates arguments against the schema, and both would
    change what callers observe.
    """
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    async def handle_list_tools(req: types.ListToolsRequest) -> types.ServerResult:
        return types.ServerResult(handler.list_tools())

    async def handle_call_tool(req: types.CallToolRequest) -> types.ServerResult:
        try:
            result = await handler.call_tool(req.params.name, req.params.arguments)
        except McpError:
            raise
        except Exception as e:
            logger.error(f"[MCP Error] {type(e).__name__}: {e}")
            raise
        return types.ServerResult(result)

    server.request_handlers[types.ListToolsRequest] = handle_list_tools
    server.request_handlers[types.CallToolRequest] = handle_call_tool
    return server


def initialization_options(server: Server) -> InitializationOptions:
    # Advertise the tools capability even though no decorator registered it
    return InitializationOptions(
        server_name=SERVER_NAME,
        server_version=SERVER_VERSION,
        capabilities=server.get_capabilities(NotificationOptions(), {}),
    )


async def serve_stdio(handler: ImageGenerationHandler) -> None:
    """Run the MCP server on process stdio until the client disconnects."""
    server = build_server(handler)
    logger.info(f"{SERVER_NAME} {SERVER_VERSION} running on stdio")
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, initialization_options(server))
