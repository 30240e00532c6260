"""
Command line entry point.

USAGE:
    together-mcp                         # MCP over stdio (for desktop clients)
    together-mcp --transport http -p 8000

Requires TOGETHER_API_KEY in the environment.
"""
import argparse
import asyncio
import sys

import uvicorn

from together_mcp.core.config import SERVER_NAME, ConfigurationError, Settings
from together_mcp.core.logging_config import setup_logging

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="together-mcp",
        description="Image Generation MCP Server using Together AI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    TOGETHER_API_KEY=... together-mcp
    TOGETHER_API_KEY=... together-mcp --transport http --port 8080
        """
    )
    parser.add_argument(
        "--transport", "-t",
        choices=["stdio", "http"],
        default="stdio",
        help="How to serve the tool (default: stdio)"
    )
    parser.add_argument(
        "--host",
        default=DEFAULT_HOST,
        help=f"Interface for the http transport (default: {DEFAULT_HOST})"
    )
    parser.add_argument(
        "--port", "-p",
        type=int,
        default=DEFAULT_PORT,
        help=f"Port for the http transport (default: {DEFAULT_PORT})"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override TOGETHER_MCP_LOG_LEVEL"
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        print(f"{SERVER_NAME}: {e}", file=sys.stderr)
        return 1

    setup_logging(args.log_level or settings.log_level, settings.log_file)

    if args.transport == "http":
        from together_mcp.main import create_app
        uvicorn.run(create_app(settings), host=args.host, port=args.port, log_config=None)
    else:
        from together_mcp.core.handler import ImageGenerationHandler
        from together_mcp.core.stdio_server import serve_stdio
        asyncio.run(serve_stdio(ImageGenerationHandler(settings)))

    return 0


if __name__ == "__main__":
    sys.exit(main())
