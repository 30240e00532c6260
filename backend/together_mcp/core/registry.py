"""
Tool Registry

Declares the single generate_image tool and its argument schema.
The descriptor is built once at import and never changes.
"""
from mcp import types

from together_mcp.models.image import DEFAULT_MODEL

GENERATE_IMAGE = "generate_image"

GENERATE_IMAGE_TOOL = types.Tool(
    name=GENERATE_IMAGE,
    description="Generate an image using Together AI API",
    inputSchema={
        "type": "object",
        "properties": {
            "prompt": {
                "type": "string",
                "description": "Text prompt for image generation",
            },
            "model": {
                "type": "string",
                "description": f"Model to use for generation (default: {DEFAULT_MODEL})",
            },
            "width": {
                "type": "number",
                "description": "Image width (default: 1024)",
                "minimum": 128,
                "maximum": 2048,
            },
            "height": {
                "type": "number",
                "description": "Image height (default: 768)",
                "minimum": 128,
                "maximum": 2048,
            },
            "steps": {
                "type": "number",
                "description": "Number of inference steps (default: 1)",
                "minimum": 1,
                "maximum": 100,
            },
            "n": {
                "type": "number",
                "description": "Number of images to generate (default: 1)",
                "minimum": 1,
                "maximum": 4,
            },
            "response_format": {
                "type": "string",
                "description": "Response format (default: b64_json)",
                "enum": ["b64_json", "url"],
            },
        },
        "required": ["prompt"],
    },
)


def list_tools() -> types.ListToolsResult:
    """Return the tool listing for a discovery request."""
    return types.ListToolsResult(tools=[GENERATE_IMAGE_TOOL])
