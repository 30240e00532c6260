from typing import Any, Dict, Union
from pydantic import BaseModel, Field

DEFAULT_MODEL = "black-forest-labs/FLUX.1-schnell-Free"

# Applied to every field the caller leaves out (prompt has no default)
DEFAULT_REQUEST: Dict[str, Any] = {
    "model": DEFAULT_MODEL,
    "width": 1024,
    "height": 768,
    "steps": 1,
    "n": 1,
    "response_format": "b64_json",
}

Number = Union[int, float]


class ImageGenerationRequest(BaseModel):
    """
    Resolved request sent to the Together AI images endpoint.

    Field order is the wire order. Ranges are advertised in the tool schema
    but not checked here; the upstream API rejects out-of-range values.
    """
    model: str = Field(DEFAULT_MODEL, description="The model to use for image generation.")
    prompt: str = Field(..., description="A text description of the desired image(s).")
    width: Number = Field(1024, description="Image width in pixels.")
    height: Number = Field(768, description="Image height in pixels.")
    steps: Number = Field(1, description="Number of inference steps.")
    n: Number = Field(1, description="The number of images to generate.")
    response_format: str = Field("b64_json", description="Either b64_json or url.")


# Upstream response body, passed through untouched:
# {"id": ..., "model": ..., "object": "list",
#  "data": [{"index": 0, "timings": {"inference": ...}, "b64_json" | "url": ...}]}
ImageGenerationResult = Dict[str, Any]
