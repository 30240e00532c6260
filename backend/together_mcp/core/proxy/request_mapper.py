"""
Tool Arguments to Together Request Mapper

Validates the arguments of a generate_image call and merges them with
the defaults into the request body sent upstream.
"""
import logging
import math
from typing import Any, Dict, Mapping

from mcp import types
from mcp.shared.exceptions import McpError

from together_mcp.core.config import FieldPolicy
from together_mcp.models.image import DEFAULT_REQUEST, ImageGenerationRequest

logger = logging.getLogger(__name__)


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_number(value: Any) -> bool:
    # bool is an int subclass but is not a JSON number; NaN and Infinity have no JSON form
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


# Optional field -> primitive type check
OPTIONAL_FIELDS = {
    "model": _is_string,
    "width": _is_number,
    "height": _is_number,
    "steps": _is_number,
    "n": _is_number,
    "response_format": _is_string,
}


def invalid_params(message: str) -> McpError:
    return McpError(types.ErrorData(code=types.INVALID_PARAMS, message=message))


def validate_arguments(arguments: Any) -> Mapping[str, Any]:
    """
    Check the shape of the arguments object and the required prompt.

    Raises:
        McpError: INVALID_PARAMS if arguments is not an object or prompt is not a string.
    """
    if arguments is None or not isinstance(arguments, Mapping):
        raise invalid_params("Invalid arguments provided")

    if "prompt" not in arguments or not isinstance(arguments["prompt"], str):
        raise invalid_params("Prompt is required and must be a string")

    return arguments


def extract_optional_fields(
    arguments: Mapping[str, Any],
    policy: FieldPolicy = FieldPolicy.DROP,
) -> Dict[str, Any]:
    """
    Pick the optional fields whose values have the expected primitive type.

    Args:
        arguments: The validated arguments object.
        policy: DROP ignores a mistyped field, REJECT fails the call.

    Returns:
        Only the fields that are present and well-typed. Unknown keys are ignored.
    """
    fields: Dict[str, Any] = {}
    for name, type_check in OPTIONAL_FIELDS.items():
        if name not in arguments:
            continue

        value = arguments[name]
        if type_check(value):
            fields[name] = value
        elif policy == FieldPolicy.REJECT:
            raise invalid_params(f"Invalid type for argument: {name}")
        else:
            logger.debug(f"Dropping mistyped argument {name!r} ({type(value).__name__}), using default")

    return fields


def resolve_request(
    arguments: Any,
    policy: FieldPolicy = FieldPolicy.DROP,
    falsy_fallback: bool = True,
) -> ImageGenerationRequest:
    """
    Turn raw tool arguments into the fully defaulted upstream request.

    Args:
        arguments: The arguments object from the invocation.
        policy: Handling of optional fields with the wrong type.
        falsy_fallback: Replace falsy values (0, "") with the default as well.

    Returns:
        An ImageGenerationRequest with every field populated.
    """
    arguments = validate_arguments(arguments)
    fields = extract_optional_fields(arguments, policy)

    resolved = {**DEFAULT_REQUEST, **fields}
    if falsy_fallback:
        for name, default in DEFAULT_REQUEST.items():
            if not resolved[name]:
                resolved[name] = default

    return ImageGenerationRequest(prompt=arguments["prompt"], **resolved)
