"""
Proxy module initialization.
"""
from .request_mapper import resolve_request, validate_arguments, extract_optional_fields
from .response_mapper import success_result, api_error_result, extract_error_message
from .upstream import call_together_api

__all__ = [
    "resolve_request",
    "validate_arguments",
    "extract_optional_fields",
    "success_result",
    "api_error_result",
    "extract_error_message",
    "call_together_api",
]
