"""
Configuration

Settings are read once at startup and passed into the handler.
Nothing below the entry points looks at the environment.
"""
import os
from enum import Enum
from typing import Mapping, Optional
from pydantic import BaseModel, ValidationError

SERVER_NAME = "together-image-generator"
SERVER_VERSION = "0.1.0"

TOGETHER_API_ENDPOINT = "https://api.together.xyz/v1/images/generations"


class ConfigurationError(Exception):
    """Raised when the adapter cannot be configured; it must not start."""


class FieldPolicy(str, Enum):
    """What to do with an optional argument whose type does not match."""
    DROP = "drop"      # ignore it and use the default
    REJECT = "reject"  # fail the invocation with INVALID_PARAMS


class Settings(BaseModel):
    api_key: str
    endpoint: str = TOGETHER_API_ENDPOINT
    timeout: Optional[float] = None
    mistyped_fields: FieldPolicy = FieldPolicy.DROP
    # Treat 0 / "" like a missing value when merging defaults
    falsy_fallback: bool = True
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ).

        Raises:
            ConfigurationError: If TOGETHER_API_KEY is missing or a value is malformed.
        """
        env = os.environ if environ is None else environ

        api_key = env.get("TOGETHER_API_KEY", "")
        if not api_key:
            raise ConfigurationError("TOGETHER_API_KEY is required")

        values = {
            "api_key": api_key,
            "endpoint": env.get("TOGETHER_API_ENDPOINT") or TOGETHER_API_ENDPOINT,
            "timeout": env.get("TOGETHER_TIMEOUT") or None,
            "mistyped_fields": env.get("TOGETHER_MISTYPED_FIELDS", FieldPolicy.DROP.value).lower(),
            "falsy_fallback": env.get("TOGETHER_FALSY_FALLBACK", "true").lower() in ("true", "1", "yes"),
            "log_level": env.get("TOGETHER_MCP_LOG_LEVEL", "INFO").upper(),
            "log_file": env.get("TOGETHER_MCP_LOG_FILE") or None,
        }
        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
