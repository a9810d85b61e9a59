"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for all fields so the service starts
against a local events API without any setup.  In a production
deployment you should override these via environment variables.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name, "").strip()
    return float(value) if value else None


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Event Form")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Session tokens are signed with this key.  It must match the key
    # used by whoever issues the tokens (see ``create_token.py``).
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

    # Remote events API.  ``events_api_key`` is sent as a bearer token
    # when set.  ``openapi_spec_path`` points to an optional OpenAPI
    # document used to discover the event creation path.
    events_api_base_url: str = os.getenv("EVENTS_API_BASE_URL", "http://localhost:3333")
    events_api_key: str = os.getenv("EVENTS_API_KEY", "")
    openapi_spec_path: str = os.getenv("OPENAPI_SPEC_PATH", "")

    # Seconds.  Empty means no timeout at this layer.
    events_api_timeout: Optional[float] = _optional_float("EVENTS_API_TIMEOUT")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
