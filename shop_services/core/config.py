"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so both
services can be started locally without any environment at all: the
user service listens on 8081, the order service on 8082 and talks to
the user service on ``localhost``.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Shop Services")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Listen address shared by both services.
    host: str = os.getenv("SERVICE_HOST", "0.0.0.0")
    user_service_port: int = int(os.getenv("USER_SERVICE_PORT", "8081"))
    order_service_port: int = int(os.getenv("ORDER_SERVICE_PORT", "8082"))

    # Base URL the order service uses to reach the user service.  No
    # trailing slash is required; the client strips it.
    user_service_url: str = os.getenv("USER_SERVICE_URL", "http://localhost:8081")

    # Fixed connect/read timeout of the HTTP client itself (seconds).
    user_client_timeout: float = float(os.getenv("USER_CLIENT_TIMEOUT", "5.0"))

    # Ceiling applied by the order service to each user lookup (seconds).
    # The effective bound is the smaller of this and the caller's budget.
    user_lookup_timeout: float = float(os.getenv("USER_LOOKUP_TIMEOUT", "3.0"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the defaults are
# evaluated at import time, environment variables should be set before
# importing this module.
settings = Settings()
