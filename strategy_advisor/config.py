"""Environment-based settings for the strategy advisor server."""

from __future__ import annotations

import os
from typing import List


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def split_env_list(value: str | None) -> List[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


HOST = os.getenv("ADVISOR_HOST", "0.0.0.0")
PORT = int(os.getenv("ADVISOR_PORT", os.getenv("PORT", "8000")))

SERVER_NAME = os.getenv("ADVISOR_SERVER_NAME", "hms-mirror-strategy-advisor")

LOG_LEVEL = os.getenv("ADVISOR_LOG_LEVEL", "INFO").upper()
LOG_JSON = _env_flag("ADVISOR_LOG_JSON")

# Empty lists disable DNS rebinding protection.
MCP_ALLOWED_HOSTS = split_env_list(os.getenv("MCP_ALLOWED_HOSTS"))
MCP_ALLOWED_ORIGINS = split_env_list(os.getenv("MCP_ALLOWED_ORIGINS"))

CORS_ALLOWED_ORIGINS = split_env_list(os.getenv("CORS_ALLOWED_ORIGINS")) or ["*"]
