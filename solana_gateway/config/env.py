"""
Environment variable loading for Solana Gateway.

- API_HOST: bind host (default: 0.0.0.0)
- PORT / API_PORT: bind port (default: 3000; PORT wins)
- CORS_ALLOW_ORIGINS: comma-separated origins (default: *)
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is solana_gateway/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 3000


def load_gateway_env() -> None:
    """Load .env from project root. Safe to call multiple times; never overrides real env."""
    if _ENV_PATH.is_file():
        load_dotenv(_ENV_PATH, override=False)


def get_api_host() -> str:
    """Return API_HOST from env, default 0.0.0.0."""
    load_gateway_env()
    return (os.getenv("API_HOST") or "").strip() or DEFAULT_API_HOST


def get_api_port() -> int:
    """
    Return the bind port.
    Order: PORT > API_PORT > 3000. Non-numeric or out-of-range values fall back to the default.
    """
    load_gateway_env()
    raw = (os.getenv("PORT") or os.getenv("API_PORT") or "").strip()
    if not raw:
        return DEFAULT_API_PORT
    try:
        port = int(raw)
    except ValueError:
        return DEFAULT_API_PORT
    if not 0 < port < 65536:
        return DEFAULT_API_PORT
    return port


def get_cors_origins() -> list[str]:
    """Return CORS_ALLOW_ORIGINS as a list; '*' when unset."""
    load_gateway_env()
    raw = (os.getenv("CORS_ALLOW_ORIGINS") or "*").strip()
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


def get_log_level() -> str:
    load_gateway_env()
    return (os.getenv("LOG_LEVEL") or "INFO").strip().upper()


def get_log_format() -> str:
    load_gateway_env()
    return (os.getenv("LOG_FORMAT") or "json").strip().lower()
