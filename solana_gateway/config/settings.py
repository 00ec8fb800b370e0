"""
Application settings.

Typed, immutable view over the environment (see config.env). Built once per
process by get_settings(); tests call reset_settings() after changing env.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field

from solana_gateway import __version__
from solana_gateway.config.env import (
    get_api_host,
    get_api_port,
    get_cors_origins,
    get_log_format,
    get_log_level,
)

API_NAME = "Solana HTTP Server"
API_DESCRIPTION = (
    "HTTP API for Solana keypair generation, message signing and verification, "
    "and SPL token / SOL transfer instruction creation."
)


@dataclass(frozen=True)
class Settings:
    api_host: str
    api_port: int
    log_level: str
    log_format: str
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    name: str = API_NAME
    description: str = API_DESCRIPTION
    version: str = __version__


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the current application settings (cached)."""
    return Settings(
        api_host=get_api_host(),
        api_port=get_api_port(),
        log_level=get_log_level(),
        log_format=get_log_format(),
        cors_origins=get_cors_origins(),
    )


def reset_settings() -> None:
    """Drop the cached Settings so the next get_settings() re-reads env."""
    get_settings.cache_clear()
