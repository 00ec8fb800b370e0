"""
Configuration management for Solana Gateway.

Loads settings from environment variables and an optional .env file.
Exposes a single source of truth for all service configuration.
"""

from solana_gateway.config.settings import Settings, get_settings, reset_settings  # noqa: F401

__all__ = ["Settings", "get_settings", "reset_settings"]
