"""
Structured logging for Solana Gateway.

JSON logs with timestamp, level, event_type and the bound request_id.
"""

from solana_gateway.gateway_logging.logger import configure_structlog, get_logger, resolve_level, short_key

__all__ = ["configure_structlog", "get_logger", "resolve_level", "short_key"]
