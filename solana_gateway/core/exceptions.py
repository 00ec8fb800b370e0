"""
Application-level exceptions.

Every error a request can hit is a GatewayError subclass carrying a
human-readable message and an HTTP status. The API server turns them into
the {"success": false, "error": ...} envelope; none are fatal to the process.
"""

from __future__ import annotations


class GatewayError(Exception):
    """Base class for request errors surfaced verbatim to the client."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class MalformedRequest(GatewayError):
    """Bad JSON, missing or mistyped fields, empty strings, non-positive amounts."""


class InvalidEncoding(GatewayError):
    """Value is not valid base58/base64 or decodes to the wrong number of bytes."""


class SdkRejection(GatewayError):
    """The Solana SDK refused to build the requested value."""
