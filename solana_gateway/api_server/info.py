"""
FastAPI router: GET / (API metadata) and GET /health (liveness).
"""

from __future__ import annotations

import time

from fastapi import APIRouter, Request

from solana_gateway.api_server.schemas import (
    ApiInfoResponse,
    ApiResponse,
    EndpointInfo,
    HealthResponse,
)
from solana_gateway.config import get_settings

router = APIRouter(tags=["info"])

# (method, path, description) for every public route; also printed at startup
ENDPOINTS: list[tuple[str, str, str]] = [
    ("GET", "/", "API information and available endpoints"),
    ("GET", "/health", "Health check endpoint"),
    ("POST", "/keypair", "Generate a new Solana keypair"),
    ("POST", "/token/create", "Create SPL token mint instruction"),
    ("POST", "/token/mint", "Create mint tokens instruction"),
    ("POST", "/message/sign", "Sign a message with a private key"),
    ("POST", "/message/verify", "Verify a signed message"),
    ("POST", "/send/sol", "Create SOL transfer instruction"),
    ("POST", "/send/token", "Create SPL token transfer instruction"),
]


def format_uptime(seconds: float) -> str:
    total = max(0, int(seconds))
    hours, rem = divmod(total, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{hours}h {minutes}m {secs}s"


@router.get("/", response_model=ApiResponse[ApiInfoResponse])
def api_info() -> ApiResponse[ApiInfoResponse]:
    """API name, version and the list of available endpoints."""
    settings = get_settings()
    return ApiResponse[ApiInfoResponse](
        data=ApiInfoResponse(
            name=settings.name,
            description=settings.description,
            version=settings.version,
            endpoints=[EndpointInfo(method=m, path=p, description=d) for m, p, d in ENDPOINTS],
        ),
        message=f"Welcome to {settings.name} API",
    )


@router.get("/health", response_model=ApiResponse[HealthResponse])
def health(request: Request) -> ApiResponse[HealthResponse]:
    """Liveness check: API is up."""
    settings = get_settings()
    started_at = getattr(request.app.state, "started_at", None) or time.monotonic()
    return ApiResponse[HealthResponse](
        data=HealthResponse(
            status="healthy",
            version=settings.version,
            uptime=format_uptime(time.monotonic() - started_at),
        ),
        message=f"{settings.name} is running healthy",
    )
