"""
FastAPI server — stateless Solana instruction/key API.

Mounts the info, keypair, token, message and transfer routers and converts
every request error into the {"success": false, "error": ...} envelope with
HTTP 400. Config via env (see solana_gateway.config).
"""

from __future__ import annotations

import time
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from solana_gateway.api_server import info, keypair, message, token, transfer
from solana_gateway.api_server.middleware import install_middleware
from solana_gateway.api_server.schemas import ErrorResponse
from solana_gateway.config import get_settings
from solana_gateway.core.exceptions import GatewayError
from solana_gateway.gateway_logging import configure_structlog, get_logger

logger = get_logger(__name__)


# -----------------------------------------------------------------------------
# Error envelopes
# -----------------------------------------------------------------------------


def error_response(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(by_alias=True),
    )


def describe_validation_error(errors: list[dict[str, Any]]) -> str:
    """Reduce pydantic errors to one message naming the first offending field."""
    if not errors:
        return "Invalid request body"
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Invalid JSON body"
    loc = [str(part) for part in first.get("loc", ()) if part != "body"]
    field = ".".join(loc)
    if not field:
        return "Request body is required" if first.get("type") == "missing" else "Invalid request body"
    if first.get("type") == "missing":
        return f"Missing required field: {field}"
    return f"{field}: {first.get('msg', 'invalid value')}"


async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    logger.warning(
        "request_rejected",
        path=request.url.path,
        error_class=type(exc).__name__,
        error=exc.message,
    )
    return error_response(exc.message, exc.status_code)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = describe_validation_error(list(exc.errors()))
    logger.warning(
        "request_rejected",
        path=request.url.path,
        error_class="MalformedRequest",
        error=message,
    )
    return error_response(message)


# -----------------------------------------------------------------------------
# Lifespan
# -----------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info("api_started", host=settings.api_host, port=settings.api_port, version=settings.version)
    yield
    logger.info("api_stopped")


# -----------------------------------------------------------------------------
# App and routes
# -----------------------------------------------------------------------------


def create_app() -> FastAPI:
    settings = get_settings()
    configure_structlog(settings.log_level, settings.log_format)
    app = FastAPI(
        title=settings.name,
        description=settings.description,
        version=settings.version,
        lifespan=lifespan,
    )
    app.state.started_at = time.monotonic()

    install_middleware(app, settings)

    app.include_router(info.router)
    app.include_router(keypair.router)
    app.include_router(token.router)
    app.include_router(message.router)
    app.include_router(transfer.router)

    app.add_exception_handler(GatewayError, gateway_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    return app


app = create_app()
