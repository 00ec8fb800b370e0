"""
Main entrypoint: Solana Gateway FastAPI server.

Env: API_HOST, PORT (or API_PORT), LOG_LEVEL, LOG_FORMAT, CORS_ALLOW_ORIGINS.

Equivalent: uvicorn solana_gateway.api_server.app:app --host 0.0.0.0 --port 3000
"""

from solana_gateway.gateway_logging import configure_structlog, get_logger

logger = get_logger("main")

# logging level names uvicorn does not know, mapped onto ones it does
_UVICORN_LEVEL_ALIASES = {"warn": "warning", "fatal": "critical"}


def uvicorn_log_level(level: str) -> str:
    """Normalize LOG_LEVEL for uvicorn.run(); anything it does not accept becomes "info"."""
    from uvicorn.config import LOG_LEVELS

    name = (level or "").strip().lower()
    name = _UVICORN_LEVEL_ALIASES.get(name, name)
    return name if name in LOG_LEVELS else "info"


def print_gateway_startup(host: str, port: int) -> None:
    """Print bind address and available endpoints at startup."""
    from solana_gateway.api_server.info import ENDPOINTS

    print(f"[solana-gateway] listening on http://{host}:{port}")
    print("[solana-gateway] available endpoints:")
    for method, path, description in ENDPOINTS:
        print(f"  {method:<5} {path:<16} - {description}")


def main() -> None:
    """Load settings (env + .env), configure logging, run the API with uvicorn."""
    import uvicorn

    from solana_gateway.config import get_settings

    settings = get_settings()
    configure_structlog(settings.log_level, settings.log_format)

    from solana_gateway.api_server.app import app

    print_gateway_startup(settings.api_host, settings.api_port)
    logger.info("main_server_starting", host=settings.api_host, port=settings.api_port)
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=uvicorn_log_level(settings.log_level),
    )


if __name__ == "__main__":
    main()
