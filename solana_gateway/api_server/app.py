"""
FastAPI/ASGI application entrypoint.

Run with: uvicorn solana_gateway.api_server.app:app --host 0.0.0.0 --port 3000
"""

from solana_gateway.api_server.server import app

__all__ = ["app"]
