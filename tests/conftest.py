"""
Pytest fixtures for Solana Gateway tests. Settings cache is reset around each test
so env overrides (monkeypatch.setenv) are picked up.
"""

from __future__ import annotations

import pytest
from solders.keypair import Keypair


@pytest.fixture(autouse=True)
def fresh_settings():
    from solana_gateway.config import reset_settings

    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def client():
    """FastAPI TestClient over the gateway app."""
    from fastapi.testclient import TestClient

    from solana_gateway.api_server.server import app

    return TestClient(app)


@pytest.fixture
def keypair() -> Keypair:
    return Keypair()


@pytest.fixture
def pubkeys() -> list[str]:
    """Three distinct on-curve public keys (base58)."""
    return [str(Keypair().pubkey()) for _ in range(3)]
