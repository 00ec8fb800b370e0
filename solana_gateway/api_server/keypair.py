"""
FastAPI router: POST /keypair.
"""

from __future__ import annotations

from fastapi import APIRouter

from solana_gateway.api_server.schemas import ApiResponse, KeypairResponse
from solana_gateway.chain.keys import generate_keypair
from solana_gateway.gateway_logging import get_logger, short_key

logger = get_logger(__name__)

router = APIRouter(tags=["keypair"])


@router.post("/keypair", response_model=ApiResponse[KeypairResponse])
def create_keypair() -> ApiResponse[KeypairResponse]:
    """Generate a new keypair. Both keys are base58; the secret key is 64 bytes."""
    keypair = generate_keypair()
    logger.info("keypair_generated", public_key=short_key(keypair.public_key))
    return ApiResponse[KeypairResponse](
        data=KeypairResponse(public_key=keypair.public_key, secret_key=keypair.secret_key),
        message="Keypair generated successfully",
    )
