"""
FastAPI router: POST /message/sign, POST /message/verify.

Ed25519 over the UTF-8 bytes of the message. Signatures are base64, keys base58.
"""

from __future__ import annotations

from fastapi import APIRouter

from solana_gateway.api_server.schemas import (
    ApiResponse,
    SignMessageRequest,
    SignMessageResponse,
    VerifyMessageRequest,
    VerifyMessageResponse,
)
from solana_gateway.chain.keys import sign_message as sign_with_keypair
from solana_gateway.chain.keys import verify_message as verify_signature
from solana_gateway.core.validators import (
    parse_public_key,
    parse_secret_key,
    parse_signature,
    validate_not_empty,
)
from solana_gateway.gateway_logging import get_logger, short_key

logger = get_logger(__name__)

router = APIRouter(prefix="/message", tags=["message"])


@router.post("/sign", response_model=ApiResponse[SignMessageResponse])
def sign_message(body: SignMessageRequest) -> ApiResponse[SignMessageResponse]:
    validate_not_empty(body.message, "message")
    validate_not_empty(body.secret, "secret")
    keypair = parse_secret_key(body.secret, "secret")

    signed = sign_with_keypair(keypair, body.message)
    logger.info("message_signed", public_key=short_key(signed.public_key), message_len=len(body.message))
    return ApiResponse[SignMessageResponse](
        data=SignMessageResponse(
            signature=signed.signature,
            public_key=signed.public_key,
            message=signed.message,
        ),
        message="Message signed successfully",
    )


@router.post("/verify", response_model=ApiResponse[VerifyMessageResponse])
def verify_message(body: VerifyMessageRequest) -> ApiResponse[VerifyMessageResponse]:
    """
    Check body.signature against body.pubkey and body.message.
    A well-formed but non-matching signature is a 200 with isValid=false, not an error.
    """
    pubkey = parse_public_key(body.pubkey, "pubkey", require_on_curve=True)
    signature = parse_signature(body.signature, "signature")

    is_valid = verify_signature(pubkey, signature, body.message)
    logger.info("message_verified", public_key=short_key(body.pubkey), is_valid=is_valid)
    return ApiResponse[VerifyMessageResponse](
        data=VerifyMessageResponse(is_valid=is_valid, message=body.message, public_key=body.pubkey),
        message="Message verification successful" if is_valid else "Message verification failed",
    )
