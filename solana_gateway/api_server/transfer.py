"""
FastAPI router: POST /send/sol, POST /send/token.

SOL transfers use the System Program; token transfers move `amount` base
units between the associated token accounts of owner and destination.
"""

from __future__ import annotations

from fastapi import APIRouter

from solana_gateway.api_server.schemas import (
    ApiResponse,
    InstructionResponse,
    SendSolRequest,
    SendTokenRequest,
)
from solana_gateway.chain.instructions import build_sol_transfer, build_token_transfer
from solana_gateway.core.validators import parse_public_key, validate_amount
from solana_gateway.gateway_logging import get_logger, short_key

logger = get_logger(__name__)

router = APIRouter(prefix="/send", tags=["transfer"])


@router.post("/sol", response_model=ApiResponse[InstructionResponse])
def send_sol(body: SendSolRequest) -> ApiResponse[InstructionResponse]:
    from_pubkey = parse_public_key(body.from_, "from")
    to_pubkey = parse_public_key(body.to, "to")
    lamports = validate_amount(body.lamports, "lamports")

    view = build_sol_transfer(from_pubkey, to_pubkey, lamports)
    logger.info(
        "sol_transfer_instruction_built",
        sender=short_key(body.from_),
        recipient=short_key(body.to),
        lamports=lamports,
    )
    return ApiResponse[InstructionResponse](
        data=InstructionResponse.from_view(view),
        message="SOL transfer instruction created successfully",
    )


@router.post("/token", response_model=ApiResponse[InstructionResponse])
def send_token(body: SendTokenRequest) -> ApiResponse[InstructionResponse]:
    destination = parse_public_key(body.destination, "destination")
    mint = parse_public_key(body.mint, "mint")
    owner = parse_public_key(body.owner, "owner")
    amount = validate_amount(body.amount, "amount")

    view = build_token_transfer(owner, destination, mint, amount)
    logger.info(
        "token_transfer_instruction_built",
        owner=short_key(body.owner),
        destination=short_key(body.destination),
        mint=short_key(body.mint),
        amount=amount,
    )
    return ApiResponse[InstructionResponse](
        data=InstructionResponse.from_view(view),
        message="Token transfer instruction created successfully",
    )
