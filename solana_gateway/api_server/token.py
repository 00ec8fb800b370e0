"""
FastAPI router: POST /token/create, POST /token/mint.

Builds SPL Token InitializeMint and MintTo instructions. Validation order
follows the request fields; the first bad field is reported.
"""

from __future__ import annotations

from fastapi import APIRouter

from solana_gateway.api_server.schemas import (
    ApiResponse,
    CreateTokenRequest,
    InstructionResponse,
    MintTokenRequest,
)
from solana_gateway.chain.instructions import build_initialize_mint, build_mint_to
from solana_gateway.core.validators import parse_public_key, validate_amount, validate_decimals
from solana_gateway.gateway_logging import get_logger, short_key

logger = get_logger(__name__)

router = APIRouter(prefix="/token", tags=["token"])


@router.post("/create", response_model=ApiResponse[InstructionResponse])
def create_token(body: CreateTokenRequest) -> ApiResponse[InstructionResponse]:
    """InitializeMint for body.mint with body.mintAuthority as mint and freeze authority."""
    mint_authority = parse_public_key(body.mint_authority, "mintAuthority")
    mint = parse_public_key(body.mint, "mint")
    decimals = validate_decimals(body.decimals)

    view = build_initialize_mint(mint, mint_authority, decimals)
    logger.info("token_create_instruction_built", mint=short_key(body.mint), decimals=decimals)
    return ApiResponse[InstructionResponse](
        data=InstructionResponse.from_view(view),
        message="Token mint instruction created successfully",
    )


@router.post("/mint", response_model=ApiResponse[InstructionResponse])
def mint_token(body: MintTokenRequest) -> ApiResponse[InstructionResponse]:
    """MintTo: mint `amount` base units of body.mint into body.destination."""
    mint = parse_public_key(body.mint, "mint")
    destination = parse_public_key(body.destination, "destination")
    authority = parse_public_key(body.authority, "authority")
    amount = validate_amount(body.amount, "amount")

    view = build_mint_to(mint, destination, authority, amount)
    logger.info(
        "token_mint_instruction_built",
        mint=short_key(body.mint),
        destination=short_key(body.destination),
        amount=amount,
    )
    return ApiResponse[InstructionResponse](
        data=InstructionResponse.from_view(view),
        message="Mint instruction created successfully",
    )
