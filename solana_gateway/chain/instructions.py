"""
Instruction builders: SPL Token (initialize mint, mint-to, transfer) and
System Program SOL transfer.

Builds instructions only; nothing is signed or sent. Each builder returns a
serialized InstructionView (program id, accounts in SDK order, base64 data).
SDK failures are raised as SdkRejection.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass, field

from solders.instruction import Instruction
from solders.pubkey import Pubkey
from solders.system_program import TransferParams as SolTransferParams
from solders.system_program import transfer as sol_transfer
from spl.token.constants import TOKEN_PROGRAM_ID
from spl.token.instructions import (
    InitializeMintParams,
    MintToParams,
    TransferParams as TokenTransferParams,
    get_associated_token_address,
    initialize_mint,
    mint_to,
    transfer as token_transfer,
)

from solana_gateway.core.exceptions import SdkRejection
from solana_gateway.gateway_logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AccountView:
    public_key: str
    is_signer: bool
    is_writable: bool


@dataclass(frozen=True)
class InstructionView:
    program_id: str
    accounts: list[AccountView] = field(default_factory=list)
    instruction_data: str = ""


def serialize_instruction(ix: Instruction) -> InstructionView:
    """Flatten a solders Instruction; data is standard base64."""
    return InstructionView(
        program_id=str(ix.program_id),
        accounts=[
            AccountView(
                public_key=str(meta.pubkey),
                is_signer=meta.is_signer,
                is_writable=meta.is_writable,
            )
            for meta in ix.accounts
        ],
        instruction_data=base64.b64encode(bytes(ix.data)).decode("ascii"),
    )


def build_initialize_mint(mint: Pubkey, mint_authority: Pubkey, decimals: int) -> InstructionView:
    """InitializeMint under the SPL Token program; mint authority doubles as freeze authority."""
    try:
        ix = initialize_mint(
            InitializeMintParams(
                decimals=decimals,
                program_id=TOKEN_PROGRAM_ID,
                mint=mint,
                mint_authority=mint_authority,
                freeze_authority=mint_authority,
            )
        )
    except Exception as e:
        logger.warning("initialize_mint_rejected", error=str(e))
        raise SdkRejection("Failed to create initialize mint instruction") from e
    return serialize_instruction(ix)


def build_mint_to(mint: Pubkey, destination: Pubkey, authority: Pubkey, amount: int) -> InstructionView:
    try:
        ix = mint_to(
            MintToParams(
                program_id=TOKEN_PROGRAM_ID,
                mint=mint,
                dest=destination,
                mint_authority=authority,
                amount=amount,
            )
        )
    except Exception as e:
        logger.warning("mint_to_rejected", error=str(e))
        raise SdkRejection("Failed to create mint instruction") from e
    return serialize_instruction(ix)


def build_sol_transfer(from_pubkey: Pubkey, to_pubkey: Pubkey, lamports: int) -> InstructionView:
    try:
        ix = sol_transfer(
            SolTransferParams(from_pubkey=from_pubkey, to_pubkey=to_pubkey, lamports=lamports)
        )
    except Exception as e:
        logger.warning("sol_transfer_rejected", error=str(e))
        raise SdkRejection("Failed to create SOL transfer instruction") from e
    return serialize_instruction(ix)


def build_token_transfer(owner: Pubkey, destination: Pubkey, mint: Pubkey, amount: int) -> InstructionView:
    """
    SPL Token Transfer between the associated token accounts of owner and
    destination for mint. Accounts: [source ATA (w), destination ATA (w), owner (s)].
    """
    source_ata = get_associated_token_address(owner, mint)
    destination_ata = get_associated_token_address(destination, mint)
    try:
        ix = token_transfer(
            TokenTransferParams(
                program_id=TOKEN_PROGRAM_ID,
                source=source_ata,
                dest=destination_ata,
                owner=owner,
                amount=amount,
            )
        )
    except Exception as e:
        logger.warning("token_transfer_rejected", error=str(e))
        raise SdkRejection("Failed to create transfer instruction") from e
    return serialize_instruction(ix)
