"""
Request and response models for the HTTP API.

Responses serialize camelCase. Requests accept camelCase and the snake_case
field name (older clients sent mint_authority etc.). Pydantic only checks
shape and types here; business rules live in core.validators.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from solana_gateway.chain.instructions import InstructionView
from solana_gateway.core.validators import U64_MAX

T = TypeVar("T")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RequestModel(CamelModel):
    """Request bodies: strict types, so true, "5" or 1.0 are not accepted as integers."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, strict=True)


# -----------------------------------------------------------------------------
# Envelope
# -----------------------------------------------------------------------------


class ApiResponse(CamelModel, Generic[T]):
    """Success envelope: data plus a human-readable message."""

    success: bool = True
    data: T
    message: str = ""


class ErrorResponse(CamelModel):
    """Failure envelope (always HTTP 400)."""

    success: bool = False
    error: str


# -----------------------------------------------------------------------------
# Requests
# -----------------------------------------------------------------------------


class CreateTokenRequest(RequestModel):
    mint_authority: str = Field(..., description="Mint authority (base58); also set as freeze authority")
    mint: str = Field(..., description="Mint account address (base58)")
    decimals: int = Field(..., description="Token decimals (u8)")


class MintTokenRequest(RequestModel):
    mint: str
    destination: str = Field(..., description="Destination token account (base58)")
    authority: str = Field(..., description="Mint authority (base58)")
    amount: int = Field(..., ge=0, le=U64_MAX)


class SignMessageRequest(RequestModel):
    message: str
    secret: str = Field(..., description="Secret key, base58 (64 bytes)")


class VerifyMessageRequest(RequestModel):
    message: str
    signature: str = Field(..., description="Signature, base64 (64 bytes)")
    pubkey: str = Field(..., description="Signer public key (base58)")


class SendSolRequest(RequestModel):
    from_: str = Field(..., alias="from", description="Sender (base58)")
    to: str = Field(..., description="Recipient (base58)")
    lamports: int = Field(..., ge=0, le=U64_MAX)


class SendTokenRequest(RequestModel):
    destination: str = Field(..., description="Recipient wallet (base58); its ATA receives the tokens")
    mint: str
    owner: str = Field(..., description="Sender wallet (base58); its ATA is debited")
    amount: int = Field(..., ge=0, le=U64_MAX)


# -----------------------------------------------------------------------------
# Responses
# -----------------------------------------------------------------------------


class KeypairResponse(CamelModel):
    public_key: str
    secret_key: str


class SignMessageResponse(CamelModel):
    signature: str
    public_key: str
    message: str


class VerifyMessageResponse(CamelModel):
    is_valid: bool
    message: str
    public_key: str


class AccountInfo(CamelModel):
    public_key: str
    is_signer: bool
    is_writable: bool


class InstructionResponse(CamelModel):
    program_id: str
    accounts: list[AccountInfo]
    instruction_data: str

    @classmethod
    def from_view(cls, view: InstructionView) -> "InstructionResponse":
        return cls(
            program_id=view.program_id,
            accounts=[
                AccountInfo(public_key=a.public_key, is_signer=a.is_signer, is_writable=a.is_writable)
                for a in view.accounts
            ],
            instruction_data=view.instruction_data,
        )


class HealthResponse(CamelModel):
    status: str
    version: str
    uptime: str


class EndpointInfo(CamelModel):
    method: str
    path: str
    description: str


class ApiInfoResponse(CamelModel):
    name: str
    description: str
    version: str
    endpoints: list[EndpointInfo]
