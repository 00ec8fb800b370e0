"""
Request validation shared by every endpoint.

Each helper takes the raw value plus the wire name of the field and either
returns the parsed value or raises a GatewayError whose message names that
field. Handlers call them in request-field order so the first offending field
is the one reported.
"""

from __future__ import annotations

import base64
import binascii

import base58
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.signature import Signature

from solana_gateway.core.exceptions import InvalidEncoding, MalformedRequest, SdkRejection

U64_MAX = 2**64 - 1
U8_MAX = 255
SECRET_KEY_LEN = 64
SIGNATURE_LEN = 64


def validate_not_empty(value: str | None, field_name: str) -> str:
    """Return value unchanged if it has non-whitespace content."""
    if value is None or not value.strip():
        raise MalformedRequest(f"{field_name} cannot be empty")
    return value


def validate_amount(amount: int, field_name: str) -> int:
    """Amounts are u64 and must be strictly positive."""
    if amount <= 0:
        raise MalformedRequest(f"{field_name} must be greater than 0")
    if amount > U64_MAX:
        raise MalformedRequest(f"{field_name} must fit in an unsigned 64-bit integer")
    return amount


def validate_decimals(decimals: int, field_name: str = "decimals") -> int:
    if not 0 <= decimals <= U8_MAX:
        raise MalformedRequest(f"{field_name} must be between 0 and {U8_MAX}")
    return decimals


def parse_public_key(value: str, field_name: str, *, require_on_curve: bool = False) -> Pubkey:
    """
    Parse a base58 public key (32 bytes).

    require_on_curve additionally rejects addresses that are not Ed25519 points
    (PDAs, ATAs); use it where the key must verify signatures.
    """
    validate_not_empty(value, field_name)
    try:
        pubkey = Pubkey.from_string(value)
    except Exception as e:
        raise InvalidEncoding(
            f"Invalid public key format for {field_name}: '{value}'. Expected a base58 encoded string."
        ) from e
    if require_on_curve and not pubkey.is_on_curve():
        raise InvalidEncoding(f"Invalid public key for {field_name}: '{value}' is not on the ed25519 curve")
    return pubkey


def parse_secret_key(value: str, field_name: str = "secret") -> Keypair:
    """Parse a base58 secret key that decodes to exactly 64 bytes into a Keypair."""
    validate_not_empty(value, field_name)
    # b58decode drops trailing whitespace; the key text must be exact
    if value != value.strip():
        raise InvalidEncoding(
            f"Invalid {field_name} key format. Expected a base58 encoded string."
        )
    try:
        secret_bytes = base58.b58decode(value)
    except ValueError as e:
        raise InvalidEncoding(
            f"Invalid {field_name} key format. Expected a base58 encoded string."
        ) from e
    if len(secret_bytes) != SECRET_KEY_LEN:
        raise InvalidEncoding(
            f"Invalid {field_name} key length: expected {SECRET_KEY_LEN} bytes, got {len(secret_bytes)}"
        )
    try:
        return Keypair.from_bytes(secret_bytes)
    except Exception as e:
        raise SdkRejection(f"Failed to create keypair from {field_name} key: {e}") from e


def parse_signature(value: str, field_name: str = "signature") -> Signature:
    """Parse a standard base64 Ed25519 signature (64 bytes)."""
    validate_not_empty(value, field_name)
    try:
        raw = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidEncoding(f"Invalid {field_name} format. Expected a base64 encoded string.") from e
    if len(raw) != SIGNATURE_LEN:
        raise InvalidEncoding(
            f"Invalid {field_name} length: expected {SIGNATURE_LEN} bytes, got {len(raw)}"
        )
    try:
        return Signature.from_bytes(raw)
    except Exception as e:
        raise SdkRejection(f"Invalid {field_name}: {e}") from e
