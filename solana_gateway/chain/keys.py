"""
Keypair generation and message signing over solders.

Keys travel as base58 text (secret key = 64 bytes: 32 seed + 32 public);
signatures as standard base64. Nothing here is stored or logged.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass

import base58
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.signature import Signature


@dataclass(frozen=True)
class EncodedKeypair:
    public_key: str
    secret_key: str


@dataclass(frozen=True)
class SignedMessage:
    signature: str
    public_key: str
    message: str


def generate_keypair() -> EncodedKeypair:
    """Fresh random keypair, base58 encoded."""
    keypair = Keypair()
    return EncodedKeypair(
        public_key=str(keypair.pubkey()),
        secret_key=base58.b58encode(bytes(keypair)).decode("ascii"),
    )


def sign_message(keypair: Keypair, message: str) -> SignedMessage:
    """Sign the UTF-8 bytes of message; signature is base64."""
    signature = keypair.sign_message(message.encode("utf-8"))
    return SignedMessage(
        signature=base64.b64encode(bytes(signature)).decode("ascii"),
        public_key=str(keypair.pubkey()),
        message=message,
    )


def verify_message(pubkey: Pubkey, signature: Signature, message: str) -> bool:
    return signature.verify(pubkey, message.encode("utf-8"))
