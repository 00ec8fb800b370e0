"""
Tests for instruction builders (chain.instructions) and key helpers (chain.keys).

Checks program ids, account order/flags and the instruction data layout the
SPL Token and System programs expect.
"""

from __future__ import annotations

import base64
import struct

import base58
from solders.keypair import Keypair
from spl.token.instructions import get_associated_token_address

from solana_gateway.chain.instructions import (
    build_initialize_mint,
    build_mint_to,
    build_sol_transfer,
    build_token_transfer,
)
from solana_gateway.chain.keys import generate_keypair, sign_message, verify_message

TOKEN_PROGRAM = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
SYSTEM_PROGRAM = "11111111111111111111111111111111"
RENT_SYSVAR = "SysvarRent111111111111111111111111111111111"


def _flags(view):
    return [(a.public_key, a.is_signer, a.is_writable) for a in view.accounts]


def test_initialize_mint_layout():
    mint, authority = Keypair().pubkey(), Keypair().pubkey()
    view = build_initialize_mint(mint, authority, 6)
    assert view.program_id == TOKEN_PROGRAM
    assert _flags(view) == [(str(mint), False, True), (RENT_SYSVAR, False, False)]
    data = base64.b64decode(view.instruction_data)
    assert data[0] == 0  # InitializeMint
    assert data[1] == 6
    assert data[2:34] == bytes(authority)


def test_mint_to_layout():
    mint, dest, authority = (Keypair().pubkey() for _ in range(3))
    view = build_mint_to(mint, dest, authority, 1_000)
    assert view.program_id == TOKEN_PROGRAM
    assert _flags(view) == [
        (str(mint), False, True),
        (str(dest), False, True),
        (str(authority), True, False),
    ]
    data = base64.b64decode(view.instruction_data)
    assert data == bytes([7]) + struct.pack("<Q", 1_000)


def test_sol_transfer_layout():
    sender, recipient = Keypair().pubkey(), Keypair().pubkey()
    view = build_sol_transfer(sender, recipient, 5_000)
    assert view.program_id == SYSTEM_PROGRAM
    assert _flags(view) == [(str(sender), True, True), (str(recipient), False, True)]
    data = base64.b64decode(view.instruction_data)
    assert data == struct.pack("<IQ", 2, 5_000)


def test_token_transfer_uses_associated_token_accounts():
    owner, destination, mint = (Keypair().pubkey() for _ in range(3))
    view = build_token_transfer(owner, destination, mint, 42)
    assert view.program_id == TOKEN_PROGRAM
    assert _flags(view) == [
        (str(get_associated_token_address(owner, mint)), False, True),
        (str(get_associated_token_address(destination, mint)), False, True),
        (str(owner), True, False),
    ]
    data = base64.b64decode(view.instruction_data)
    assert data == bytes([3]) + struct.pack("<Q", 42)


def test_generate_keypair_encoding():
    kp = generate_keypair()
    secret = base58.b58decode(kp.secret_key)
    assert len(secret) == 64
    assert str(Keypair.from_bytes(secret).pubkey()) == kp.public_key


def test_sign_and_verify():
    kp = Keypair()
    signed = sign_message(kp, "Hello, Solana World!")
    assert signed.public_key == str(kp.pubkey())
    assert signed.message == "Hello, Solana World!"
    raw = base64.b64decode(signed.signature)
    assert len(raw) == 64

    from solders.signature import Signature

    sig = Signature.from_bytes(raw)
    assert verify_message(kp.pubkey(), sig, "Hello, Solana World!") is True
    assert verify_message(kp.pubkey(), sig, "Hello, Solana World?") is False
    assert verify_message(Keypair().pubkey(), sig, "Hello, Solana World!") is False
