"""
Pytest tests for instruction endpoints: /token/create, /token/mint, /send/sol, /send/token.
"""

from __future__ import annotations

import base64

import pytest
from solders.keypair import Keypair

TOKEN_PROGRAM = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
SYSTEM_PROGRAM = "11111111111111111111111111111111"


def _assert_instruction(body: dict, program_id: str) -> dict:
    assert body["success"] is True
    data = body["data"]
    assert set(data) == {"programId", "accounts", "instructionData"}
    assert data["programId"] == program_id
    for account in data["accounts"]:
        assert set(account) == {"publicKey", "isSigner", "isWritable"}
    base64.b64decode(data["instructionData"], validate=True)
    return data


def test_create_token(client, pubkeys):
    authority, mint, _ = pubkeys
    r = client.post("/token/create", json={"mintAuthority": authority, "mint": mint, "decimals": 6})
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Token mint instruction created successfully"
    data = _assert_instruction(body, TOKEN_PROGRAM)
    assert data["accounts"][0] == {"publicKey": mint, "isSigner": False, "isWritable": True}


def test_create_token_program_id_is_fixed(client):
    for _ in range(3):
        authority, mint = str(Keypair().pubkey()), str(Keypair().pubkey())
        r = client.post("/token/create", json={"mintAuthority": authority, "mint": mint, "decimals": 9})
        assert r.json()["data"]["programId"] == TOKEN_PROGRAM


def test_create_token_accepts_snake_case(client, pubkeys):
    authority, mint, _ = pubkeys
    r = client.post("/token/create", json={"mint_authority": authority, "mint": mint, "decimals": 0})
    assert r.status_code == 200
    assert r.json()["data"]["programId"] == TOKEN_PROGRAM


def test_create_token_rejects_bad_decimals(client, pubkeys):
    authority, mint, _ = pubkeys
    r = client.post("/token/create", json={"mintAuthority": authority, "mint": mint, "decimals": 256})
    assert r.status_code == 400
    assert "decimals" in r.json()["error"]


def test_create_token_reports_first_bad_field(client):
    r = client.post("/token/create", json={"mintAuthority": "bad", "mint": "also-bad", "decimals": 6})
    assert r.status_code == 400
    assert "mintAuthority" in r.json()["error"]


def test_mint_token(client, pubkeys):
    mint, destination, authority = pubkeys
    r = client.post(
        "/token/mint",
        json={"mint": mint, "destination": destination, "authority": authority, "amount": 1_000_000},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Mint instruction created successfully"
    data = _assert_instruction(body, TOKEN_PROGRAM)
    assert [a["publicKey"] for a in data["accounts"]] == [mint, destination, authority]
    assert data["accounts"][2]["isSigner"] is True


def test_send_sol(client, pubkeys):
    sender, recipient, _ = pubkeys
    r = client.post("/send/sol", json={"from": sender, "to": recipient, "lamports": 100_000})
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "SOL transfer instruction created successfully"
    data = _assert_instruction(body, SYSTEM_PROGRAM)
    assert data["accounts"] == [
        {"publicKey": sender, "isSigner": True, "isWritable": True},
        {"publicKey": recipient, "isSigner": False, "isWritable": True},
    ]


def test_send_token(client, pubkeys):
    destination, mint, owner = pubkeys
    r = client.post(
        "/send/token",
        json={"destination": destination, "mint": mint, "owner": owner, "amount": 250},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Token transfer instruction created successfully"
    data = _assert_instruction(body, TOKEN_PROGRAM)
    assert len(data["accounts"]) == 3
    assert data["accounts"][2] == {"publicKey": owner, "isSigner": True, "isWritable": False}
    # source and destination are the derived ATAs, not the wallets
    assert data["accounts"][0]["publicKey"] not in (owner, destination)
    assert data["accounts"][1]["publicKey"] not in (owner, destination)


@pytest.mark.parametrize(
    "path,payload_fn,field",
    [
        ("/token/mint", lambda k: {"mint": k[0], "destination": k[1], "authority": k[2], "amount": 0}, "amount"),
        ("/send/sol", lambda k: {"from": k[0], "to": k[1], "lamports": 0}, "lamports"),
        ("/send/token", lambda k: {"destination": k[0], "mint": k[1], "owner": k[2], "amount": 0}, "amount"),
    ],
)
def test_zero_amount_rejected(client, pubkeys, path, payload_fn, field):
    r = client.post(path, json=payload_fn(pubkeys))
    assert r.status_code == 400
    body = r.json()
    assert body["success"] is False
    assert field in body["error"]
    assert "data" not in body


@pytest.mark.parametrize(
    "path,payload",
    [
        ("/token/create", {"mintAuthority": "xyz", "mint": "xyz", "decimals": 6}),
        ("/token/mint", {"mint": "0OIl", "destination": "a", "authority": "b", "amount": 1}),
        ("/send/sol", {"from": "1" * 50, "to": "2", "lamports": 1}),
        ("/send/token", {"destination": "not-a-key", "mint": "m", "owner": "o", "amount": 1}),
    ],
)
def test_invalid_pubkey_rejected(client, path, payload):
    r = client.post(path, json=payload)
    assert r.status_code == 400
    assert r.json()["success"] is False
    assert "Invalid public key" in r.json()["error"]


def test_negative_amount_rejected(client, pubkeys):
    sender, recipient, _ = pubkeys
    r = client.post("/send/sol", json={"from": sender, "to": recipient, "lamports": -1})
    assert r.status_code == 400
    assert r.json()["error"].startswith("lamports:")


def test_missing_field_rejected(client, pubkeys):
    r = client.post("/token/mint", json={"destination": pubkeys[0], "authority": pubkeys[1], "amount": 5})
    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "Missing required field: mint"}


def test_invalid_json_rejected(client):
    r = client.post("/send/sol", content=b"{not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "Invalid JSON body"}


@pytest.mark.parametrize("bad_value", [True, "5", 1.0])
@pytest.mark.parametrize(
    "path,payload_fn,field",
    [
        ("/send/sol", lambda k, v: {"from": k[0], "to": k[1], "lamports": v}, "lamports"),
        ("/send/token", lambda k, v: {"destination": k[0], "mint": k[1], "owner": k[2], "amount": v}, "amount"),
        ("/token/mint", lambda k, v: {"mint": k[0], "destination": k[1], "authority": k[2], "amount": v}, "amount"),
        ("/token/create", lambda k, v: {"mintAuthority": k[0], "mint": k[1], "decimals": v}, "decimals"),
    ],
)
def test_mistyped_integer_rejected(client, pubkeys, path, payload_fn, field, bad_value):
    """Booleans, numeric strings and floats are not coerced into u64/u8 fields."""
    r = client.post(path, json=payload_fn(pubkeys, bad_value))
    assert r.status_code == 400
    body = r.json()
    assert body["success"] is False
    assert body["error"].startswith(f"{field}:")
