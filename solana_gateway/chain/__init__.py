"""
Solana SDK adapters — keys, signatures and instruction construction.

Thin wrappers over solders and spl.token; no RPC client, nothing is submitted.
"""
