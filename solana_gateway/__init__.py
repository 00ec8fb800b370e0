"""
Solana Gateway — stateless REST façade over the Solana SDK.

Generates keypairs, signs and verifies messages, and builds (never submits)
SPL Token and transfer instructions. Every request is independent; nothing
is persisted between calls.
"""

__version__ = "1.0.0"
