"""
Core utilities — error taxonomy and request validation.

Shared by every API router; no FastAPI imports here.
"""
