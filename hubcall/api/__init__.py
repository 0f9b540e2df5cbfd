"""
API layer for the HUB CALL backend.

Exposes the authentication endpoints under /api/auth.
"""
