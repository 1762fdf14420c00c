"""Security utilities - JWT access tokens."""

from src.app.core.security.crypto import create_access_token, decode_token

__all__ = [
    "create_access_token",
    "decode_token",
]
