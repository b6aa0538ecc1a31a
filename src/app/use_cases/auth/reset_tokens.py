"""
Reset token primitives.

The plaintext token only ever travels to the account owner; storage and
lookups use its SHA-256 fingerprint.
"""

import hashlib
import secrets


def generate_reset_token() -> str:
    """32 bytes from the OS CSPRNG, URL-safe so it can sit in a path segment"""
    return secrets.token_urlsafe(32)


def fingerprint_token(token: str) -> str:
    return hashlib.sha256(token.encode()).hexdigest()


def build_reset_url(frontend_url: str, token: str) -> str:
    return f"{frontend_url.rstrip('/')}/auth/reset-password/{token}"
