"""
Password reset token helpers.

The raw token only ever travels inside the emailed link; storage and
lookups use its SHA-256 digest.
"""

import hashlib
import secrets

RESET_TOKEN_BYTES = 32  # 256 bits of entropy


def generate_reset_token() -> str:
    return secrets.token_hex(RESET_TOKEN_BYTES)


def hash_reset_token(token: str) -> str:
    return hashlib.sha256(token.encode()).hexdigest()
