"""
Password strength policy shared by registration and password reset.

Rules are checked in a fixed order and only the first failure is reported.
"""

import re

from src.libs.result import Error, Result, Return

MIN_PASSWORD_LENGTH = 8
# bcrypt rejects longer input
MAX_PASSWORD_BYTES = 72
SPECIAL_CHARACTERS = '!@#$%^&*(),.?":{}|<>'

_RULES = (
    (
        lambda password: len(password) >= MIN_PASSWORD_LENGTH,
        f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
    ),
    (
        lambda password: re.search(r"[A-Z]", password) is not None,
        "Password must contain at least one uppercase letter",
    ),
    (
        lambda password: re.search(r"[a-z]", password) is not None,
        "Password must contain at least one lowercase letter",
    ),
    (
        lambda password: re.search(r"\d", password) is not None,
        "Password must contain at least one number",
    ),
    (
        lambda password: any(char in SPECIAL_CHARACTERS for char in password),
        "Password must contain at least one special character",
    ),
    (
        lambda password: len(password.encode("utf-8")) <= MAX_PASSWORD_BYTES,
        f"Password must be at most {MAX_PASSWORD_BYTES} bytes long",
    ),
)


def validate_password_strength(password: str) -> Result[None]:
    """
    Validate password complexity.

    Args:
        password: Password to validate

    Returns:
        Result with None if valid, or Error(WEAK_PASSWORD) naming the first failed rule
    """
    for check, message in _RULES:
        if not check(password):
            return Return.err(Error("WEAK_PASSWORD", message))

    return Return.ok(None)
