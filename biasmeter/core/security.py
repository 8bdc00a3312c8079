"""Credential format checks (plaintext demo auth, not security-grade)."""

from __future__ import annotations

from typing import Optional

MIN_PASSWORD_LENGTH = 6


def is_valid_email(email: Optional[str]) -> bool:
    return bool(email) and "@" in email


def is_strong_password(password: Optional[str]) -> bool:
    return password is not None and len(password) >= MIN_PASSWORD_LENGTH
