"""Shared-secret login and session cookie tokens."""

from __future__ import annotations

import hashlib
import hmac

from config import settings

_SESSION_MARKER = b"ga-leaderboard-session-v1"


class AuthError(Exception):
    status_code = 401


class MissingSecretError(AuthError):
    """Server misconfiguration: no SITE_PASSWORD configured."""

    status_code = 500

    def __init__(self) -> None:
        super().__init__("SITE_PASSWORD not set")


class WrongPasswordError(AuthError):
    def __init__(self) -> None:
        super().__init__("Wrong password")


def session_token(secret: str) -> str:
    return hmac.new(secret.encode("utf-8"), _SESSION_MARKER, hashlib.sha256).hexdigest()


def login(password: str | None, secret: str | None = None) -> str:
    """Check ``password`` against the configured secret and return a session token."""
    secret = secret if secret is not None else settings.site_password()
    if not secret:
        raise MissingSecretError()
    if not hmac.compare_digest((password or "").encode("utf-8"), secret.encode("utf-8")):
        raise WrongPasswordError()
    return session_token(secret)


def is_valid_session(token: str | None, secret: str | None = None) -> bool:
    secret = secret if secret is not None else settings.site_password()
    if not secret or not token:
        return False
    return hmac.compare_digest(token, session_token(secret))
