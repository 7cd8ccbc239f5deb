"""Admin credential verification and session flag helpers."""
import secrets
from typing import Any, Optional, Protocol

SESSION_ADMIN_KEY = "is_admin"


class CredentialVerifier(Protocol):
    """Anything that can decide whether submitted credentials are valid."""

    def verify(self, credentials: Any) -> bool:
        ...


class SharedSecretVerifier:
    """
    Compare a submitted password with one configured secret.

    Example:
        >>> SharedSecretVerifier("s3cret").verify("s3cret")
        True
        >>> SharedSecretVerifier(None).verify("")
        False
        >>> SharedSecretVerifier("123").verify(123)
        False
    """

    def __init__(self, secret: Optional[str]):
        self.secret = secret

    def verify(self, credentials: Any) -> bool:
        # An unset secret must never match, not even an empty password
        if not self.secret or not isinstance(credentials, str) or not credentials:
            return False
        return secrets.compare_digest(credentials.encode("utf-8"), self.secret.encode("utf-8"))


def mark_privileged(session: dict) -> None:
    session[SESSION_ADMIN_KEY] = True


def is_privileged(session: dict) -> bool:
    return session.get(SESSION_ADMIN_KEY) is True
