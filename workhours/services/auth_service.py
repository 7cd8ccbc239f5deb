"""Authentication service - admin login against a credential verifier."""
from typing import Any

from workhours.errors import AuthError
from workhours.models.work_entry import MessageResponse
from workhours.utils.auth import CredentialVerifier, mark_privileged


class AdminAuthService:
    """Service for handling admin authentication."""

    def __init__(self, verifier: CredentialVerifier):
        self.verifier = verifier

    def login(self, session: dict, password: Any) -> MessageResponse:
        """
        Mark the session as privileged if the password verifies.

        Args:
            session: Mutable session mapping for the current client
            password: Submitted admin password, possibly missing or not a string

        Returns:
            Acknowledgement message

        Raises:
            AuthError: If the password is rejected
        """
        if not self.verifier.verify(password):
            raise AuthError("Invalid password.")

        mark_privileged(session)
        return MessageResponse(message="Admin logged in.")
