"""Per-application state shared by request handlers."""
from fastapi import Request

from workhours.config import Settings
from workhours.database import Database
from workhours.utils.auth import CredentialVerifier, SharedSecretVerifier


class AppContext:
    """
    Everything a request needs beyond the request itself.

    Built once by ``create_app`` and stored on ``app.state.context``.
    ``startup`` must run before serving and ``shutdown`` releases the pool.
    """

    def __init__(
        self,
        settings: Settings,
        database: Database | None = None,
        verifier: CredentialVerifier | None = None,
    ):
        self.settings = settings
        self.database = database or Database(settings)
        self.verifier = verifier or SharedSecretVerifier(settings.admin_password)

    async def startup(self) -> None:
        await self.database.connect()

    async def shutdown(self) -> None:
        await self.database.disconnect()


def get_context(request: Request) -> AppContext:
    """Dependency to get the application context."""
    return request.app.state.context


def get_database(request: Request) -> Database:
    """Dependency to get the database."""
    return get_context(request).database
