"""Relational database connection using SQLAlchemy's async engine."""
import logging
import ssl
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine

from workhours.config import Settings
from workhours.tables import metadata

logger = logging.getLogger(__name__)


def _connect_args(settings: Settings) -> dict:
    """Driver arguments for TLS on server databases."""
    if not settings.database_ssl_enabled:
        return {}
    context = ssl.create_default_context()
    if settings.is_production:
        # Managed Postgres hosts commonly present self-signed certificates
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    return {"ssl": context}


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Connection pool manager for the work hours database."""

    def __init__(self, settings: Settings):
        """Create the engine; no connection is opened until first use."""
        self.url = settings.async_database_url
        self.is_sqlite = self.url.startswith("sqlite")

        engine_options = {}
        if not self.is_sqlite:
            engine_options = {
                "pool_pre_ping": True,
                "pool_recycle": 280,
                "connect_args": _connect_args(settings),
            }

        self.engine: AsyncEngine = create_async_engine(self.url, **engine_options)
        if self.is_sqlite:
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    async def connect(self) -> None:
        """Create tables that do not exist yet."""
        async with self.engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
        logger.info("Tables 'employees' and 'work_hours' are ready")

    async def disconnect(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()
        logger.info("Disconnected from database")

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[AsyncConnection]:
        """
        Scoped transaction.

        Commits when the block exits normally and rolls back when it raises.
        """
        async with self.engine.begin() as conn:
            yield conn

    @asynccontextmanager
    async def connection(self) -> AsyncIterator[AsyncConnection]:
        """Pooled connection for read-only statements."""
        async with self.engine.connect() as conn:
            yield conn
