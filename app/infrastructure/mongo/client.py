from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Callable, Optional

import structlog
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from app.core.settings import settings
from app.domain.exceptions import PersistenceBoundaryError
from app.infrastructure.observability.ingestion_logging import emit_event

logger = structlog.get_logger(__name__)

ClientFactory = Callable[..., Any]


@asynccontextmanager
async def mongo_session(
    uri: Optional[str] = None,
    *,
    client_factory: ClientFactory = AsyncMongoClient,
) -> AsyncIterator[AsyncMongoClient]:
    """
    Opens one MongoDB client for the duration of a run and verifies it with a ping.
    The client is closed on every exit path, including errors raised by the caller.
    """
    resolved_uri = uri or settings.MONGODB_ATLAS_URI
    if not resolved_uri:
        raise ValueError("MONGODB_ATLAS_URI must be set in settings.")

    client = client_factory(resolved_uri, appname="employee-seeder")
    try:
        try:
            await client.admin.command("ping")
        except PyMongoError as exc:
            emit_event(logger, "mongo_ping_failed", level="error", error=exc)
            raise PersistenceBoundaryError("MongoDB deployment did not answer ping") from exc
        emit_event(logger, "mongo_session_opened")
        yield client
    finally:
        await client.close()
        emit_event(logger, "mongo_session_closed")
