from __future__ import annotations

import asyncio
from enum import Enum
import logging
from typing import Any, Callable

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from devevents.config import Settings
from devevents.core.errors import ConfigurationError

logger = logging.getLogger(__name__)


class ConnectionState(str, Enum):
    UNINITIALIZED = "uninitialized"
    CONNECTING = "connecting"
    CONNECTED = "connected"


class MongoConnection:
    """Process-wide, lazily opened MongoDB connection.

    Concurrent first callers share a single connection attempt. A failed attempt
    leaves nothing cached, so the next call starts over and re-reads settings.
    """

    def __init__(
        self,
        settings_factory: Callable[[], Settings] = Settings,
        client_factory: Callable[..., Any] = AsyncIOMotorClient,
    ) -> None:
        self._settings_factory = settings_factory
        self._client_factory = client_factory
        self._lock = asyncio.Lock()
        self._client: Any = None
        self._database: AsyncIOMotorDatabase | None = None
        self.state = ConnectionState.UNINITIALIZED

    async def get_database(self) -> AsyncIOMotorDatabase:
        if self.state is ConnectionState.CONNECTED:
            return self._database

        async with self._lock:
            if self.state is ConnectionState.CONNECTED:
                return self._database

            self.state = ConnectionState.CONNECTING
            try:
                self._client, self._database = await self._connect()
            except BaseException:
                self.state = ConnectionState.UNINITIALIZED
                raise
            self.state = ConnectionState.CONNECTED
            return self._database

    async def _connect(self) -> tuple[Any, AsyncIOMotorDatabase]:
        settings = self._settings_factory()
        if not settings.MONGODB_URI:
            raise ConfigurationError("Please define the MONGODB_URI environment variable")

        client = self._client_factory(
            settings.MONGODB_URI,
            serverSelectionTimeoutMS=settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
        )
        try:
            await client.admin.command("ping")
        except BaseException as exc:
            logger.warning("MongoDB connection attempt failed error=%s", exc)
            client.close()
            raise

        database = client.get_default_database(default=settings.MONGODB_DB_NAME)
        logger.info("Connected to MongoDB database=%s", database.name)
        return client, database

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
        self._client = None
        self._database = None
        self.state = ConnectionState.UNINITIALIZED


connection = MongoConnection()


async def get_database() -> AsyncIOMotorDatabase:
    return await connection.get_database()
