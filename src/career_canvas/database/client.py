"""Cosmos DB connection for the profile store."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from azure.cosmos import PartitionKey
from azure.cosmos.aio import CosmosClient as AzureCosmosClient

from career_canvas.database.repositories.profiles import ProfileRepository

if TYPE_CHECKING:
    from azure.cosmos.aio import DatabaseProxy

    from career_canvas.config import CosmosConfig

logger = logging.getLogger(__name__)


class CosmosClient:
    """Connects to Cosmos DB and makes sure the profiles container exists.

    ``initialize`` must run before ``database`` or ``profiles`` is used;
    the app lifespan does this on startup and calls ``close`` on shutdown.
    """

    def __init__(self, config: CosmosConfig) -> None:
        self._config = config
        self._client: AzureCosmosClient | None = None
        self._database: DatabaseProxy | None = None

    async def initialize(self) -> None:
        if not self._config.endpoint:
            msg = "COSMOS_ENDPOINT is not set — add it to .env"
            raise ConnectionError(msg)
        self._client = AzureCosmosClient(self._config.endpoint, credential=self._config.key)
        self._database = await self._client.create_database_if_not_exists(id=self._config.database)
        await self._database.create_container_if_not_exists(
            id=ProfileRepository.container_name,
            partition_key=PartitionKey(path="/id"),
        )
        logger.info(
            "Cosmos DB ready — database=%s container=%s",
            self._config.database,
            ProfileRepository.container_name,
        )

    async def close(self) -> None:
        if self._client is None:
            return
        await self._client.close()
        self._client = None
        self._database = None
        logger.info("Cosmos DB connection closed")

    @property
    def database(self) -> DatabaseProxy:
        if self._database is None:
            msg = "Cosmos DB is not connected — await initialize() first"
            raise RuntimeError(msg)
        return self._database

    @property
    def profiles(self) -> ProfileRepository:
        """Repository over the profiles container."""
        return ProfileRepository(self.database)
