"""Cosmos DB access layer."""

from career_canvas.database.client import CosmosClient

__all__ = ["CosmosClient"]
