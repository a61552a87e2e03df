"""Repository modules for each Cosmos DB container."""

from career_canvas.database.repositories.profiles import ProfileRepository

__all__ = ["ProfileRepository"]
