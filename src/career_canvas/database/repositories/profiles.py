"""Repository for the profiles container (partitioned by /id, one document per user)."""

from __future__ import annotations

from career_canvas.database.repositories.base import BaseRepository
from career_canvas.models.profile import Profile


class ProfileRepository(BaseRepository[Profile]):
    container_name = "profiles"
    model_class = Profile

    async def get_by_user(self, user_id: str) -> Profile | None:
        """Fetch a user's profile; the document id is the user id."""
        return await self.get(user_id, user_id)
