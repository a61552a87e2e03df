"""Profile business logic — read and create-or-merge."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from career_canvas.models.profile import Profile

if TYPE_CHECKING:
    from career_canvas.database.repositories.profiles import ProfileRepository
    from career_canvas.models.profile import ProfileUpdate

logger = logging.getLogger(__name__)


async def get_profile(user_id: str, profiles_repo: ProfileRepository) -> Profile | None:
    """Return the user's profile, or None if they have not saved one yet."""
    return await profiles_repo.get_by_user(user_id)


async def update_profile(
    user_id: str,
    update: ProfileUpdate,
    profiles_repo: ProfileRepository,
) -> Profile:
    """Merge the set fields of an update into the user's profile, creating it if missing."""
    changes = update.model_dump(exclude_unset=True, exclude_none=True)
    existing = await profiles_repo.get_by_user(user_id)

    if existing:
        merged = Profile.model_validate({**existing.model_dump(), **changes})
        await profiles_repo.update(merged, user_id)
        logger.info("Profile updated — user=%s fields=%s", user_id, sorted(changes))
        return merged

    profile = Profile.model_validate({**changes, "id": user_id, "user_id": user_id})
    await profiles_repo.create(profile)
    logger.info("Profile created — user=%s", user_id)
    return profile
