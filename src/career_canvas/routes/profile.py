"""Profile routes — the persistence API the resume editor saves through."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status

from career_canvas.auth.middleware import current_user_id
from career_canvas.database.repositories.profiles import ProfileRepository
from career_canvas.models.profile import Profile, ProfileUpdate
from career_canvas.services.profiles import get_profile, update_profile

router = APIRouter(prefix="/api/profile", tags=["profile"])

UserId = Annotated[str, Depends(current_user_id)]


def _repo(request: Request) -> ProfileRepository:
    return request.app.state.cosmos.profiles


@router.get("", response_model=Profile)
async def read_profile(request: Request, user_id: UserId) -> Profile:
    """Return the signed-in user's profile."""
    profile = await get_profile(user_id, _repo(request))
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profile not found for this user",
        )
    return profile


@router.post("", response_model=Profile)
async def save_profile(request: Request, update: ProfileUpdate, user_id: UserId) -> Profile:
    """Create or update the signed-in user's profile from a flat payload."""
    return await update_profile(user_id, update, _repo(request))
