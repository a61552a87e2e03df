"""Authentication helpers — the signed-in user comes from the session cookie.

Sign-in itself happens upstream; these helpers only read the ``user``
entry it leaves in the session.
"""

from __future__ import annotations

from typing import Any

from fastapi import HTTPException, Request, status


def get_user(request: Request) -> dict[str, Any] | None:
    """Extract the authenticated user from the session, if present."""
    return request.session.get("user") if hasattr(request, "session") else None


def require_authenticated_user(request: Request) -> dict[str, Any]:
    """Return the authenticated user or raise HTTP 401."""
    user = get_user(request)
    if not user or not user.get("id"):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user


def current_user_id(request: Request) -> str:
    """FastAPI dependency returning the signed-in user's id."""
    return str(require_authenticated_user(request)["id"])
