"""Session-based authentication helpers."""

from career_canvas.auth.middleware import current_user_id, get_user, require_authenticated_user

__all__ = ["current_user_id", "get_user", "require_authenticated_user"]
