"""Profile collaborator contract and its HTTP implementation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import httpx

from career_canvas.models.profile import Profile, ProfileUpdate

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)

PROFILE_PATH = "/api/profile"


class ProfileServiceError(Exception):
    """The profile API could not be reached or returned an error status."""


@runtime_checkable
class ProfileGateway(Protocol):
    """Protocol for loading and persisting the profile an editor works on."""

    async def get_profile(self) -> Profile:
        """Return the stored profile."""
        ...

    async def update_profile(self, update: ProfileUpdate) -> Profile:
        """Persist a flat profile update and return the stored profile."""
        ...


class ProfileClient:
    """Talks to the profile API over HTTP."""

    def __init__(
        self,
        base_url: str,
        *,
        headers: dict[str, str] | None = None,
        cookies: dict[str, str] | None = None,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._client = client or httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            cookies=cookies,
            timeout=timeout,
        )

    async def __aenter__(self) -> ProfileClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, **kwargs: object) -> Profile:
        try:
            response = await self._client.request(method, PROFILE_PATH, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            msg = f"Profile API returned {exc.response.status_code} for {method} {PROFILE_PATH}"
            raise ProfileServiceError(msg) from exc
        except httpx.HTTPError as exc:
            msg = f"Profile API request failed: {method} {PROFILE_PATH}"
            raise ProfileServiceError(msg) from exc
        try:
            return Profile.model_validate(response.json())
        except ValueError as exc:
            msg = f"Profile API returned an unreadable body for {method} {PROFILE_PATH}"
            raise ProfileServiceError(msg) from exc

    async def get_profile(self) -> Profile:
        return await self._request("GET")

    async def update_profile(self, update: ProfileUpdate) -> Profile:
        payload = update.model_dump(mode="json", exclude_unset=True)
        logger.debug("Sending profile update with keys=%s", sorted(payload))
        return await self._request("POST", json=payload)
