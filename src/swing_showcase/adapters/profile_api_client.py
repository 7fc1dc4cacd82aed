"""Client for the remote profile API used during onboarding."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class ProfileApiError(RuntimeError):
    """The profile API failed or answered with a non-success status.

    ``status_code`` is 0 when no response was received.
    """

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class ProfileApiClient(Protocol):
    """Interface for remote profile interactions."""

    async def get_profile(self, user_id: str) -> dict[str, object] | None:
        """Return the user's profile, or None when it does not exist."""

    async def create_profile(self, payload: dict[str, object]) -> dict[str, object]:
        """Create a profile and return the API response body."""

    async def add_portfolio_photo(self, user_id: str, photo_url: str) -> None:
        """Attach a portfolio photo to the user's profile."""

    async def update_user(self, user_id: str, payload: dict[str, object]) -> None:
        """Patch the user record."""

    async def close(self) -> None:
        """Release any underlying connections."""


@dataclass
class HttpxProfileApiClient(ProfileApiClient):
    """HTTPX-backed profile API client authenticated with a bearer token."""

    base_url: str
    token: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str, token: str) -> "HttpxProfileApiClient":
        """Create a client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"), token=token, http_client=httpx.AsyncClient()
        )

    async def get_profile(self, user_id: str) -> dict[str, object] | None:
        """Fetch the profile; any non-success status means no profile."""
        response = await self._send(
            "GET", f"/users/{user_id}/profile", "Failed to fetch profile"
        )
        if response.is_success:
            return response.json() or None
        return None

    async def create_profile(self, payload: dict[str, object]) -> dict[str, object]:
        """Create the profile, raising ProfileApiError on failure."""
        response = await self._send(
            "POST", "/profile", "Failed to create profile", json=payload
        )
        self._check(response, "Failed to create profile")
        return response.json()

    async def add_portfolio_photo(self, user_id: str, photo_url: str) -> None:
        """Create a portfolio entry for a photo."""
        fallback = "Failed to upload portfolio photo"
        response = await self._send(
            "POST",
            "/profile/portfolio",
            fallback,
            json={
                "userId": user_id,
                "photoUrl": photo_url,
                "description": "Portfolio photo",
            },
        )
        self._check(response, fallback)

    async def update_user(self, user_id: str, payload: dict[str, object]) -> None:
        """Patch the user record."""
        response = await self._send(
            "PATCH", f"/users/{user_id}", "Failed to update user", json=payload
        )
        self._check(response, "Failed to update user")

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _send(
        self,
        method: str,
        path: str,
        fallback: str,
        json: dict[str, object] | None = None,
    ) -> httpx.Response:
        try:
            return await self.http_client.request(
                method,
                f"{self.base_url}{path}",
                headers={"Authorization": f"Bearer {self.token}"},
                json=json,
                timeout=15,
            )
        except httpx.HTTPError as exc:
            raise ProfileApiError(f"{fallback}: {exc}", 0) from exc

    @staticmethod
    def _check(response: httpx.Response, fallback: str) -> None:
        if response.is_success:
            return
        message = fallback
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            message = str(body["message"])
        raise ProfileApiError(message, response.status_code)
