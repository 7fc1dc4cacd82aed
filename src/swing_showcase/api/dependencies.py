"""Shared FastAPI dependencies."""

from fastapi import Depends, Header, Request

from swing_showcase.containers import AppContainer
from swing_showcase.domain.errors import ShowcaseError, TokenRequiredError
from swing_showcase.services.auth import TokenClaims


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


def require_user(
    authorization: str | None = Header(default=None),
    container: AppContainer = Depends(get_container),
) -> TokenClaims:
    """Resolve the caller from an ``Authorization: Bearer <token>`` header."""
    token = _bearer_token(authorization)
    if not token:
        raise TokenRequiredError()
    return container.token_service.verify(token)


def require_admin(
    x_admin_token: str | None = Header(default=None),
    container: AppContainer = Depends(get_container),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != container.settings.admin_token:
        raise ShowcaseError(
            "Admin token required", code="ADMIN_TOKEN_REQUIRED", status_code=401
        )


def _bearer_token(header: str | None) -> str | None:
    if not header:
        return None
    parts = header.split(" ")
    if len(parts) < 2:  # noqa: PLR2004
        return None
    return parts[1] or None
