"""Authentication endpoints."""

from fastapi import APIRouter, Depends

from swing_showcase.api.dependencies import get_container, require_user
from swing_showcase.api.errors import route_errors
from swing_showcase.api.schemas import GoogleAuthRequest, LoginRequest, RegisterRequest
from swing_showcase.api.serializers import serialize_user
from swing_showcase.containers import AppContainer
from swing_showcase.services.auth import TokenClaims
from swing_showcase.services.users import AuthResult

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/google")
@route_errors("AUTH_FAILED", "Authentication failed")
async def google_sign_in(
    body: GoogleAuthRequest, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    """Exchange a Google ID token for a session token."""
    result = container.user_service.authenticate_google(
        id_token=body.id_token,
        google_id=body.google_id,
        email=body.email,
        name=body.name,
        picture=body.picture,
    )
    return _auth_response(result)


@router.post("/register")
@route_errors("REGISTRATION_FAILED", "Registration failed")
async def register(
    body: RegisterRequest, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    result = container.user_service.register(body.email, body.password, body.name)
    return _auth_response(result)


@router.post("/login")
@route_errors("LOGIN_FAILED", "Login failed")
async def login(
    body: LoginRequest, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    result = container.user_service.login(body.email, body.password)
    return _auth_response(result)


@router.post("/refresh")
@route_errors("REFRESH_FAILED", "Token refresh failed")
async def refresh(
    claims: TokenClaims = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Issue a new token for the caller."""
    return _auth_response(container.user_service.refresh(claims.user_id))


@router.post("/logout")
async def logout(_claims: TokenClaims = Depends(require_user)) -> dict[str, object]:
    """Tokens are stateless; the client simply discards its copy."""
    return {"success": True, "message": "Logged out successfully"}


def _auth_response(result: AuthResult) -> dict[str, object]:
    return {"success": True, "user": serialize_user(result.user), "token": result.token}
