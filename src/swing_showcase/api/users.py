"""Profile, image, settings and account endpoints for the signed-in user."""

from fastapi import APIRouter, Depends, File, UploadFile

from swing_showcase.api.dependencies import get_container, require_user
from swing_showcase.api.errors import route_errors
from swing_showcase.api.schemas import (
    PasswordChangeRequest,
    ProfileUpdateRequest,
    SettingsUpdateRequest,
)
from swing_showcase.api.serializers import serialize_image, serialize_user
from swing_showcase.containers import AppContainer
from swing_showcase.services.auth import TokenClaims
from swing_showcase.services.uploads import IncomingImage

router = APIRouter(prefix="/api", tags=["users"])


@router.get("/user/profile")
@route_errors("PROFILE_ERROR", "Failed to get profile")
async def get_profile(
    claims: TokenClaims = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    user = container.user_service.get_user(claims.user_id)
    return {"success": True, "user": serialize_user(user)}


@router.put("/user/profile")
@route_errors("UPDATE_ERROR", "Failed to update profile")
async def update_profile(
    body: ProfileUpdateRequest,
    claims: TokenClaims = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Shallow-merge the submitted fields into the caller's profile."""
    user = container.user_service.update_profile(claims.user_id, body.updates())
    return {"success": True, "user": serialize_user(user)}


async def read_upload(upload: UploadFile, limit: int) -> bytes:
    """Read at most one byte past ``limit`` so oversized files are still caught."""
    return await upload.read(limit + 1)


@router.post("/user/profile/images")
@route_errors("UPLOAD_ERROR", "File upload failed")
async def upload_images(
    images: list[UploadFile] = File(...),
    _claims: TokenClaims = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Store profile or voting images sent as multipart ``images`` fields."""
    incoming = [
        IncomingImage(
            filename=upload.filename or "",
            content_type=upload.content_type or "",
            content=await read_upload(upload, container.upload_service.max_bytes),
        )
        for upload in images
    ]
    stored = container.upload_service.upload(incoming)
    return {"success": True, "files": [serialize_image(image) for image in stored]}


@router.delete("/user/profile/images/{image_id}")
@route_errors("DELETE_ERROR", "Failed to delete image")
async def delete_image(
    image_id: str,
    _claims: TokenClaims = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    container.upload_service.delete(image_id)
    return {"success": True, "message": "Image deleted successfully"}


@router.delete("/user/account")
@route_errors("DELETE_ACCOUNT_ERROR", "Failed to delete account")
async def delete_account(
    claims: TokenClaims = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    container.user_service.delete_account(claims.user_id)
    return {"success": True, "message": "Account deleted successfully"}


@router.get("/settings")
@route_errors("SETTINGS_ERROR", "Failed to get settings")
async def get_settings(
    claims: TokenClaims = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    settings = container.user_service.get_settings(claims.user_id)
    return {"success": True, "settings": settings}


@router.put("/settings")
@route_errors("UPDATE_SETTINGS_ERROR", "Failed to update settings")
async def update_settings(
    body: SettingsUpdateRequest,
    claims: TokenClaims = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    settings = container.user_service.update_settings(claims.user_id, body.updates())
    return {"success": True, "settings": settings}


@router.put("/settings/password")
@route_errors("PASSWORD_ERROR", "Failed to change password")
async def change_password(
    body: PasswordChangeRequest,
    claims: TokenClaims = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    container.user_service.change_password(
        claims.user_id, body.current_password, body.new_password
    )
    return {"success": True, "message": "Password updated successfully"}
