"""Notification endpoints."""

from fastapi import APIRouter, Depends

from swing_showcase.api.dependencies import get_container, require_user
from swing_showcase.api.errors import route_errors
from swing_showcase.api.serializers import serialize_notification
from swing_showcase.containers import AppContainer
from swing_showcase.services.auth import TokenClaims

router = APIRouter(prefix="/api/notifications", tags=["notifications"])


@router.get("")
@route_errors("NOTIFICATIONS_ERROR", "Failed to get notifications")
async def list_notifications(
    claims: TokenClaims = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    notifications = container.notification_service.list_for_user(claims.user_id)
    return {
        "success": True,
        "notifications": [serialize_notification(item) for item in notifications],
    }


@router.post("/read-all")
@route_errors("MARK_ALL_READ_ERROR", "Failed to mark all notifications as read")
async def mark_all_read(
    claims: TokenClaims = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    container.notification_service.mark_all_read(claims.user_id)
    return {"success": True, "message": "All notifications marked as read"}


@router.post("/{notification_id}/read")
@route_errors("MARK_READ_ERROR", "Failed to mark notification as read")
async def mark_read(
    notification_id: str,
    claims: TokenClaims = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    container.notification_service.mark_read(claims.user_id, notification_id)
    return {"success": True, "message": "Notification marked as read"}
