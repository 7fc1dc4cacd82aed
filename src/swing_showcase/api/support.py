"""Support desk endpoints."""

from fastapi import APIRouter, Depends

from swing_showcase.api.dependencies import get_container
from swing_showcase.api.errors import route_errors
from swing_showcase.api.schemas import ContactRequestBody
from swing_showcase.containers import AppContainer
from swing_showcase.services.support import ContactRequest

router = APIRouter(prefix="/api/support", tags=["support"])


@router.post("/contact")
@route_errors("SUPPORT_ERROR", "Failed to submit support request")
async def contact(
    body: ContactRequestBody, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    container.support_service.submit(
        ContactRequest(
            name=body.name, email=body.email, subject=body.subject, message=body.message
        )
    )
    return {"success": True, "message": "Support request submitted successfully"}


@router.get("/faq")
@route_errors("FAQ_ERROR", "Failed to get FAQs")
async def faq(container: AppContainer = Depends(get_container)) -> dict[str, object]:
    return {"success": True, "faqs": container.support_service.faqs()}
