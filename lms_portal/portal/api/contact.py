"""Contact form endpoint."""
import asyncio

from fastapi import APIRouter, status

from portal.schemas.contact import ContactRequest, ContactResponse
from portal.core.config import settings
from portal.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/contact", tags=["Contact"])


@router.post(
    "",
    response_model=ContactResponse,
    status_code=status.HTTP_200_OK,
    summary="Send a contact message",
    description="Validate a contact form submission. Field errors come back as 422 with one entry per field.",
)
async def submit_contact(body: ContactRequest) -> ContactResponse:
    """
    Accept a contact message.

    Nothing is delivered; the submission is acknowledged after the
    configured form delay.
    """
    logger.info(
        "Contact form submitted",
        extra={"sender_email": body.email, "message_length": len(body.message)},
    )

    if settings.FORM_SUBMIT_DELAY_MS > 0:
        await asyncio.sleep(settings.FORM_SUBMIT_DELAY_MS / 1000)

    return ContactResponse(
        status="sent",
        title="Message sent!",
        description="We'll get back to you soon.",
    )
