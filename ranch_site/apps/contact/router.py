"""
Contact router
"""
from fastapi import APIRouter, Depends, HTTPException, status

from ranch_site.apps.contact.schemas import ContactResponse, ContactSubmission
from ranch_site.apps.contact.services import get_contact_service
from ranch_site.apps.contact.services.contact_service import ContactService

router = APIRouter()


@router.post("", response_model=ContactResponse, status_code=status.HTTP_200_OK)
async def submit_contact(
    submission: ContactSubmission,
    service: ContactService = Depends(get_contact_service),
):
    """
    Forward a contact-form message.
    No retry here; on failure the visitor can resubmit the same form.
    """
    result = await service.send(submission)
    if not result.success:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"error": result.error or "Failed to send message"}
        )
    return ContactResponse(
        success=True,
        message="Thank you for your message! We'll get back to you soon."
    )
