"""
Contact form delivery service
Forwards submissions to the configured notification endpoint
"""
import httpx
from typing import Optional
import logging

from ranch_site.apps.contact.schemas import ContactResult, ContactSubmission
from ranch_site.config import CONTACT_API_KEY, CONTACT_API_URL, CONTACT_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class ContactService:
    def __init__(
        self,
        api_url: str = CONTACT_API_URL,
        api_key: str = CONTACT_API_KEY,
        timeout: float = CONTACT_REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_url = api_url
        self.api_key = api_key
        self.timeout = timeout
        self.transport = transport
        self.headers = {
            "Content-Type": "application/json",
        }
        if self.api_key:
            self.headers["Authorization"] = f"Bearer {self.api_key}"

    async def send(self, submission: ContactSubmission) -> ContactResult:
        """Send one submission; failures come back as an unsuccessful result, never retried."""
        if not self.api_url:
            logger.warning("Contact API URL not configured")
            return ContactResult(success=False, error="Contact form is not configured")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    self.api_url,
                    json=submission.model_dump(),
                    headers=self.headers,
                )
                response.raise_for_status()
        except httpx.TimeoutException:
            logger.error(f"Contact request timed out after {self.timeout} seconds")
            return ContactResult(success=False, error="Failed to send message")
        except httpx.HTTPStatusError as http_err:
            logger.error(f"Contact HTTP error: {http_err}")
            return ContactResult(success=False, error=_remote_error(http_err.response))
        except httpx.RequestError as req_err:
            logger.error(f"Contact request error: {req_err}")
            return ContactResult(success=False, error="Failed to send message")

        logger.info(f"Contact message delivered for {submission.email}")
        return ContactResult(success=True)


def _remote_error(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return "Failed to send message"
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return "Failed to send message"


# Initialize the contact service
contact_service = ContactService()


def get_contact_service() -> ContactService:
    return contact_service
