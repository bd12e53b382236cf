"""
Cosmic content store client
Thin async wrapper around the Cosmic REST API (v3) objects endpoint
"""
import json
import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import BaseModel

from ranch_site.common.errors import ContentStoreError
from ranch_site.config import (
    COSMIC_API_URLS,
    CONTENT_REQUEST_TIMEOUT,
    get_cosmic_api_url,
    get_cosmic_bucket_slug,
    get_cosmic_read_key,
)

logger = logging.getLogger(__name__)


class ContentResponse(BaseModel):
    """Matching objects plus the total the store reports for the query"""
    objects: List[Dict[str, Any]]
    total: int = 0


class ContentClient:
    """
    Read-only handle to one Cosmic bucket.

    Construct one per process and pass it to the repositories. Tests can
    hand in their own ``httpx.AsyncClient`` (e.g. with a MockTransport).
    """

    def __init__(
        self,
        bucket_slug: str,
        read_key: str,
        api_url: str = COSMIC_API_URLS["staging"],
        timeout: float = CONTENT_REQUEST_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.bucket_slug = bucket_slug
        self.read_key = read_key
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=timeout)

    @property
    def objects_url(self) -> str:
        return f"{self.api_url}/buckets/{self.bucket_slug}/objects"

    async def find(
        self,
        query: Dict[str, Any],
        props: Optional[List[str]] = None,
        depth: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> ContentResponse:
        """Find every object matching the equality filters in ``query``."""
        params: Dict[str, Any] = {
            "query": json.dumps(query),
            "read_key": self.read_key,
        }
        if props:
            params["props"] = ",".join(props)
        if depth is not None:
            params["depth"] = depth
        if limit is not None:
            params["limit"] = limit

        logger.debug(f"Content store query: {query} (props={props}, depth={depth}, limit={limit})")

        try:
            response = await self._http.get(self.objects_url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as http_err:
            status_code = http_err.response.status_code
            raise ContentStoreError(_error_message(http_err.response), status_code=status_code) from http_err
        except httpx.RequestError as req_err:
            raise ContentStoreError(f"Content store request failed: {req_err}") from req_err

        try:
            data = response.json()
        except ValueError as e:
            raise ContentStoreError("Content store returned invalid JSON", status_code=response.status_code) from e
        if not isinstance(data, dict):
            raise ContentStoreError("Content store returned an unexpected payload", status_code=response.status_code)

        objects = data.get("objects") or []
        return ContentResponse(objects=objects, total=data.get("total", len(objects)))

    async def find_one(
        self,
        query: Dict[str, Any],
        props: Optional[List[str]] = None,
        depth: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Find the first object matching ``query``; raises a 404 error when there is none."""
        response = await self.find(query, props=props, depth=depth, limit=1)
        if not response.objects:
            raise ContentStoreError("No objects found", status_code=404)
        return response.objects[0]

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return f"HTTP {response.status_code}"
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"HTTP {response.status_code}"


def create_content_client() -> ContentClient:
    """Build the content client from environment configuration"""
    client = ContentClient(
        bucket_slug=get_cosmic_bucket_slug(),
        read_key=get_cosmic_read_key(),
        api_url=get_cosmic_api_url(),
        timeout=CONTENT_REQUEST_TIMEOUT,
    )
    logger.info(f"Content client initialized for bucket {client.bucket_slug} ({client.api_url})")
    return client
