"""
Base repository for content-store entities

Each entity kind gets a subclass that fixes the object type, the
projected props and the relation depth. The base class owns the
failure policy:

- "not found" from the store is absence: ``[]`` or ``None``
- anything else raises ``RetrievalError`` naming entity and operation,
  unless the operation was called with ``degrade_on_error=True``
"""
import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ranch_site.common.content_client import ContentClient
from ranch_site.common.errors import ContentStoreError, EntityValidationError, RetrievalError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

DEFAULT_PROPS = ["id", "title", "slug", "metadata"]


class ContentRepository(Generic[T]):
    object_type: str = ""
    entity_name: str = ""
    model: Type[T]
    props: List[str] = DEFAULT_PROPS
    depth: Optional[int] = 1

    def __init__(self, client: ContentClient):
        self.client = client

    def _query(self, filters: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        query: Dict[str, Any] = {"type": self.object_type}
        if filters:
            query.update(filters)
        return query

    def _parse(self, data: Dict[str, Any], operation: str) -> T:
        try:
            return self.model.model_validate(data)
        except ValidationError as e:
            logger.error(f"Invalid {self.entity_name} payload (id={data.get('id')}): {e}")
            raise EntityValidationError(self.entity_name, operation) from e

    async def _find(
        self,
        operation: str,
        filters: Optional[Dict[str, Any]] = None,
        degrade_on_error: bool = False,
    ) -> List[T]:
        try:
            return await self._fetch_all(operation, filters)
        except Exception as e:
            if not degrade_on_error:
                raise
            # Listing pages render with no entries rather than failing
            logger.warning(f"Failed to retrieve {self.entity_name} ({operation}), returning empty result: {e}")
            return []

    async def _fetch_all(self, operation: str, filters: Optional[Dict[str, Any]] = None) -> List[T]:
        try:
            response = await self.client.find(self._query(filters), props=self.props, depth=self.depth)
        except ContentStoreError as e:
            if e.is_not_found:
                return []
            raise RetrievalError(self.entity_name, operation) from e
        return [self._parse(obj, operation) for obj in response.objects]

    async def _find_one(self, operation: str, filters: Dict[str, Any]) -> Optional[T]:
        try:
            data = await self.client.find_one(self._query(filters), props=self.props, depth=self.depth)
        except ContentStoreError as e:
            if e.is_not_found:
                return None
            raise RetrievalError(self.entity_name, operation) from e
        return self._parse(data, operation)

    async def _find_by_slug(self, slug: str) -> Optional[T]:
        if not slug:
            raise ValueError("slug must be a non-empty string")
        return await self._find_one("fetch by slug", {"slug": slug})
