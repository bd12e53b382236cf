"""
Page repository
"""
from typing import List, Optional

from ranch_site.common.repository import ContentRepository
from ranch_site.apps.page.schemas import Page


class PageRepository(ContentRepository[Page]):
    object_type = "pages"
    entity_name = "page"
    model = Page

    async def get_pages(self) -> List[Page]:
        return await self._find("fetch all")

    async def get_page_by_slug(self, slug: str) -> Optional[Page]:
        return await self._find_by_slug(slug)
