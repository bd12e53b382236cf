"""
Site settings repository
"""
from typing import Optional

from ranch_site.common.repository import ContentRepository
from ranch_site.apps.site.schemas import SiteSettings, SiteSettingsMetadata


class SiteSettingsRepository(ContentRepository[SiteSettings]):
    object_type = "site-settings"
    entity_name = "site settings"
    model = SiteSettings
    props = ["id", "slug", "metadata"]

    async def get_site_settings(self) -> Optional[SiteSettings]:
        return await self._find_one("fetch", {})

    async def get_site_settings_or_default(self) -> SiteSettingsMetadata:
        """Settings metadata, falling back to defaults when no settings object exists"""
        settings = await self.get_site_settings()
        return settings.metadata if settings else SiteSettingsMetadata()
