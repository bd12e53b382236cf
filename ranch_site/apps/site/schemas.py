"""
Pydantic schemas for site settings
"""
from pydantic import BaseModel
from typing import Optional, List

from ranch_site.common.schemas import CosmicFile, CosmicObject
from ranch_site.apps.product.schemas import CategoryCount, Product
from ranch_site.config import DEFAULT_RANCH_NAME


class SiteSettingsMetadata(BaseModel):
    ranch_name: str = DEFAULT_RANCH_NAME
    tagline: Optional[str] = None
    logo: Optional[CosmicFile] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    instagram_url: Optional[str] = None
    facebook_url: Optional[str] = None


class SiteSettings(CosmicObject):
    """Singleton settings object; at most one exists in the bucket"""
    metadata: SiteSettingsMetadata


class SiteSettingsResponse(BaseModel):
    settings: SiteSettingsMetadata
    is_default: bool


class HomeResponse(BaseModel):
    """Home page payload"""
    settings: SiteSettingsMetadata
    featured_products: List[Product]
    categories: List[CategoryCount]
    total_products: int
