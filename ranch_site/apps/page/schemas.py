"""
Pydantic schemas for CMS pages
"""
from pydantic import BaseModel
from typing import Optional

from ranch_site.common.schemas import CosmicFile, CosmicObject


class PageMetadata(BaseModel):
    title: str
    hero_image: Optional[CosmicFile] = None
    content: Optional[str] = None


class Page(CosmicObject):
    metadata: PageMetadata
