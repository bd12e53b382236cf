"""
Pydantic schemas shared by every content type
"""
from pydantic import BaseModel
from typing import Optional


class CosmicFile(BaseModel):
    """File/image reference as returned by the content store"""
    url: str
    imgix_url: str


class CosmicObject(BaseModel):
    """Fields every content-store object carries; subclasses add a typed metadata"""
    id: str
    slug: str
    title: str = ""
    type: Optional[str] = None
    created_at: Optional[str] = None
    modified_at: Optional[str] = None
