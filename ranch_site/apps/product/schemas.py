"""
Pydantic schemas for the product catalog
"""
from enum import Enum
from pydantic import BaseModel
from typing import Optional, List, Dict

from ranch_site.common.schemas import CosmicFile, CosmicObject


class ProductCategory(str, Enum):
    BEEF = "beef"
    DAIRY = "dairy"
    EGGS = "eggs"
    PANTRY = "pantry"
    GOODS = "goods"


class CategoryOption(BaseModel):
    """Select-dropdown value: key plus the label entered in the CMS"""
    key: str
    value: str = ""


class ProductMetadata(BaseModel):
    name: str
    description: Optional[str] = None
    price: str = ""
    category: Optional[CategoryOption] = None
    featured: bool = False
    image: Optional[CosmicFile] = None


class Product(CosmicObject):
    metadata: ProductMetadata

    @property
    def display_name(self) -> str:
        return self.metadata.name or self.title

    @property
    def category_key(self) -> Optional[str]:
        return self.metadata.category.key if self.metadata.category else None


class CategoryInfo(BaseModel):
    key: ProductCategory
    label: str
    description: str


CATEGORIES: tuple = (
    CategoryInfo(key=ProductCategory.BEEF, label="Grass-Fed Beef", description="100% grass-fed and finished beef"),
    CategoryInfo(key=ProductCategory.DAIRY, label="Dairy", description="Raw milk and artisan cheeses"),
    CategoryInfo(key=ProductCategory.EGGS, label="Eggs", description="Pasture-raised eggs"),
    CategoryInfo(key=ProductCategory.PANTRY, label="Pantry", description="Honey, preserves, and more"),
    CategoryInfo(key=ProductCategory.GOODS, label="Farm Goods", description="Handcrafted farm accessories"),
)


# Response schemas
class CategoryCount(BaseModel):
    key: ProductCategory
    label: str
    description: str
    count: int


class CategoryFilterLink(BaseModel):
    key: Optional[str] = None
    label: str
    count: int
    href: str
    active: bool


class ProductListResponse(BaseModel):
    """Product listing page payload"""
    products: List[Product]
    total: int
    search: Optional[str] = None
    category: Optional[str] = None
    current_category: Optional[CategoryInfo] = None
    category_filters: List[CategoryFilterLink]
    category_counts: Dict[str, int]
    summary: Optional[str] = None
    message: Optional[str] = None
