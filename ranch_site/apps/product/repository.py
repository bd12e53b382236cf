"""
Product repository
"""
from typing import List, Optional

from ranch_site.common.repository import ContentRepository
from ranch_site.apps.product.schemas import Product
from ranch_site.apps.product.utils.filters import filter_by_category, search_products


class ProductRepository(ContentRepository[Product]):
    object_type = "products"
    entity_name = "product"
    model = Product

    async def get_products(self) -> List[Product]:
        return await self._find("fetch all")

    async def get_featured_products(self) -> List[Product]:
        return await self._find("fetch featured", {"metadata.featured": True})

    async def get_products_by_category(self, category_key: str) -> List[Product]:
        products = await self._find("fetch by category")
        return filter_by_category(products, category_key)

    async def search_products(self, query: str) -> List[Product]:
        products = await self._find("search")
        return search_products(products, query)

    async def get_product_by_slug(self, slug: str) -> Optional[Product]:
        return await self._find_by_slug(slug)
