"""
In-memory product filtering: category, substring search and counts
"""
from typing import Dict, Iterable, List, Optional

from ranch_site.apps.product.schemas import CATEGORIES, CategoryInfo, Product


def filter_by_category(products: Iterable[Product], category_key: str) -> List[Product]:
    """Keep products whose category key equals ``category_key`` exactly."""
    return [p for p in products if p.category_key == category_key]


def matches_search(product: Product, query: str) -> bool:
    """``query`` must already be trimmed and lower-cased."""
    name = (product.display_name or "").lower()
    description = (product.metadata.description or "").lower()
    category_value = (product.metadata.category.value if product.metadata.category else "").lower()
    return query in name or query in description or query in category_value


def search_products(products: Iterable[Product], query: Optional[str]) -> List[Product]:
    """Case-insensitive substring search over name, description and category label."""
    needle = (query or "").strip().lower()
    if not needle:
        return list(products)
    return [p for p in products if matches_search(p, needle)]


def filter_products(
    products: Iterable[Product],
    category: Optional[str] = None,
    search: Optional[str] = None,
) -> List[Product]:
    """Listing pipeline: category first, then search."""
    result = list(products)
    if category:
        result = filter_by_category(result, category)
    if search:
        result = search_products(result, search)
    return result


def count_by_category(products: Iterable[Product]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for product in products:
        key = product.category_key
        if key:
            counts[key] = counts.get(key, 0) + 1
    return counts


def get_category_info(key: Optional[str]) -> Optional[CategoryInfo]:
    if not key:
        return None
    for info in CATEGORIES:
        if info.key.value == key:
            return info
    return None
