"""
Product router
Catalog listing with category filter and search, featured products and detail
"""
from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import Optional, List
import logging

from ranch_site.common.errors import RetrievalError
from ranch_site.dependencies import get_product_repository
from ranch_site.apps.product.repository import ProductRepository
from ranch_site.apps.product.schemas import (
    CATEGORIES,
    CategoryFilterLink,
    CategoryInfo,
    Product,
    ProductListResponse,
)
from ranch_site.apps.product.utils.filters import count_by_category, filter_products, get_category_info
from ranch_site.apps.product.utils.query_sync import build_products_url

logger = logging.getLogger(__name__)

router = APIRouter()

PRODUCTS_PATH = "/products"


def _summary(count: int, search: Optional[str], category_info: Optional[CategoryInfo]) -> str:
    text = f"Found {count} {'product' if count == 1 else 'products'}"
    if search:
        text += f' matching "{search}"'
    if category_info:
        text += f" in {category_info.label}"
    return text


def _empty_message(search: Optional[str], category_info: Optional[CategoryInfo]) -> str:
    if search:
        message = f'We couldn\'t find any products matching "{search}"'
        if category_info:
            message += f" in {category_info.label}"
        return message
    return "No products found in this category."


@router.get("", response_model=ProductListResponse, status_code=status.HTTP_200_OK)
async def list_products(
    category: Optional[str] = Query(None, description="Category key to filter by"),
    search: Optional[str] = Query(None, description="Free-text search"),
    repository: ProductRepository = Depends(get_product_repository),
):
    """
    Product listing page.
    Filters by category first, then by search; counts always cover the full catalog.
    """
    try:
        products = await repository.get_products()
    except RetrievalError as e:
        logger.error(f"Error fetching products: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

    filtered = filter_products(products, category=category, search=search)
    counts = count_by_category(products)
    current_category = get_category_info(category)

    # Category links keep the current search
    category_filters = [
        CategoryFilterLink(
            key=None,
            label="All Products",
            count=len(products),
            href=build_products_url(PRODUCTS_PATH, search, None),
            active=not category,
        )
    ]
    for info in CATEGORIES:
        category_filters.append(CategoryFilterLink(
            key=info.key.value,
            label=info.label,
            count=counts.get(info.key.value, 0),
            href=build_products_url(PRODUCTS_PATH, search, info.key.value),
            active=category == info.key.value,
        ))

    return ProductListResponse(
        products=filtered,
        total=len(filtered),
        search=search,
        category=category,
        current_category=current_category,
        category_filters=category_filters,
        category_counts=counts,
        summary=_summary(len(filtered), search, current_category) if (search or category) else None,
        message=_empty_message(search, current_category) if not filtered else None,
    )


@router.get("/featured", response_model=List[Product], status_code=status.HTTP_200_OK)
async def list_featured_products(
    repository: ProductRepository = Depends(get_product_repository),
):
    """Products flagged as featured, in content-store order"""
    try:
        return await repository.get_featured_products()
    except RetrievalError as e:
        logger.error(f"Error fetching featured products: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )


@router.get("/categories", response_model=List[CategoryInfo], status_code=status.HTTP_200_OK)
async def list_categories():
    """Fixed catalog categories"""
    return list(CATEGORIES)


@router.get("/{slug}", response_model=Product, status_code=status.HTTP_200_OK)
async def get_product(
    slug: str,
    repository: ProductRepository = Depends(get_product_repository),
):
    try:
        product = await repository.get_product_by_slug(slug)
    except RetrievalError as e:
        logger.error(f"Error fetching product {slug}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product not found: {slug}"
        )
    return product
