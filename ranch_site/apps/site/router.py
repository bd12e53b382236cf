"""
Site router: site-wide settings and the home page
"""
from fastapi import APIRouter, Depends, HTTPException, status
import asyncio
import logging

from ranch_site.common.errors import RetrievalError
from ranch_site.dependencies import get_product_repository, get_site_settings_repository
from ranch_site.apps.product.repository import ProductRepository
from ranch_site.apps.product.schemas import CATEGORIES, CategoryCount
from ranch_site.apps.product.utils.filters import count_by_category
from ranch_site.apps.site.repository import SiteSettingsRepository
from ranch_site.apps.site.schemas import HomeResponse, SiteSettingsMetadata, SiteSettingsResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/site/settings", response_model=SiteSettingsResponse, status_code=status.HTTP_200_OK)
async def get_site_settings(
    repository: SiteSettingsRepository = Depends(get_site_settings_repository),
):
    """Site settings, or defaults when the bucket has none"""
    try:
        settings = await repository.get_site_settings()
    except RetrievalError as e:
        logger.error(f"Error fetching site settings: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

    if settings is None:
        return SiteSettingsResponse(settings=SiteSettingsMetadata(), is_default=True)
    return SiteSettingsResponse(settings=settings.metadata, is_default=False)


@router.get("/home", response_model=HomeResponse, status_code=status.HTTP_200_OK)
async def get_home(
    settings_repository: SiteSettingsRepository = Depends(get_site_settings_repository),
    product_repository: ProductRepository = Depends(get_product_repository),
):
    """
    Home page content.
    Settings, featured products and the full catalog are fetched concurrently;
    any failure fails the whole page.
    """
    try:
        settings, featured_products, all_products = await asyncio.gather(
            settings_repository.get_site_settings_or_default(),
            product_repository.get_featured_products(),
            product_repository.get_products(),
        )
    except RetrievalError as e:
        logger.error(f"Error building home page: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

    counts = count_by_category(all_products)
    categories = [
        CategoryCount(
            key=info.key,
            label=info.label,
            description=info.description,
            count=counts.get(info.key.value, 0),
        )
        for info in CATEGORIES
    ]

    return HomeResponse(
        settings=settings,
        featured_products=featured_products,
        categories=categories,
        total_products=len(all_products),
    )
