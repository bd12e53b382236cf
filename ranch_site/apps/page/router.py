"""
Page router for CMS-managed pages
"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
import logging

from ranch_site.common.errors import RetrievalError
from ranch_site.dependencies import get_page_repository
from ranch_site.apps.page.repository import PageRepository
from ranch_site.apps.page.schemas import Page

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[Page], status_code=status.HTTP_200_OK)
async def list_pages(
    repository: PageRepository = Depends(get_page_repository),
):
    """All pages (used to enumerate page slugs)"""
    try:
        return await repository.get_pages()
    except RetrievalError as e:
        logger.error(f"Error fetching pages: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )


@router.get("/{slug}", response_model=Page, status_code=status.HTTP_200_OK)
async def get_page(
    slug: str,
    repository: PageRepository = Depends(get_page_repository),
):
    try:
        page = await repository.get_page_by_slug(slug)
    except RetrievalError as e:
        logger.error(f"Error fetching page {slug}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

    if page is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Page not found: {slug}"
        )
    return page
