"""
Shared dependencies for FastAPI routes
"""
from fastapi import Depends, Request

from ranch_site.common.content_client import ContentClient
from ranch_site.apps.product.repository import ProductRepository
from ranch_site.apps.page.repository import PageRepository
from ranch_site.apps.site.repository import SiteSettingsRepository
from ranch_site.apps.blog.repository import (
    AuthorRepository,
    BlogCategoryRepository,
    BlogPostRepository,
    BlogTagRepository,
)


def get_content_client(request: Request) -> ContentClient:
    """Content client created at startup (see main.startup_event)"""
    return request.app.state.content_client


def get_product_repository(client: ContentClient = Depends(get_content_client)) -> ProductRepository:
    return ProductRepository(client)


def get_page_repository(client: ContentClient = Depends(get_content_client)) -> PageRepository:
    return PageRepository(client)


def get_site_settings_repository(client: ContentClient = Depends(get_content_client)) -> SiteSettingsRepository:
    return SiteSettingsRepository(client)


def get_blog_post_repository(client: ContentClient = Depends(get_content_client)) -> BlogPostRepository:
    return BlogPostRepository(client)


def get_blog_category_repository(client: ContentClient = Depends(get_content_client)) -> BlogCategoryRepository:
    return BlogCategoryRepository(client)


def get_blog_tag_repository(client: ContentClient = Depends(get_content_client)) -> BlogTagRepository:
    return BlogTagRepository(client)


def get_author_repository(client: ContentClient = Depends(get_content_client)) -> AuthorRepository:
    return AuthorRepository(client)
