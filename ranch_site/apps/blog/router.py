"""
Blog router
Paginated listing, archives by category/tag/author and post detail with related posts
"""
from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import Optional, List
import asyncio
import logging

from ranch_site.common.errors import RetrievalError
from ranch_site.common.pagination import page_window, total_pages
from ranch_site.config import (
    ARCHIVE_POSTS_LIMIT,
    BLOG_POSTS_PER_PAGE,
    FEATURED_BLOG_POSTS_LIMIT,
    RELATED_POSTS_LIMIT,
)
from ranch_site.dependencies import (
    get_author_repository,
    get_blog_category_repository,
    get_blog_post_repository,
    get_blog_tag_repository,
)
from ranch_site.apps.blog.repository import (
    AuthorRepository,
    BlogCategoryRepository,
    BlogPostRepository,
    BlogTagRepository,
)
from ranch_site.apps.blog.schemas import (
    AuthorArchiveResponse,
    BlogCategory,
    BlogCategoryArchiveResponse,
    BlogListResponse,
    BlogPostDetailResponse,
    BlogTag,
    BlogTagArchiveResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


async def _no_featured_posts():
    return []


def _retrieval_failed(what: str, error: RetrievalError) -> HTTPException:
    logger.error(f"Error fetching {what}: {str(error)}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=str(error)
    )


@router.get("", response_model=BlogListResponse, status_code=status.HTTP_200_OK)
async def list_blog_posts(
    page: Optional[str] = Query(None, description="Page number, defaults to 1"),
    post_repository: BlogPostRepository = Depends(get_blog_post_repository),
    category_repository: BlogCategoryRepository = Depends(get_blog_category_repository),
):
    """
    Blog listing page.
    Featured posts are only loaded for the first page. Post listings
    degrade to empty on failure; the category sidebar does not.
    """
    window = page_window(page, BLOG_POSTS_PER_PAGE)

    try:
        post_page, categories, featured_posts = await asyncio.gather(
            post_repository.get_blog_posts(window.page_size, window.skip),
            category_repository.get_blog_categories(),
            post_repository.get_featured_blog_posts(FEATURED_BLOG_POSTS_LIMIT)
            if window.page == 1 else _no_featured_posts(),
        )
    except RetrievalError as e:
        raise _retrieval_failed("blog listing", e)

    return BlogListResponse(
        posts=post_page.posts,
        total=post_page.total,
        page=window.page,
        page_size=window.page_size,
        total_pages=total_pages(post_page.total, window.page_size),
        categories=categories,
        featured_posts=featured_posts,
    )


@router.get("/categories", response_model=List[BlogCategory], status_code=status.HTTP_200_OK)
async def list_blog_categories(
    repository: BlogCategoryRepository = Depends(get_blog_category_repository),
):
    try:
        return await repository.get_blog_categories()
    except RetrievalError as e:
        raise _retrieval_failed("blog categories", e)


@router.get("/tags", response_model=List[BlogTag], status_code=status.HTTP_200_OK)
async def list_blog_tags(
    repository: BlogTagRepository = Depends(get_blog_tag_repository),
):
    try:
        return await repository.get_blog_tags()
    except RetrievalError as e:
        raise _retrieval_failed("blog tags", e)


@router.get("/category/{slug}", response_model=BlogCategoryArchiveResponse, status_code=status.HTTP_200_OK)
async def get_category_archive(
    slug: str,
    category_repository: BlogCategoryRepository = Depends(get_blog_category_repository),
    post_repository: BlogPostRepository = Depends(get_blog_post_repository),
):
    try:
        category, posts = await asyncio.gather(
            category_repository.get_blog_category_by_slug(slug),
            post_repository.get_blog_posts_by_category(slug, ARCHIVE_POSTS_LIMIT),
        )
    except RetrievalError as e:
        raise _retrieval_failed(f"blog category {slug}", e)

    if category is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Blog category not found: {slug}"
        )
    return BlogCategoryArchiveResponse(category=category, posts=posts)


@router.get("/tag/{slug}", response_model=BlogTagArchiveResponse, status_code=status.HTTP_200_OK)
async def get_tag_archive(
    slug: str,
    tag_repository: BlogTagRepository = Depends(get_blog_tag_repository),
    post_repository: BlogPostRepository = Depends(get_blog_post_repository),
):
    try:
        tag, posts = await asyncio.gather(
            tag_repository.get_blog_tag_by_slug(slug),
            post_repository.get_blog_posts_by_tag(slug, ARCHIVE_POSTS_LIMIT),
        )
    except RetrievalError as e:
        raise _retrieval_failed(f"blog tag {slug}", e)

    if tag is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Blog tag not found: {slug}"
        )
    return BlogTagArchiveResponse(tag=tag, posts=posts)


@router.get("/author/{slug}", response_model=AuthorArchiveResponse, status_code=status.HTTP_200_OK)
async def get_author_archive(
    slug: str,
    author_repository: AuthorRepository = Depends(get_author_repository),
    post_repository: BlogPostRepository = Depends(get_blog_post_repository),
):
    try:
        author, posts = await asyncio.gather(
            author_repository.get_author_by_slug(slug),
            post_repository.get_blog_posts_by_author(slug, ARCHIVE_POSTS_LIMIT),
        )
    except RetrievalError as e:
        raise _retrieval_failed(f"author {slug}", e)

    if author is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Author not found: {slug}"
        )
    return AuthorArchiveResponse(author=author, posts=posts)


@router.get("/{slug}", response_model=BlogPostDetailResponse, status_code=status.HTTP_200_OK)
async def get_blog_post(
    slug: str,
    repository: BlogPostRepository = Depends(get_blog_post_repository),
):
    """Single post plus posts sharing its categories and tags"""
    try:
        post = await repository.get_blog_post_by_slug(slug)
        if post is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Blog post not found: {slug}"
            )
        related_posts = await repository.get_related_blog_posts(post.id, RELATED_POSTS_LIMIT)
    except HTTPException:
        raise
    except RetrievalError as e:
        raise _retrieval_failed(f"blog post {slug}", e)

    return BlogPostDetailResponse(post=post, related_posts=related_posts)
