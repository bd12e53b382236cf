"""
Blog repositories: posts, categories, tags and authors

Category/tag/author archives are derived from the full post list rather
than pushed down to the content store; the bucket holds few posts.
"""
from typing import Callable, List, Optional

from ranch_site.common.pagination import paginate
from ranch_site.common.repository import ContentRepository
from ranch_site.apps.blog.schemas import Author, BlogCategory, BlogPost, BlogPostPage, BlogTag
from ranch_site.apps.blog.utils.relevance import score_related_posts, sort_by_published_date
from ranch_site.config import BLOG_POSTS_PER_PAGE, FEATURED_BLOG_POSTS_LIMIT, RELATED_POSTS_LIMIT


class BlogPostRepository(ContentRepository[BlogPost]):
    object_type = "blog-posts"
    entity_name = "blog post"
    model = BlogPost
    props = ["id", "title", "slug", "metadata", "created_at"]

    async def get_blog_posts(
        self,
        limit: int = BLOG_POSTS_PER_PAGE,
        skip: int = 0,
        degrade_on_error: bool = True,
    ) -> BlogPostPage:
        posts = await self._find("fetch all", degrade_on_error=degrade_on_error)
        sorted_posts = sort_by_published_date(posts)
        return BlogPostPage(posts=paginate(sorted_posts, skip, limit), total=len(sorted_posts))

    async def get_featured_blog_posts(
        self,
        limit: int = FEATURED_BLOG_POSTS_LIMIT,
        degrade_on_error: bool = True,
    ) -> List[BlogPost]:
        posts = await self._find("fetch featured", {"metadata.featured": True}, degrade_on_error=degrade_on_error)
        return sort_by_published_date(posts)[:limit]

    async def get_blog_post_by_slug(self, slug: str) -> Optional[BlogPost]:
        return await self._find_by_slug(slug)

    async def _get_matching(
        self,
        operation: str,
        predicate: Callable[[BlogPost], bool],
        limit: int,
    ) -> List[BlogPost]:
        posts = await self._find(operation)
        return sort_by_published_date(p for p in posts if predicate(p))[:limit]

    async def get_blog_posts_by_category(self, category_slug: str, limit: int = BLOG_POSTS_PER_PAGE) -> List[BlogPost]:
        return await self._get_matching(
            "fetch by category",
            lambda post: any(cat.slug == category_slug for cat in post.metadata.categories),
            limit,
        )

    async def get_blog_posts_by_tag(self, tag_slug: str, limit: int = BLOG_POSTS_PER_PAGE) -> List[BlogPost]:
        return await self._get_matching(
            "fetch by tag",
            lambda post: any(tag.slug == tag_slug for tag in post.metadata.tags),
            limit,
        )

    async def get_blog_posts_by_author(self, author_slug: str, limit: int = BLOG_POSTS_PER_PAGE) -> List[BlogPost]:
        return await self._get_matching(
            "fetch by author",
            lambda post: post.metadata.author is not None and post.metadata.author.slug == author_slug,
            limit,
        )

    async def get_related_blog_posts(self, post_id: str, limit: int = RELATED_POSTS_LIMIT) -> List[BlogPost]:
        """Posts sharing categories/tags with ``post_id``; empty when that post does not exist."""
        source = await self._find_one("fetch related", {"id": post_id})
        if source is None:
            return []
        candidates = await self._find("fetch related")
        return score_related_posts(source, candidates, limit)


class BlogCategoryRepository(ContentRepository[BlogCategory]):
    object_type = "blog-categories"
    entity_name = "blog category"
    model = BlogCategory
    depth = None

    async def get_blog_categories(self) -> List[BlogCategory]:
        return await self._find("fetch all")

    async def get_blog_category_by_slug(self, slug: str) -> Optional[BlogCategory]:
        return await self._find_by_slug(slug)


class BlogTagRepository(ContentRepository[BlogTag]):
    object_type = "blog-tags"
    entity_name = "blog tag"
    model = BlogTag
    depth = None

    async def get_blog_tags(self) -> List[BlogTag]:
        return await self._find("fetch all")

    async def get_blog_tag_by_slug(self, slug: str) -> Optional[BlogTag]:
        return await self._find_by_slug(slug)


class AuthorRepository(ContentRepository[Author]):
    object_type = "authors"
    entity_name = "author"
    model = Author
    depth = None

    async def get_author_by_slug(self, slug: str) -> Optional[Author]:
        return await self._find_by_slug(slug)
