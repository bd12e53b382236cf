"""
Pydantic schemas for the blog
"""
from pydantic import BaseModel, field_validator
from typing import Optional, List

from ranch_site.common.schemas import CosmicFile, CosmicObject


class AuthorMetadata(BaseModel):
    name: str
    bio: Optional[str] = None
    photo: Optional[CosmicFile] = None
    email: Optional[str] = None


class Author(CosmicObject):
    metadata: AuthorMetadata


class BlogCategoryMetadata(BaseModel):
    name: str
    description: Optional[str] = None


class BlogCategory(CosmicObject):
    metadata: BlogCategoryMetadata


class BlogTagMetadata(BaseModel):
    name: str


class BlogTag(CosmicObject):
    metadata: BlogTagMetadata


class BlogPostMetadata(BaseModel):
    title: str
    excerpt: str = ""
    content: str = ""
    featured_image: Optional[CosmicFile] = None
    # Relations are embedded copies (depth=1), never re-fetched by id
    author: Optional[Author] = None
    categories: List[BlogCategory] = []
    tags: List[BlogTag] = []
    published_date: Optional[str] = None
    featured: bool = False
    meta_description: Optional[str] = None

    @field_validator("categories", "tags", mode="before")
    @classmethod
    def empty_relation_as_list(cls, value):
        # The content store sends null for an empty multi-object relation
        return [] if value is None else value


class BlogPost(CosmicObject):
    metadata: BlogPostMetadata

    @property
    def category_ids(self) -> List[str]:
        return [c.id for c in self.metadata.categories]

    @property
    def tag_ids(self) -> List[str]:
        return [t.id for t in self.metadata.tags]


class BlogPostPage(BaseModel):
    """One slice of the date-sorted post list plus the overall count"""
    posts: List[BlogPost]
    total: int


# Response schemas
class BlogListResponse(BaseModel):
    posts: List[BlogPost]
    total: int
    page: int
    page_size: int
    total_pages: int
    categories: List[BlogCategory]
    featured_posts: List[BlogPost]


class BlogPostDetailResponse(BaseModel):
    post: BlogPost
    related_posts: List[BlogPost]


class BlogCategoryArchiveResponse(BaseModel):
    category: BlogCategory
    posts: List[BlogPost]


class BlogTagArchiveResponse(BaseModel):
    tag: BlogTag
    posts: List[BlogPost]


class AuthorArchiveResponse(BaseModel):
    author: Author
    posts: List[BlogPost]
