import logging
import re
from datetime import date, datetime, timezone
from typing import Annotated, Any, Dict, List, Literal, Optional

from fastapi import APIRouter, Body, Depends, Request, status
from pydantic import Field, StringConstraints, field_validator, model_validator
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.database import get_db, is_unique_violation
from app.core.documents import apply_document, merge_update
from app.core.query import CatalogQuery, EnumFilter
from app.core.responses import (
    APIError,
    CamelModel,
    DocumentResponse,
    serialize,
    success_response,
)
from app.models.blog_post import BlogPost, BLOG_CATEGORIES

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/blog", tags=["blog"])

SLUG_PATTERN = r"^[a-z0-9-]+$"
MediaPath = Annotated[str, StringConstraints(pattern=r"^(https?://|/images/)")]


def slugify(title: str) -> str:
    """Lowercase, hyphenated slug derived from a title."""
    slug = title.lower()
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug.strip())
    slug = re.sub(r"-+", "-", slug)
    return slug


class Author(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    avatar: MediaPath
    bio: str = Field(..., min_length=1, max_length=500)


class SEO(CamelModel):
    meta_title: str = Field(..., min_length=1, max_length=60)
    meta_description: str = Field(..., min_length=1, max_length=160)
    keywords: List[str] = Field(..., min_length=1, max_length=20)


class BlogPostCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    slug: Optional[Annotated[str, StringConstraints(max_length=100, pattern=SLUG_PATTERN)]] = None
    excerpt: str = Field(..., min_length=1, max_length=500)
    content: str = Field(..., min_length=1)
    author: Author
    published_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    read_time: int = Field(..., ge=1, le=120)
    category: Literal[BLOG_CATEGORIES]
    tags: List[str] = Field(..., min_length=1, max_length=10)
    featured_image: MediaPath
    images: List[MediaPath] = Field(default_factory=list)
    seo: SEO
    featured: bool = False
    is_active: bool = True

    @field_validator("slug", mode="before")
    @classmethod
    def blank_slug(cls, slug: Any) -> Any:
        return None if isinstance(slug, str) and not slug.strip() else slug

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, tags: List[str]) -> List[str]:
        return [tag.strip().lower() for tag in tags]

    @model_validator(mode="after")
    def derive_slug(self):
        if not self.slug:
            self.slug = slugify(self.title)[:100]
            if not self.slug:
                raise ValueError("Slug could not be derived from the title")
        return self


class BlogPostResponse(DocumentResponse):
    title: str
    slug: str
    excerpt: str
    content: str
    author: Author
    published_at: date
    read_time: int
    category: str
    tags: List[str] = []
    featured_image: str
    images: List[str] = []
    seo: SEO
    featured: bool
    is_active: bool
    view_count: int
    likes_count: int

    @field_validator("published_at", mode="before")
    @classmethod
    def date_only(cls, value: Any) -> Any:
        return value.date() if isinstance(value, datetime) else value


blog_catalog = CatalogQuery(
    BlogPost,
    search_columns=[
        BlogPost.title,
        BlogPost.excerpt,
        BlogPost.content,
        BlogPost.tags,
        BlogPost.author["name"].as_string(),
    ],
    enum_filters={"category": EnumFilter(BlogPost.category, BLOG_CATEGORIES)},
    tags_column=BlogPost.tags,
    featured_column=BlogPost.featured,
    sort_fields={
        "publishedAt": BlogPost.published_at,
        "title": BlogPost.title,
        "viewCount": BlogPost.view_count,
        "likesCount": BlogPost.likes_count,
        "readTime": BlogPost.read_time,
    },
    default_sort="publishedAt",
    default_order="desc",
    base_filters=[BlogPost.is_active.is_(True)],
)


def _active_post_filter(slug: str):
    """Match an active post by slug, or by id when the value is numeric."""
    if slug.isdigit():
        return BlogPost.is_active.is_(True), or_(BlogPost.id == int(slug), BlogPost.slug == slug)
    return BlogPost.is_active.is_(True), BlogPost.slug == slug


def get_post_or_404(db: Session, slug: str) -> BlogPost:
    post = db.query(BlogPost).filter(*_active_post_filter(slug)).first()
    if post is None:
        raise APIError(status.HTTP_404_NOT_FOUND, "Blog post not found")
    return post


def _commit_unique_slug(db: Session) -> None:
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if not is_unique_violation(e):
            raise
        raise APIError(status.HTTP_409_CONFLICT, "A blog post with this slug already exists")


def _increment(db: Session, post: BlogPost, column: Any) -> None:
    # evaluated by the database so concurrent increments are not lost
    db.query(BlogPost).filter(BlogPost.id == post.id).update(
        {column: column + 1}, synchronize_session=False
    )
    db.commit()
    db.refresh(post)


@router.get("")
async def get_blog_posts(request: Request, db: Session = Depends(get_db)):
    """Get active blog posts with filtering, search and pagination."""
    params = blog_catalog.parse(request.query_params)
    posts, pagination = blog_catalog.execute(db, params)

    return success_response(
        [serialize(BlogPostResponse, post) for post in posts],
        pagination=pagination,
    )


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_blog_post(post_data: BlogPostCreate, db: Session = Depends(get_db)):
    """Create a new blog post."""
    post = apply_document(BlogPost(view_count=0, likes_count=0), post_data)

    db.add(post)
    _commit_unique_slug(db)
    db.refresh(post)

    logger.info(f"Created blog post {post.id} ({post.slug})")
    return success_response(
        serialize(BlogPostResponse, post),
        message="Blog post created successfully",
        status_code=status.HTTP_201_CREATED,
    )


@router.get("/{slug}")
async def get_blog_post(slug: str, db: Session = Depends(get_db)):
    """Get an active blog post by slug or ID and count the view."""
    post = get_post_or_404(db, slug)
    _increment(db, post, BlogPost.view_count)
    return success_response(serialize(BlogPostResponse, post))


@router.put("/{slug}")
async def update_blog_post(
    slug: str,
    update_data: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db)
):
    """Update a blog post. View and like counters cannot be set directly."""
    post = get_post_or_404(db, slug)

    validated = merge_update(BlogPostCreate, post, update_data)
    apply_document(post, validated)
    _commit_unique_slug(db)
    db.refresh(post)

    logger.info(f"Updated blog post {post.id}")
    return success_response(
        serialize(BlogPostResponse, post),
        message="Blog post updated successfully",
    )


@router.delete("/{slug}")
async def delete_blog_post(slug: str, db: Session = Depends(get_db)):
    """Soft delete: the post is hidden from reads but kept in storage."""
    post = get_post_or_404(db, slug)

    post.is_active = False
    db.commit()

    logger.info(f"Soft deleted blog post {post.id}")
    return success_response(message="Blog post deleted successfully")


@router.patch("/{slug}")
@router.patch("/{slug}/like")
async def like_blog_post(slug: str, db: Session = Depends(get_db)):
    """Increment the like counter of a blog post."""
    post = get_post_or_404(db, slug)
    _increment(db, post, BlogPost.likes_count)

    return success_response(
        {"likesCount": post.likes_count},
        message="Blog post liked successfully",
    )
