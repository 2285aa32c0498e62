from sqlalchemy import Column, String, Boolean, Text, Integer, DateTime, JSON, Index
from sqlalchemy.sql import func
from .base import BaseModel


class BlogPost(BaseModel):
    __tablename__ = "blog_post"
    __table_args__ = (
        Index("ix_blog_post_active_published", "is_active", "published_at"),
        Index("ix_blog_post_category_featured", "category", "featured"),
    )
    
    title = Column(String(200), nullable=False)
    slug = Column(String(100), unique=True, index=True, nullable=False)
    excerpt = Column(String(500), nullable=False)
    content = Column(Text, nullable=False)
    author = Column(JSON, nullable=False)  # {"name", "avatar", "bio"}
    published_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    read_time = Column(Integer, nullable=False)
    category = Column(String(50), nullable=False)
    tags = Column(JSON, default=list)
    featured_image = Column(String(500), nullable=False)
    images = Column(JSON, default=list)
    seo = Column(JSON, nullable=False)  # {"metaTitle", "metaDescription", "keywords"}
    featured = Column(Boolean, default=False, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)  # Soft delete
    view_count = Column(Integer, default=0, nullable=False)
    likes_count = Column(Integer, default=0, nullable=False)


BLOG_CATEGORIES = ("Destinations", "Travel Tips", "Photography", "Budget Travel", "Adventure", "Culture", "Food")
