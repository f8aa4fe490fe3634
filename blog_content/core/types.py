"""
Core data types for blog content.

This module defines the structures shared by the renderer and the list filter:
- Article: One published blog post as stored by the backend
- SearchPredicate: Free-text term plus tag selection built from list UI state
- BlogStats: Aggregate counts over an article collection
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

# Dialects a stored article body can arrive in
MARKUP = "markup"
PLAIN = "plain"


@dataclass(frozen=True)
class Article:
    """Represents a single blog post row.

    Instances are never mutated by the renderer or the filter; callers get new
    collections back instead.

    Attributes:
        id: Backend row identifier
        slug: URL slug of the post
        title: The post headline
        content: Stored body text, either markup or Markdown-like shorthand
        published_at: Publication timestamp (timezone-aware)
        tags: Ordered tag names, unique within one article
        excerpt: Optional short teaser shown in lists
        author: Optional author display name
        reading_time: Optional human readable reading time, e.g. "5 min"
        description: Optional SEO description
        updated_at: Optional last update timestamp
        status: "published" or "draft"
        featured: Whether the post is promoted on the front page
        featured_image: Optional cover image URL
    """

    id: str
    slug: str
    title: str
    content: str
    published_at: datetime
    tags: tuple[str, ...] = ()
    excerpt: str | None = None
    author: str | None = None
    reading_time: str | None = None
    description: str | None = None
    updated_at: datetime | None = None
    status: str = "published"
    featured: bool = False
    featured_image: str | None = None


@dataclass(frozen=True)
class SearchPredicate:
    """Search box text and selected tag chips.

    Attributes:
        term: Case-insensitive substring; empty matches everything
        tags: Selected tags; empty means no tag constraint, otherwise any-of
        author: Optional exact author match
        featured: Optional featured flag constraint
    """

    term: str = ""
    tags: frozenset[str] = field(default_factory=frozenset)
    author: str | None = None
    featured: bool | None = None

    @property
    def is_active(self) -> bool:
        return bool(self.term) or bool(self.tags)


@dataclass
class BlogStats:
    """Aggregate counts over a collection of articles."""

    total_posts: int
    total_tags: int
