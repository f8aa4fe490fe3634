"""JSON parser for exported blog post rows.

This module turns rows exported from the ``blog_posts`` table into Article
objects. The export is either a bare list of rows or an object with a
``posts`` list:

    {
        "posts": [
            {
                "id": "5d1c...",
                "slug": "hello-world",
                "title": "Hello World",
                "excerpt": "First post",
                "content": "## Hello\\n\\nWelcome.",
                "tags": ["intro", "meta"],
                "author": "Admin",
                "published_at": "2024-05-01T08:00:00Z",
                "updated_at": "2024-05-02T08:00:00Z",
                "reading_time": "3 min",
                "status": "published",
                "featured": false
            }
        ]
    }
"""

from __future__ import annotations

from datetime import datetime, timezone
import json
import logging
from pathlib import Path
from typing import Any

from ..core.types import Article

logger = logging.getLogger(__name__)


def parse_iso8601(value: str) -> datetime:
    """Parse an ISO 8601 timestamp string into a timezone-aware datetime."""
    raw = value.strip()
    if raw.endswith("Z"):
        raw = f"{raw[:-1]}+00:00"
    parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


def load_articles(path: Path) -> list[Article]:
    """Read a JSON export from disk and parse its published rows."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return parse_articles_json(data)


def parse_articles_json(data: Any) -> list[Article]:
    """Parse exported rows into a list of published Article objects.

    Args:
        data: The decoded JSON document

    Returns:
        Articles in export order. Rows missing required fields (id, slug,
        title, published_at) are skipped with a warning; drafts are dropped.

    Raises:
        ValueError: If the document is neither a list nor an object with a
            ``posts`` list
    """
    if isinstance(data, dict):
        rows = data.get("posts")
    else:
        rows = data
    if not isinstance(rows, list):
        raise ValueError("Invalid JSON format: expected a list of posts or a 'posts' key")

    articles: list[Article] = []
    for row in rows:
        if not isinstance(row, dict):
            logger.warning(f"Skipping non-object row: {row!r}")
            continue

        row_id = row.get("id")
        slug = row.get("slug")
        title = row.get("title")
        if not row_id or not slug or not title:
            logger.warning(
                f"Skipping post {row_id or 'unknown'}: missing required fields (id, slug or title)"
            )
            continue

        published_at = _parse_timestamp(row.get("published_at"))
        if published_at is None:
            logger.warning(f"Skipping post {row_id}: missing or invalid published_at")
            continue

        status = row.get("status") or "published"
        if status != "published":
            logger.debug(f"Dropping post {row_id}: status is {status}")
            continue

        articles.append(
            Article(
                id=str(row_id),
                slug=slug,
                title=title,
                content=row.get("content") or "",
                published_at=published_at,
                tags=_unique_tags(row.get("tags")),
                excerpt=row.get("excerpt") or None,
                author=row.get("author") or None,
                reading_time=row.get("reading_time") or None,
                description=row.get("description") or None,
                updated_at=_parse_timestamp(row.get("updated_at")),
                status=status,
                featured=bool(row.get("featured", False)),
                featured_image=row.get("featured_image") or None,
            )
        )

    return articles


def _parse_timestamp(value: Any) -> datetime | None:
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return parse_iso8601(value)
    except ValueError:
        return None


def _unique_tags(raw: Any) -> tuple[str, ...]:
    """Collapse repeated tags, keeping the first occurrence's position.

    Examples:
        >>> _unique_tags(["python", "web", "python"])
        ('python', 'web')
        >>> _unique_tags(None)
        ()
    """
    if not raw:
        return ()
    return tuple(dict.fromkeys(str(tag) for tag in raw))
