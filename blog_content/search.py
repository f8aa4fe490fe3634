"""
In-memory search and filtering for the article list.

The list view recomputes its visible articles on every change to the search
box or the selected tag chips. Every function here returns a new collection
and leaves its input untouched.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
import logging
from typing import Iterable

from .core.types import Article, BlogStats, SearchPredicate

logger = logging.getLogger(__name__)

SORT_KEYS = ("published_at", "updated_at", "title")
SORT_DIRECTIONS = ("asc", "desc")

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def _title_key(article: Article) -> str:
    return article.title.lower()


def _updated_key(article: Article) -> datetime:
    return article.updated_at or _OLDEST


def _published_key(article: Article) -> datetime:
    return article.published_at


_SORT_KEY_FUNCS = {
    "published_at": _published_key,
    "updated_at": _updated_key,
    "title": _title_key,
}


def filter_articles(items: Iterable[Article], predicate: SearchPredicate) -> list[Article]:
    """Return the articles matching both the term and the tag selection.

    The term is a case-insensitive substring test against the title, excerpt
    and content. Tags match when the article carries any selected tag.
    Original order is preserved.

    Args:
        items: Articles to filter
        predicate: Current search state

    Returns:
        A new list with the matching articles
    """
    term = predicate.term.lower()
    matches = [
        article
        for article in items
        if _matches_term(article, term)
        and _matches_tags(article, predicate.tags)
        and (predicate.author is None or article.author == predicate.author)
        and (predicate.featured is None or article.featured == predicate.featured)
    ]
    logger.debug(
        "Filter kept %d articles for term=%r tags=%s", len(matches), term, sorted(predicate.tags)
    )
    return matches


def _matches_term(article: Article, term: str) -> bool:
    if term == "":
        return True
    candidates = [article.title, article.excerpt, article.content]
    return any(candidate and term in candidate.lower() for candidate in candidates)


def _matches_tags(article: Article, tags: frozenset[str]) -> bool:
    if not tags:
        return True
    return any(tag in tags for tag in article.tags)


def collect_tags(items: Iterable[Article]) -> list[str]:
    """Return every tag used by the articles, deduplicated and sorted."""
    tags: set[str] = set()
    for article in items:
        tags.update(article.tags)
    return sorted(tags)


def toggle_tag(predicate: SearchPredicate, tag: str) -> SearchPredicate:
    """Select the tag if it is not selected yet, otherwise deselect it."""
    if tag in predicate.tags:
        return replace(predicate, tags=predicate.tags - {tag})
    return replace(predicate, tags=predicate.tags | {tag})


def clear_filters() -> SearchPredicate:
    return SearchPredicate()


def result_summary(found: int, total: int, predicate: SearchPredicate) -> str:
    """Format the result count line shown under the search box.

    Examples:
        >>> result_summary(3, 3, SearchPredicate())
        'Found 3 articles'
        >>> result_summary(1, 3, SearchPredicate(term="py"))
        'Found 1 articles (total 3)'
    """
    line = f"Found {found} articles"
    if predicate.is_active:
        line += f" (total {total})"
    return line


def find_by_slug(items: Iterable[Article], slug: str) -> Article | None:
    for article in items:
        if article.slug == slug:
            return article
    return None


def sort_articles(
    items: Iterable[Article],
    order_by: str = "published_at",
    direction: str = "desc",
) -> list[Article]:
    """Return the articles sorted by a single field.

    Articles without an ``updated_at`` sort as the oldest. Titles compare
    case-insensitively. The sort is stable.

    Raises:
        ValueError: If ``order_by`` or ``direction`` is not supported
    """
    if order_by not in SORT_KEYS:
        raise ValueError(f"Unsupported sort key: {order_by!r} (expected one of {SORT_KEYS})")
    if direction not in SORT_DIRECTIONS:
        raise ValueError(f"Unsupported sort direction: {direction!r}")

    key = _SORT_KEY_FUNCS[order_by]
    return sorted(items, key=key, reverse=direction == "desc")


def featured_articles(items: Iterable[Article], limit: int = 3) -> list[Article]:
    """Return up to ``limit`` featured articles, newest first."""
    featured = [article for article in items if article.featured]
    return sort_articles(featured)[:limit]


def blog_stats(items: Iterable[Article]) -> BlogStats:
    articles = list(items)
    return BlogStats(total_posts=len(articles), total_tags=len(collect_tags(articles)))
