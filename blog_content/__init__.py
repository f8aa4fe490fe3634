"""
Blog Content - rendering and list filtering for blog posts.

This package turns stored article bodies of either dialect (HTML left behind
by an old migration, or Markdown-like shorthand) into HTML fragments, and
filters article collections by search text and tags for the list view.

Main entry point for tooling is the CLI via the `blog-content` command.

Example:
    $ blog-content render -i post.md
    $ blog-content search -i posts.json --term python --tag web
"""

__all__ = [
    "__version__",
    "Article",
    "SearchPredicate",
    "filter_articles",
    "collect_tags",
]
__version__ = "0.1.0"

from .core.types import Article, SearchPredicate
from .search import collect_tags, filter_articles
