"""
Core domain models.

This package contains data types shared by rendering, filtering
and input parsing.
"""

from .types import MARKUP, PLAIN, Article, BlogStats, SearchPredicate

__all__ = [
    "Article",
    "BlogStats",
    "SearchPredicate",
    "MARKUP",
    "PLAIN",
]
