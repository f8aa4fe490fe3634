"""
Input parsing utilities.

This package contains code for parsing exported blog post rows.
"""

from .json_parser import load_articles, parse_articles_json, parse_iso8601

__all__ = ["load_articles", "parse_articles_json", "parse_iso8601"]
