"""
Article body rendering.

This package turns stored article bodies into HTML fragments.
"""

from .content import classify, compile_markdown, render, render_article, repair, wrap_content
from .rules import COMPILE_RULES, REPAIR_RULES, Rule, apply_rules

__all__ = [
    "classify",
    "repair",
    "compile_markdown",
    "render",
    "render_article",
    "wrap_content",
    "Rule",
    "apply_rules",
    "REPAIR_RULES",
    "COMPILE_RULES",
]
