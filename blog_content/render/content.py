"""
Article body rendering.

Stored bodies arrive in one of two dialects. Bodies that already contain tags
are repaired (a past migration double-escaped image tags and flattened URL
paths into empty attributes); everything else is compiled from Markdown-like
shorthand. The result is inserted into the page as trusted HTML, so the body
must come from a trusted authoring source: nothing here sanitizes scripts.
"""

from __future__ import annotations

import logging

from ..core.types import MARKUP, PLAIN, Article
from .rules import COMPILE_RULES, REPAIR_RULES, apply_rules

logger = logging.getLogger(__name__)

PROSE_CLASS = (
    "prose prose-lg max-w-none prose-headings:text-gray-900 prose-p:text-gray-600 "
    "prose-a:text-blue-600 prose-strong:text-gray-900 prose-code:text-gray-900 "
    "prose-pre:bg-gray-100"
)


def classify(raw: str) -> str:
    """Return MARKUP if the text contains both `<` and `>`, else PLAIN.

    This is a character test, not a parse. Plain text such as "a<b and x>y"
    is classified as markup.
    """
    if "<" in raw and ">" in raw:
        return MARKUP
    return PLAIN


def repair(markup: str) -> str:
    """Undo the known migration corruption in markup-dialect content.

    Clean markup passes through unchanged.
    """
    return apply_rules(markup, REPAIR_RULES)


def compile_markdown(text: str) -> str:
    """Compile Markdown-like shorthand into styled HTML fragments.

    A flat substitution pass, not a Markdown parser: see ``COMPILE_RULES``
    for the order the constructs are rewritten in.
    """
    return apply_rules(text, COMPILE_RULES)


def render(raw: str | None) -> str:
    """Render a stored article body into HTML.

    Args:
        raw: The stored body, in either dialect. ``None`` renders as empty.

    Returns:
        The repaired or compiled markup. Input no rule matches comes back
        unchanged.
    """
    if not raw:
        return ""
    dialect = classify(raw)
    if dialect == MARKUP:
        rendered = repair(raw)
    else:
        rendered = compile_markdown(raw)
    logger.debug(
        "Rendered %s content (%d chars -> %d chars)", dialect, len(raw), len(rendered)
    )
    return rendered


def wrap_content(markup: str, class_name: str = "") -> str:
    """Wrap rendered markup in the prose container element."""
    classes = f"{PROSE_CLASS} {class_name}".strip()
    return f'<div class="{classes}">{markup}</div>'


def render_article(article: Article, wrap: bool = True, class_name: str = "") -> str:
    """Render an article body, optionally inside the prose container."""
    rendered = render(article.content)
    if not wrap:
        return rendered
    return wrap_content(rendered, class_name)
