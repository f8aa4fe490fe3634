"""
Ordered substitution rules for stored article bodies.

Both rule chains are plain tuples of (name, pattern, replacement) applied
strictly top to bottom. Each rule sees the output of every rule before it, so
the position of a rule in its tuple is part of its behavior.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import re

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rule:
    """A single global find-and-replace step.

    Attributes:
        name: Short identifier used in debug logs and tests
        pattern: Compiled regular expression
        replacement: Replacement template (``re.sub`` syntax)
    """

    name: str
    pattern: re.Pattern[str]
    replacement: str


def apply_rules(text: str, rules: tuple[Rule, ...]) -> str:
    """Run every rule over the whole string, in order."""
    for rule in rules:
        text, count = rule.pattern.subn(rule.replacement, text)
        if count:
            logger.debug("Rule %s replaced %d match(es)", rule.name, count)
    return text


def _rule(name: str, pattern: str, replacement: str, flags: int = 0) -> Rule:
    return Rule(name=name, pattern=re.compile(pattern, flags), replacement=replacement)


def _literal(name: str, needle: str, replacement: str) -> Rule:
    return _rule(name, re.escape(needle), replacement.replace("\\", r"\\"))


# A flattened URL segment, and the separator left between two segments.
# Older rows use `""` between host and path and `=""` afterwards; both forms
# are accepted at every position.
_SEGMENT = r'([^"\s]*?)'
_SEPARATOR = r'=?""'


def _url_rule(segments: int) -> Rule:
    pattern = r'https:=""' + _SEPARATOR.join([_SEGMENT] * segments) + '"'
    replacement = "https://" + "/".join(f"\\{i}" for i in range(1, segments + 1))
    return _rule(f"url_{segments}_segments", pattern, replacement)


def _split_attribute_rule(attribute: str) -> Rule:
    # The trailing fragment may not contain `=`, `<` or `>`, which is what
    # follows the closing quote of an attribute in well-formed markup.
    return _rule(
        f"rejoin_{attribute}",
        attribute + r'="([^"]*)"([^"=<>]+)"',
        attribute + r'="\1\2"',
    )


REPAIR_RULES: tuple[Rule, ...] = (
    _literal("nested_img_opener", '&lt;img src="&lt;img src="', '<img src="'),
    _literal("escaped_img_opener", '&lt;img src="', '<img src="'),
    _literal("escaped_close_bracket", "&gt;", ">"),
    # Longest first so a long URL is never half converted by a shorter rule
    _url_rule(5),
    _url_rule(4),
    _url_rule(3),
    _url_rule(2),
    _url_rule(1),
    _rule("space_split_attribute", r'=" ([^=]+)=" ', r'="\1" '),
    _literal("empty_attribute", '=""', ""),
    _split_attribute_rule("class"),
    _split_attribute_rule("alt"),
    _split_attribute_rule("loading"),
)


_IMAGE_URL = r"https?://[^\s]+\.(?:jpg|jpeg|png|gif|webp|svg)"

_H3 = '<h3 class="text-xl font-semibold mt-6 mb-4">\\1</h3>'
_H2 = '<h2 class="text-2xl font-bold mt-8 mb-4">\\1</h2>'
_H1 = '<h1 class="text-3xl font-bold mt-10 mb-6">\\1</h1>'
_STRONG = '<strong class="font-semibold">\\1</strong>'
_EM = '<em class="italic">\\1</em>'
_PRE = '<pre class="bg-gray-100 p-4 rounded-lg overflow-x-auto my-4"><code>\\1</code></pre>'
_CODE = '<code class="bg-gray-100 px-2 py-1 rounded text-sm">\\1</code>'
_BLOCK_IMAGE = (
    '<div class="my-6 text-center"><img src="{src}" alt="{alt}" '
    'class="mx-auto rounded-lg shadow-lg max-w-full h-auto" loading="lazy" /></div>'
)
_INLINE_IMAGE = (
    '<img src="\\1" alt="Image" class="inline-block rounded shadow max-w-full h-auto" '
    'loading="lazy" />'
)
_LINK = '<a href="\\2" class="text-blue-600 hover:text-blue-800 underline">\\1</a>'
_LIST_ITEM = '<li class="ml-4">\\1</li>'

COMPILE_RULES: tuple[Rule, ...] = (
    _rule("heading_3", r"^### ([^\r\n]*)", _H3, re.MULTILINE),
    _rule("heading_2", r"^## ([^\r\n]*)", _H2, re.MULTILINE),
    _rule("heading_1", r"^# ([^\r\n]*)", _H1, re.MULTILINE),
    # Strong before italic, otherwise **x** reads as two empty italics
    _rule("strong", r"\*\*(.*?)\*\*", _STRONG),
    _rule("italic", r"\*(.*?)\*", _EM),
    _rule("code_block", r"```(.*?)```", _PRE, re.DOTALL),
    _rule("inline_code", r"`(.*?)`", _CODE),
    _rule(
        "line_image_url",
        rf"^({_IMAGE_URL})(?=\r?$)",
        _BLOCK_IMAGE.format(src="\\1", alt="Image"),
        re.MULTILINE | re.IGNORECASE,
    ),
    # Skip URLs the line rule already wrote into src="..." and markdown ](...) targets
    _rule(
        "inline_image_url",
        rf'(?<!src=")(?<!\]\()({_IMAGE_URL})',
        _INLINE_IMAGE,
        re.IGNORECASE,
    ),
    _rule(
        "markdown_image",
        r"!\[([^\]]*)\]\(([^)]+)\)",
        _BLOCK_IMAGE.format(src="\\2", alt="\\1"),
    ),
    _rule("markdown_link", r"\[([^\]]+)\]\(([^)]+)\)", _LINK),
    # TODO: wrap consecutive items in <ul> once list markup is agreed with design
    _rule("list_item_star", r"^\* ([^\r\n]*)", _LIST_ITEM, re.MULTILINE),
    _rule("list_item_dash", r"^- ([^\r\n]*)", _LIST_ITEM, re.MULTILINE),
    _literal("paragraph", "\n\n", '</p><p class="mb-4">'),
    _literal("line_break", "\n", "<br />"),
)
