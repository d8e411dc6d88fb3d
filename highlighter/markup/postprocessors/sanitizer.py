# highlighter/markup/postprocessors/sanitizer.py

import logging
from functools import lru_cache

import bleach
from django.utils.html import escape

logger = logging.getLogger(__name__)

# Fenced code attributes read by the fenced code highlighter
CODE_BLOCK_ATTRIBUTES = [
    "class",
    "data-highlight",
    "data-title",
    "data-linenumbers",
    "data-firstline",
    "data-first-line",
    "data-startfrom",
    "data-collapse",
]


@lru_cache(maxsize=1)
def _get_bleach_config():
    """Cache bleach configuration for better performance."""
    allowed_tags = set(bleach.sanitizer.ALLOWED_TAGS).union(
        {
            # text
            "p",
            "br",
            "div",
            "span",
            "section",
            "cite",
            "mark",
            "ins",
            "del",
            "sup",
            "sub",
            # headings
            "h1",
            "h2",
            "h3",
            "h4",
            "h5",
            "h6",
            # lists
            "ul",
            "ol",
            "li",
            "hr",
            "blockquote",
            "dl",
            "dt",
            "dd",
            # code
            "pre",
            "code",
            "kbd",
            "samp",
            "var",
            # tables
            "table",
            "thead",
            "tbody",
            "tfoot",
            "tr",
            "th",
            "td",
            "caption",
            # links
            "a",
            # forms (for task lists)
            "input",
            "label",
            # semantic
            "abbr",
            "acronym",
        }
    )

    allowed_attrs = {
        "*": ["class", "id", "title"],
        "a": ["href", "title", "rel", "target"],
        "code": ["class"],
        "pre": CODE_BLOCK_ATTRIBUTES,
        "th": ["colspan", "rowspan", "scope"],
        "td": ["colspan", "rowspan"],
        "input": ["type", "checked", "disabled"],
        "abbr": ["title"],
        "acronym": ["title"],
        "blockquote": ["class", "cite"],
        "ol": ["start", "type", "class"],
    }

    allowed_protocols = ["http", "https", "mailto"]

    return frozenset(allowed_tags), allowed_attrs, allowed_protocols


def sanitize_html(html, context):
    """
    Sanitize HTML output using bleach.
    This is the FIRST post-processor and must run before any trusted markup
    (highlighted code) is inserted.
    """
    allowed_tags, allowed_attrs, allowed_protocols = _get_bleach_config()

    try:
        return bleach.clean(
            html,
            tags=allowed_tags,
            attributes=allowed_attrs,
            protocols=allowed_protocols,
            strip=False,  # Escape disallowed tags instead of dropping their text
        )
    except Exception as e:
        logger.warning(f"Bleach sanitization failed, escaping output: {e}", exc_info=True)
        # Escape everything rather than pass unchecked markup through
        return escape(html)
