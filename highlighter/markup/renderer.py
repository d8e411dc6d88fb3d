# highlighter/markup/renderer.py

import logging

import pypandoc

from .config import get_pandoc_config
from .postprocessors import apply_postprocessors
from .preprocessors import apply_preprocessors
from .preprocessors.code_macro import CODE_MACROS_KEY, TEMPLATE_CONTEXT_KEY

logger = logging.getLogger(__name__)


def render_markup(text, context=None, template_context=None):
    """
    Render issue text (markdown with ``{code}`` macros) to HTML.

    ``{code}`` macros are rendered before pandoc sees the text and put back
    after sanitizing; fenced code blocks are highlighted the same way after
    conversion.

    Args:
        text: Raw issue description or comment
        context: Optional processor context; receives the rendered macros
            under ``code_macros``
        template_context: Extra variables for the code block template
            (issue, user, request)
    """
    context = context if context is not None else {}
    context.setdefault(CODE_MACROS_KEY, [])
    if template_context is not None:
        context[TEMPLATE_CONTEXT_KEY] = template_context

    # Empty comments are common; no need to start pandoc for them
    if not text or not text.strip():
        return ""

    text = apply_preprocessors(text, context)

    pandoc_config = get_pandoc_config()
    html = pypandoc.convert_text(
        text,
        to="html5",
        format="markdown",
        extra_args=pandoc_config["extra_args"],
        filters=pandoc_config.get("filters", []),
    )

    html = apply_postprocessors(html, context)

    logger.debug(
        "Rendered issue markup with %d code macro(s)", len(context[CODE_MACROS_KEY])
    )
    return html
