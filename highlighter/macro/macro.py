# highlighter/macro/macro.py
"""
The code macro: syntax highlighting of source code in issue descriptions,
comments and other rendered issue text.

    {code:java|title=Example.java|linenumbers|highlight=[2,4-5]}
    public class Example { ... }
    {code}
"""

import logging

from django.template.loader import render_to_string

from highlighter.conf import get_css_class, get_template_name

from .brushes import get_brush, get_brush_name
from .parameters import (
    get_collapse,
    get_first_line,
    get_highlight,
    get_language,
    get_show_line_numbers,
    get_title,
)
from .tokenizer import brush

logger = logging.getLogger(__name__)

# The body is taken verbatim and escaped while highlighting
BODY_RENDER_MODE = "html-escape"


class SyntaxHighlighterMacro:
    """Renders a code macro body as highlighted HTML."""

    def has_body(self):
        return True

    def is_inline(self):
        return False

    @property
    def body_render_mode(self):
        return BODY_RENDER_MODE

    def build_container(self, parameters, body):
        """Tokenize the body and apply the display parameters of the macro."""
        code_container = brush(body, get_brush(parameters))
        code_container.brush = get_brush_name(get_language(parameters))

        code_container.show_line_nums = get_show_line_numbers(parameters)
        code_container.first_line = get_first_line(parameters)
        code_container.collapse = get_collapse(parameters)

        # Clipped to the rendered rows; a range can be arbitrarily large
        code_container.highlight_lines(
            get_highlight(
                parameters,
                first_line=code_container.first_line,
                last_line=code_container.last_line,
            )
        )

        return code_container

    def execute(self, parameters, body, render_context=None):
        """
        Render the macro.

        Args:
            parameters: Macro parameters; the language is under key "0"
            body: Raw code between the opening and closing macro tags
            render_context: Optional extra template context

        Returns:
            HTML string of the highlighted block
        """
        parameters = parameters or {}
        code_container = self.build_container(parameters, body)

        logger.debug(
            "Rendering code macro: brush=%s rows=%d highlighted=%s",
            code_container.brush,
            len(code_container.rows),
            code_container.highlighted_lines,
        )

        context = dict(render_context or {})
        context.update(
            {
                "code_container": code_container,
                "code_title": get_title(parameters),
                "css_class": get_css_class(),
            }
        )

        return render_to_string(get_template_name(), context)


def render_code_macro(parameters, body, render_context=None):
    """Shortcut used by the markup pipeline and template tags."""
    return SyntaxHighlighterMacro().execute(parameters, body, render_context)
