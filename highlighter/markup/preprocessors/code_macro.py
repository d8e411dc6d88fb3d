"""
Preprocessor that renders ``{code}`` macros before markdown conversion.

The macro output is stored in the render context and the macro itself is
replaced by a placeholder paragraph that survives markdown conversion and
sanitizing. The ``code_macro_restore`` postprocessor swaps the placeholders
for the stored HTML.

    Some text
    {code:python|highlight=2}
    def f():
        return 1
    {code}

becomes

    Some text

    CODEMACROPLACEHOLDER0END

"""

import logging

from highlighter.macro.macro import render_code_macro
from highlighter.markup.macro_parser import find_code_macros

logger = logging.getLogger(__name__)

CODE_MACROS_KEY = "code_macros"
TEMPLATE_CONTEXT_KEY = "template_context"
PLACEHOLDER_TEMPLATE = "CODEMACROPLACEHOLDER{index}END"


def placeholder(index: int) -> str:
    return PLACEHOLDER_TEMPLATE.format(index=index)


def render_code_macros(text: str, context: dict) -> str:
    """
    Render every code macro in ``text`` and leave placeholders behind.

    Args:
        text: Raw issue text
        context: Render context; rendered macros are appended to
            ``context["code_macros"]``

    Returns:
        Text with each macro replaced by its placeholder
    """
    rendered = context.setdefault(CODE_MACROS_KEY, [])
    render_context = context.get(TEMPLATE_CONTEXT_KEY) or {}

    pieces = []
    position = 0
    for macro in find_code_macros(text):
        index = len(rendered)
        rendered.append(render_code_macro(macro.parameters, macro.body, render_context))

        pieces.append(text[position:macro.start])
        # Blank lines make the placeholder a paragraph of its own
        pieces.append(f"\n\n{placeholder(index)}\n\n")
        position = macro.end

    if not pieces:
        return text

    pieces.append(text[position:])
    logger.debug("Rendered %d code macro(s)", len(rendered))
    return "".join(pieces)


def code_macro_default(text: str, context: dict) -> str:
    """
    Default configuration for code_macro.

    Register this in PREPROCESSORS.
    """
    return render_code_macros(text, context)
