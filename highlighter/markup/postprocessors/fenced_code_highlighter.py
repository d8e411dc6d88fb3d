# highlighter/markup/postprocessors/fenced_code_highlighter.py
"""
Postprocessor that runs fenced code blocks through the code macro.

Pandoc (with its own highlighting disabled) turns

    ```{.java highlight="2-3" title="Hello.java" linenumbers=true}
    class Hello {
        ...
    }
    ```

into

    <pre class="java" data-highlight="2-3" data-title="Hello.java"
         data-linenumbers="true"><code>class Hello { ... }</code></pre>

Each such block is replaced by the macro output, as if it had been written as
``{code:java|highlight=2-3|title=Hello.java|linenumbers=true}``.

Pandoc's own ``.numberLines`` class and ``startFrom`` attribute are honoured
as aliases of ``linenumbers`` and ``firstline``.
"""

import logging

from bs4 import BeautifulSoup

from highlighter.conf import get_css_class
from highlighter.macro import parameters as params
from highlighter.macro.macro import render_code_macro
from highlighter.markup.preprocessors.code_macro import TEMPLATE_CONTEXT_KEY

logger = logging.getLogger(__name__)

# data-* attribute → macro parameter
ATTRIBUTE_PARAMETERS = {
    "data-highlight": params.HIGHLIGHT,
    "data-title": params.TITLE,
    "data-linenumbers": params.SHOW_LINENUMS,
    "data-firstline": params.FIRSTLINE,
    "data-first-line": params.FIRST_LINE,
    "data-startfrom": params.FIRSTLINE,
    "data-collapse": params.COLLAPSE,
}

LINE_NUMBER_CLASSES = ("numberLines", "number-lines", "numberlines")

# Classes Pandoc may add that are not language names
IGNORED_CLASSES = {"sourceCode"}


def _language_from_classes(classes):
    for css_class in classes:
        if css_class in IGNORED_CLASSES or css_class in LINE_NUMBER_CLASSES:
            continue
        if css_class.startswith("language-"):
            return css_class[len("language-"):]
        return css_class
    return None


def code_block_parameters(pre, code):
    """Build macro parameters from the attributes of a <pre><code> block."""
    classes = list(pre.get("class", [])) + list(code.get("class", []))
    parameters = {}

    language = _language_from_classes(classes)
    if language:
        parameters[params.LANGUAGE] = language

    for attribute, name in ATTRIBUTE_PARAMETERS.items():
        value = pre.get(attribute)
        if value is not None and name not in parameters:
            parameters[name] = value

    if any(css_class in LINE_NUMBER_CLASSES for css_class in classes):
        parameters.setdefault(params.SHOW_LINENUMS, "true")

    return parameters


def highlight_fenced_code(html: str, context: dict) -> str:
    """
    Replace every <pre><code> block with highlighted code macro output.

    Args:
        html: HTML string to process
        context: Render context, passed on to the macro template

    Returns:
        HTML with highlighted code blocks
    """
    soup = BeautifulSoup(html, "html.parser")
    css_class = get_css_class()
    render_context = context.get(TEMPLATE_CONTEXT_KEY) or {}

    for pre in soup.find_all("pre"):
        # Already rendered by the macro
        if pre.find_parent("div", class_=css_class):
            continue

        code = pre.find("code", recursive=False)
        if code is None:
            continue

        parameters = code_block_parameters(pre, code)
        rendered = render_code_macro(parameters, code.get_text(), render_context)

        logger.debug("Highlighted fenced code block with parameters %s", parameters)
        pre.replace_with(BeautifulSoup(rendered, "html.parser"))

    return str(soup)


def fenced_code_highlighter_default(html: str, context: dict) -> str:
    """Default instance of fenced code highlighter postprocessor"""
    return highlight_fenced_code(html, context)
