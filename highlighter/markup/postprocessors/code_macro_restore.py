# highlighter/markup/postprocessors/code_macro_restore.py

import logging
import re

from bs4 import BeautifulSoup

from highlighter.markup.preprocessors.code_macro import CODE_MACROS_KEY

logger = logging.getLogger(__name__)

PLACEHOLDER_RE = re.compile(r"CODEMACROPLACEHOLDER(\d+)END")

# Placeholders below these elements are quoted code, not macros
CODE_ELEMENTS = ["pre", "code"]


def restore_code_macros(html: str, context: dict) -> str:
    """
    Replace code macro placeholders with the HTML rendered by the
    code_macro preprocessor.

    Only a placeholder that is the whole text of an element is restored; a
    placeholder paragraph is replaced as a whole. Occurrences inside code,
    inside attribute values or mixed with other text are left alone.
    """
    rendered = context.get(CODE_MACROS_KEY) or []
    if not rendered:
        return html

    soup = BeautifulSoup(html, "html.parser")

    for string in soup.find_all(string=PLACEHOLDER_RE):
        match = PLACEHOLDER_RE.fullmatch(string.strip())
        if not match:
            continue
        if string.find_parent(CODE_ELEMENTS):
            continue

        index = int(match.group(1))
        if index >= len(rendered):
            logger.debug("No rendered code macro for placeholder %s", match.group(0))
            continue

        macro = BeautifulSoup(rendered[index], "html.parser")
        parent = string.parent
        if parent is not None and parent.name == "p" and parent.get_text(strip=True) == match.group(0):
            parent.replace_with(macro)
        else:
            string.replace_with(macro)

    return str(soup)


def code_macro_restore_default(html: str, context: dict) -> str:
    """Default instance of code macro restore postprocessor"""
    return restore_code_macros(html, context)
