# highlighter/macro/brushes.py
"""
Language name → brush lookup for the code macro.

A brush is the Pygments lexer used to tokenize a code block. The set of
languages the macro understands is fixed, so the mapping is a plain table.
Unknown or missing languages fall back to plain text.
"""

import logging

from pygments.lexers import get_lexer_by_name

from highlighter.conf import get_tab_size

from .parameters import get_language

logger = logging.getLogger(__name__)

PLAIN = "text"

# Macro language name → Pygments lexer alias
BRUSH_ALIASES = {
    "erlang": "erlang",
    "diff": "diff",
    "sql": "sql",
    "css": "css",
    "php": "php",
    "ruby": "ruby",
    "perl": "perl",
    # No JavaFX Script lexer exists, Java is the closest match
    "javafx": "java",
    "java": "java",
    "scala": "scala",
    "bash": "bash",
    "csharp": "csharp",
    "cs": "csharp",
    "c#": "csharp",
    "c": "cpp",
    "c++": "cpp",
    "cpp": "cpp",
    "delphi": "delphi",
    "pas": "delphi",
    "pascal": "delphi",
    "js": "javascript",
    "javascript": "javascript",
    "jscript": "javascript",
    "py": "python",
    "python": "python",
    "vb": "vb.net",
    "vbnet": "vb.net",
    "xml": "xml",
    "xhtml": "xml",
    "xslt": "xml",
    "html": "xml",
}

# Extra lexer options per brush
BRUSH_OPTIONS = {
    # Snippets in issues rarely start with "<?php"
    "php": {"startinline": True},
}


def get_brush_name(language):
    """Lexer alias for a macro language name; plain text when unknown."""
    return BRUSH_ALIASES.get(language, PLAIN)


def get_lexer(brush_name):
    options = {
        # Leading and trailing blank lines count as code rows
        "stripnl": False,
        "tabsize": get_tab_size(),
    }
    options.update(BRUSH_OPTIONS.get(brush_name, {}))
    return get_lexer_by_name(brush_name, **options)


def get_brush(parameters):
    """
    Return the lexer for the language given as first macro argument.

    Returns the plain text lexer if the language is missing or unknown.
    """
    language = get_language(parameters)
    brush_name = get_brush_name(language)

    if language is not None and brush_name == PLAIN and language != PLAIN:
        logger.debug("Unknown code macro language %r, using plain text", language)

    return get_lexer(brush_name)
