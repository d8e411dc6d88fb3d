# highlighter/macro/tokenizer.py
"""
Tokenization of a macro body with a brush (Pygments lexer).

The whole body is highlighted in one pass so that tokens spanning several
lines (block comments, docstrings, heredocs) keep their lexer state. The
HTML formatter closes and reopens token spans at every newline, so the
output can then be split into self-contained rows.
"""

from pygments import highlight
from pygments.formatters import HtmlFormatter

from .container import CodeContainer, CodeRow


def normalize_newlines(body: str) -> str:
    return body.replace("\r\n", "\n").replace("\r", "\n")


def brush(body, lexer) -> CodeContainer:
    """
    Highlight ``body`` with ``lexer`` and split the markup into rows.

    Args:
        body: Raw source code of the macro (not escaped)
        lexer: Pygments lexer selected for the macro language

    Returns:
        CodeContainer with one row per source line. Row content is HTML
        with every character of the source escaped.
    """
    body = normalize_newlines(body or "")

    formatter = HtmlFormatter(nowrap=True)
    markup = highlight(body, lexer, formatter)

    lines = markup.split("\n")
    # The lexer guarantees a final newline, which leaves an empty tail
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()

    brush_name = lexer.aliases[0] if lexer.aliases else "text"

    return CodeContainer(
        rows=[CodeRow(content=line) for line in lines],
        brush=brush_name,
    )
