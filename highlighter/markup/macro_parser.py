# highlighter/markup/macro_parser.py
"""
Parsing of ``{code}`` macros in wiki-style issue text.

    {code:java|title=Hello.java|linenumbers=true}
    class Hello {}
    {code}

The part after ``{code:`` is a ``|``-separated parameter list. ``key=value``
entries become keyed parameters; bare entries are positional and are stored
under "0", "1", … in the order they appear. The first bare entry is the
language.
"""

import re
from dataclasses import dataclass

CODE_MACRO_PATTERN = re.compile(
    r"\{code(?::(?P<params>[^}\n]*))?\}(?P<body>.*?)\{code\}",
    re.DOTALL,
)

# Opening line of a markdown fenced code block
FENCE_PATTERN = re.compile(r"^[ ]{0,3}(?P<fence>`{3,}|~{3,})[^\n]*$", re.MULTILINE)

# Run of backticks opening an inline code span
BACKTICKS_PATTERN = re.compile(r"`+")


@dataclass
class CodeMacro:
    parameters: dict
    body: str
    start: int
    end: int


def parse_macro_parameters(text):
    """
    Parse a macro parameter string into the host's parameter mapping.

    Examples:
        "java"                        → {"0": "java"}
        "java|title=A|linenumbers"    → {"0": "java", "title": "A", "1": "linenumbers"}
    """
    parameters = {}
    position = 0

    for entry in (text or "").split("|"):
        entry = entry.strip()
        if not entry:
            continue

        if "=" in entry:
            key, value = entry.split("=", 1)
            key = key.strip()
            if key:
                parameters[key] = value.strip()
                continue

        parameters[str(position)] = entry
        position += 1

    return parameters


def _trim_body(body):
    """Drop the line breaks that follow the opening and precede the closing tag."""
    body = body.replace("\r\n", "\n")
    if body.startswith("\n"):
        body = body[1:]
    if body.endswith("\n"):
        body = body[:-1]
    return body


def _fence_end(text, fence):
    """End of a fenced block; an unclosed fence runs to the end of the text."""
    marker = fence.group("fence")
    closing = re.compile(
        rf"^[ ]{{0,3}}{re.escape(marker[0])}{{{len(marker)},}}[ \t]*$", re.MULTILINE
    ).search(text, fence.end())
    return closing.end() if closing else len(text)


def _code_span_end(text, ticks):
    """
    End of an inline code span. Backticks without a matching run before the
    end of the paragraph are literal text.
    """
    paragraph_end = text.find("\n\n", ticks.end())
    if paragraph_end == -1:
        paragraph_end = len(text)
    closing = re.compile(rf"(?<!`){ticks.group()}(?!`)").search(
        text, ticks.end(), paragraph_end
    )
    return closing.end() if closing else ticks.end()


def _next_code(text, position, limit):
    """
    (start, end) of the first fenced block or code span starting in
    ``[position, limit)``, or None.
    """
    fence = FENCE_PATTERN.search(text, position)
    ticks = BACKTICKS_PATTERN.search(text, position)

    if fence and fence.start() < limit and (ticks is None or fence.start() <= ticks.start()):
        return fence.start(), _fence_end(text, fence)
    if ticks and ticks.start() < limit:
        return ticks.start(), _code_span_end(text, ticks)
    return None


def find_code_macros(text):
    """
    Yield every complete code macro in ``text`` in document order.

    Macros quoted inside markdown code (fenced blocks or backtick spans) are
    not macros and are skipped.
    """
    text = text or ""
    position = 0

    while True:
        match = CODE_MACRO_PATTERN.search(text, position)
        if match is None:
            return

        code = _next_code(text, position, match.start())
        if code is not None:
            # Continue after the code, which may contain the candidate
            position = max(code[1], code[0] + 1)
            continue

        yield CodeMacro(
            parameters=parse_macro_parameters(match.group("params")),
            body=_trim_body(match.group("body")),
            start=match.start(),
            end=match.end(),
        )
        position = match.end()
