# highlighter/macro/parameters.py
"""
Lookup of code macro parameters.

The host passes macro parameters as a plain mapping. The language is the
first positional argument and lives under key "0"; bare flags such as
``{code:java|linenumbers}`` show up as values of further positional keys.
"""

import logging

from .ranges import expand_ranges, expand_ranges_within, parse_int

logger = logging.getLogger(__name__)

LANGUAGE = "0"
HIGHLIGHT = "highlight"
TITLE = "title"
FIRSTLINE = "firstline"
FIRST_LINE = "first-line"  # Deprecated spelling of FIRSTLINE
HIDE_LINENUM = "hide-linenum"  # No longer used, accepted and ignored
SHOW_LINENUMS = "linenumbers"
COLLAPSE = "collapse"

TRUE_VALUES = ("true", "yes")

DEFAULT_FIRST_LINE = 1


def get_language(parameters):
    return parameters.get(LANGUAGE)


def get_title(parameters):
    return parameters.get(TITLE)


def get_highlight(parameters, first_line=None, last_line=None) -> list[int]:
    """
    Line numbers to highlight, or an empty list when none are given.

    With both bounds given, numbers outside [first_line, last_line] are
    dropped and ranges are clipped to that window before expansion.
    """
    if HIGHLIGHT not in parameters:
        return []
    value = str(parameters[HIGHLIGHT])
    if first_line is None or last_line is None:
        return expand_ranges(value)
    return expand_ranges_within(value, first_line, last_line)


def get_first_line(parameters) -> int:
    """
    Number shown for the first line of code.

    ``firstline`` wins over the deprecated ``first-line``. A value that is
    not an integer falls back to the default of 1.
    """
    for key in (FIRSTLINE, FIRST_LINE):
        if key not in parameters:
            continue
        first_line = parse_int(str(parameters[key]))
        if first_line is None:
            logger.debug("Ignoring non-numeric %s=%r", key, parameters[key])
            return DEFAULT_FIRST_LINE
        return first_line

    return DEFAULT_FIRST_LINE


def get_flag(parameters, name) -> bool:
    """
    True when ``name`` is given as a bare flag or set to "true"/"yes".
    """
    if name in parameters.values():
        return True
    return parameters.get(name) in TRUE_VALUES


def get_show_line_numbers(parameters) -> bool:
    return get_flag(parameters, SHOW_LINENUMS)


def get_collapse(parameters) -> bool:
    return get_flag(parameters, COLLAPSE)
