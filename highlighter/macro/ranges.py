# highlighter/macro/ranges.py
"""
Expansion of line-number specifications such as ``highlight="1,3,5-7"``.

Parsing is best-effort: a malformed token is left out of the result and the
remaining tokens are still expanded. Nothing in this module raises.

    expand_ranges("[1,3,5-7]")  → [1, 3, 5, 6, 7]
    expand_ranges("1,a,3")      → [1, 3]
"""

import logging
import re

logger = logging.getLogger(__name__)

# Character used to separate the two ends of a range of line numbers
RANGE_SEPARATOR = "-"

# Optional sign and ASCII digits only; no whitespace, no "1_000"
INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(text):
    """Strict integer parsing; returns None for anything else."""
    if INTEGER_RE.fullmatch(text):
        return int(text)
    return None


def _strip_brackets(ranges):
    if ranges.startswith("[") and ranges.endswith("]"):
        return ranges[1:-1]
    return ranges


def _range_bounds(token):
    """(start, end) of a range token, or None when it is malformed."""
    parts = token.split(RANGE_SEPARATOR)

    if len(parts) != 2:
        logger.debug("Ignoring malformed line range %r", token)
        return None

    start = parse_int(parts[0])
    end = parse_int(parts[1])
    if start is None or end is None:
        logger.debug("Ignoring line range with non-numeric bounds %r", token)
        return None

    return start, end


def _single_line(part):
    number = parse_int(part)
    if number is None:
        logger.debug("Ignoring malformed line number %r", part)
    return number


def expand_ranges(ranges: str) -> list[int]:
    """
    Expand a comma-separated list of line numbers and ranges.

    Args:
        ranges: Line numbers and ranges in any combination, optionally
            surrounded by ``[`` and ``]``

    Returns:
        Line numbers in the order the tokens appear. Duplicates are kept and
        nothing is sorted. Tokens that are not integers or valid ranges are
        omitted; an empty string gives an empty list.
    """
    result = []

    if not ranges:
        return result

    for part in _strip_brackets(ranges).split(","):
        if RANGE_SEPARATOR in part:
            result.extend(range_to_sequence(part))
            continue

        number = _single_line(part)
        if number is not None:
            result.append(number)

    return result


def range_to_sequence(token: str) -> list[int]:
    """
    Make a sequence of numbers out of a range, e.g. "1-3" → [1, 2, 3].

    A valid range is exactly two integers joined by RANGE_SEPARATOR. Any other
    input yields an empty list.
    """
    bounds = _range_bounds(token)
    if bounds is None:
        return []

    start, end = bounds
    # A descending range ("5-2") expands to nothing rather than being an
    # error. Callers may rely on the silent omission, so it is kept.
    return list(range(start, end + 1))


def expand_ranges_within(ranges: str, lowest: int, highest: int) -> list[int]:
    """
    Same as expand_ranges, keeping only numbers in ``[lowest, highest]``.

    Ranges are clipped before they are expanded, so the result never holds
    more numbers per token than the window is wide, however large the range
    written by the user.
    """
    result = []

    if not ranges:
        return result

    for part in _strip_brackets(ranges).split(","):
        if RANGE_SEPARATOR in part:
            bounds = _range_bounds(part)
            if bounds is not None:
                start, end = bounds
                result.extend(range(max(start, lowest), min(end, highest) + 1))
            continue

        number = _single_line(part)
        if number is not None and lowest <= number <= highest:
            result.append(number)

    return result
