# highlighter/macro/__init__.py

from .macro import SyntaxHighlighterMacro, render_code_macro
from .ranges import expand_ranges, range_to_sequence

__all__ = (
    "SyntaxHighlighterMacro",
    "render_code_macro",
    "expand_ranges",
    "range_to_sequence",
)
