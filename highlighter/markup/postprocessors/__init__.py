# highlighter/markup/postprocessors/__init__.py

from .code_macro_restore import code_macro_restore_default
from .fenced_code_highlighter import fenced_code_highlighter_default
from .sanitizer import sanitize_html

POSTPROCESSORS = [
    sanitize_html,
    fenced_code_highlighter_default,  # Highlight fenced and indented code blocks
    code_macro_restore_default,  # Insert {code} macros rendered before conversion
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
