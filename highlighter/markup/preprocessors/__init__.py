# highlighter/markup/preprocessors/__init__.py

from .code_macro import code_macro_default

PREPROCESSORS = [
    code_macro_default,  # Must run before markdown conversion touches macro bodies
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
