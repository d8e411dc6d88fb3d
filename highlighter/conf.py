"""
Settings for the highlighter app.

All values are read lazily from Django settings so they can be overridden
per project (and per test with ``override_settings``).
"""

from django.conf import settings

DEFAULT_TEMPLATE = "highlighter/code.html"
DEFAULT_STYLE = "default"
DEFAULT_CSS_CLASS = "code-macro"
DEFAULT_TAB_SIZE = 4


def get_template_name():
    return getattr(settings, "SYNTAX_HIGHLIGHTER_TEMPLATE", DEFAULT_TEMPLATE)


def get_style():
    """Pygments style used when generating the stylesheet."""
    return getattr(settings, "SYNTAX_HIGHLIGHTER_STYLE", DEFAULT_STYLE)


def get_css_class():
    """CSS class of the wrapper around every rendered code block."""
    return getattr(settings, "SYNTAX_HIGHLIGHTER_CSS_CLASS", DEFAULT_CSS_CLASS)


def get_tab_size():
    return getattr(settings, "SYNTAX_HIGHLIGHTER_TAB_SIZE", DEFAULT_TAB_SIZE)


def get_pandoc_extra_args():
    return list(getattr(settings, "SYNTAX_HIGHLIGHTER_PANDOC_EXTRA_ARGS", []))
