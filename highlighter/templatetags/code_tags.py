# highlighter/templatetags/code_tags.py

import logging

from django import template
from django.utils.html import escape, linebreaks
from django.utils.safestring import mark_safe

from highlighter.macro.macro import render_code_macro
from highlighter.markup.renderer import render_markup

logger = logging.getLogger(__name__)

register = template.Library()

"""
Django template tags for code macros.

Usage in templates:
1. Load the tags: {% load code_tags %}

2. Render issue text (markdown plus {code} macros):
   {{ issue.description|issue_markup }}

3. Highlight a snippet directly:
   {{ snippet|highlight_code:"python" }}

   {% code "java" highlight="1,3-4" linenumbers="true" title=filename %}
   public class Hello {}
   {% endcode %}
"""


def _render_markup_safely(value, template_context=None):
    try:
        return render_markup(value or "", template_context=template_context)
    except (OSError, RuntimeError) as e:
        # Pandoc missing or failing must not break the page
        logger.warning(f"Issue markup rendering failed, showing plain text: {e}", exc_info=True)
        return linebreaks(escape(value or ""))


@register.filter(name="issue_markup")
def issue_markup_filter(value):
    return mark_safe(_render_markup_safely(value))


@register.simple_tag(takes_context=True)
def issue_markup_with_context(context, value):
    """Template tag that passes template context to the macro templates"""
    template_context = {
        "user": context.get("user"),
        "request": context.get("request"),
        "issue": context.get("issue"),
    }
    return mark_safe(_render_markup_safely(value, template_context=template_context))


@register.filter(name="highlight_code")
def highlight_code_filter(value, language=None):
    parameters = {"0": language} if language else {}
    return mark_safe(render_code_macro(parameters, str(value or "")))


class CodeNode(template.Node):
    def __init__(self, nodelist, args, kwargs):
        self.nodelist = nodelist
        self.args = args
        self.kwargs = kwargs

    def render(self, context):
        parameters = {}
        for position, arg in enumerate(self.args):
            parameters[str(position)] = str(arg.resolve(context))
        for name, value in self.kwargs.items():
            parameters[name] = str(value.resolve(context))

        # The macro escapes the code itself
        autoescape = context.autoescape
        context.autoescape = False
        try:
            body = self.nodelist.render(context)
        finally:
            context.autoescape = autoescape

        body = body.strip("\n")
        return mark_safe(render_code_macro(parameters, body, context.flatten()))


@register.tag(name="code")
def do_code(parser, token):
    """
    {% code "lang" key=value ... %}...{% endcode %}

    Positional arguments become macro parameters "0", "1", …; keyword
    arguments are passed by name (``first-line`` style names are allowed).
    """
    bits = token.split_contents()[1:]
    nodelist = parser.parse(("endcode",))
    parser.delete_first_token()

    args = []
    kwargs = {}
    for bit in bits:
        name, sep, value = bit.partition("=")
        if sep and name and not name.startswith(("'", '"')):
            kwargs[name] = parser.compile_filter(value)
        else:
            args.append(parser.compile_filter(bit))

    return CodeNode(nodelist, args, kwargs)
