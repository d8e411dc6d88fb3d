"""
Management command to write the stylesheet for highlighted code macros.

The rendered macros use Pygments token classes; this command generates the
matching CSS rules for a Pygments style, scoped to the macro wrapper.
"""

from django.core.management.base import BaseCommand, CommandError
from pygments.formatters import HtmlFormatter
from pygments.styles import get_all_styles
from pygments.util import ClassNotFound

from highlighter.conf import get_css_class, get_style


class Command(BaseCommand):
    help = 'Write Pygments CSS for highlighted code macros'

    def add_arguments(self, parser):
        parser.add_argument(
            '--style',
            type=str,
            help='Pygments style name (default: SYNTAX_HIGHLIGHTER_STYLE setting)',
        )
        parser.add_argument(
            '--scope',
            type=str,
            help='CSS selector the rules are scoped to (default: .<SYNTAX_HIGHLIGHTER_CSS_CLASS>)',
        )
        parser.add_argument(
            '--output',
            type=str,
            help='Write CSS to this file instead of stdout',
        )
        parser.add_argument(
            '--list-styles',
            action='store_true',
            help='List available Pygments styles and exit',
        )

    def handle(self, *args, **options):
        if options.get('list_styles'):
            for style in sorted(get_all_styles()):
                self.stdout.write(style)
            return

        style = options.get('style') or get_style()
        scope = options.get('scope') or f'.{get_css_class()}'

        try:
            formatter = HtmlFormatter(style=style)
        except ClassNotFound:
            raise CommandError(f'Unknown Pygments style: {style}')

        css = formatter.get_style_defs(scope)
        # Highlighted rows
        css += f'\n{scope} tr.highlighted td {{ background-color: {formatter.style.highlight_color}; }}\n'

        output = options.get('output')
        if output:
            with open(output, 'w', encoding='utf-8') as handle:
                handle.write(css)
            self.stdout.write(
                self.style.SUCCESS(f'Wrote {style} styles for {scope} to {output}')
            )
        else:
            self.stdout.write(css)
