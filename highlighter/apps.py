from django.apps import AppConfig


class HighlighterConfig(AppConfig):
    name = 'highlighter'
    verbose_name = 'Syntax highlighter'
