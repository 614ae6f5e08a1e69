from django.apps import AppConfig


class SimpleMarkupConfig(AppConfig):
    name = 'simplemarkup'
    verbose_name = 'Simple Markup'
