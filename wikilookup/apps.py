from django.apps import AppConfig


class WikilookupConfig(AppConfig):
    """Configuration for the wikilookup Django app."""

    name = 'wikilookup'
    verbose_name = 'Wiki lookup'
