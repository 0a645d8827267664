"""App configuration for the articles application."""

from django.apps import AppConfig


class ArticlesConfig(AppConfig):
    """Articles app holds the Article model and the article form."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "articles"
