from django.apps import AppConfig


class WikisConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "wikis"
