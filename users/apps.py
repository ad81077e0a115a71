from django.apps import AppConfig


class UsersConfig(AppConfig):
    """
    Configuration for the users app.

    The ready() hook imports the signals module so profiles are created
    for every new user.
    """
    default_auto_field = "django.db.models.BigAutoField"
    name = "users"

    def ready(self) -> None:
        from . import signals  # noqa: F401
