from django.apps import AppConfig


class RegistrationsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "registrations"

    def ready(self):
        # connects the storage cache reset to setting_changed
        from . import storage  # noqa: F401
