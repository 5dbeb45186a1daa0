from django.apps import AppConfig


class TurfSettingsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "turf_settings"
    verbose_name = "Turf settings"
