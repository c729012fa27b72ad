from django.apps import AppConfig


class ConsultantsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'consultants'
    label = 'consultants'
    verbose_name = 'Consultants'
