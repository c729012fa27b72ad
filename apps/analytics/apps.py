import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger('apps.analytics')


class AnalyticsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'analytics'
    label = 'analytics'
    verbose_name = 'Analytics'

    def ready(self):
        from .tracking import load_sink, set_sink

        sink = set_sink(load_sink(getattr(settings, 'ANALYTICS_SINK', '')))
        logger.debug(f"Analytics sink installed: {type(sink).__name__}")
