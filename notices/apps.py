"""Django application configuration for notices."""

from django.apps import AppConfig
from django.conf import settings

from notices.logging import setup_logging


class NoticesConfig(AppConfig):
    """Configuration class for the notices application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "notices"

    def ready(self) -> None:
        """Configure logging once the app registry is ready.

        Hosting applications register their notices from their own
        ``ready`` via ``notices.services.notice_registry``.
        """
        if not getattr(settings, "TEST_MODE", False):
            setup_logging()
