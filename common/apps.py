import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class CommonConfig(AppConfig):
    """Shared building blocks, including entity auditing.

    Importing ``common.signals`` registers the ``pre_save`` hook; whether it
    stamps anything is governed by the ``AUDITING_ENABLED`` setting.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "common"
    verbose_name = "Common"

    def ready(self):
        """Register audit signal receivers."""
        from . import signals  # noqa: F401

        state = "enabled" if getattr(settings, "AUDITING_ENABLED", False) else "disabled"
        logger.info(f"Entity auditing {state}")
