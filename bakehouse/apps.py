"""
Django Bakehouse app configuration.
"""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class BakehouseConfig(AppConfig):
    """Bakehouse application configuration."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "bakehouse"
    verbose_name = _("Bakehouse")

    def ready(self):
        """Import signal handlers when app is ready."""
        # Import handlers to register them
        from bakehouse.signals import handlers  # noqa: F401
