"""
Django-app registry for `apps.core`.
"""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Shared services: Riot client, error taxonomy, health endpoint."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.core"
    verbose_name = "Core"
