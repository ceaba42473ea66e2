"""
ol_openedx_language_sync Django application initialization.
"""

from django.apps import AppConfig


class OLOpenedXLanguageSyncConfig(AppConfig):
    """
    Configuration for the ol_openedx_language_sync Django application.
    """

    name = "ol_openedx_language_sync"
    verbose_name = "Language sync"
    default_auto_field = "django.db.models.BigAutoField"
