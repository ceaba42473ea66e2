"""Common settings for the language sync plugin"""

from ol_openedx_language_sync.constants import (
    BATCH_BACKEND_INLINE,
    DEFAULT_BATCH_SIZE,
    DEFAULT_CACHE_ALIAS,
    DEFAULT_EXPORT_FILE_PATTERN,
)


def apply_common_settings(settings):
    """
    Apply the default language sync settings.
    """
    # Relative import/export paths resolve against this directory (cwd if empty)
    settings.LANGUAGE_SYNC_ROOT_DIR = ""
    settings.LANGUAGE_SYNC_EXPORT_FILE_PATTERN = DEFAULT_EXPORT_FILE_PATTERN
    # Directory holding PO files fetched when a language is added
    settings.LANGUAGE_SYNC_TRANSLATIONS_DIR = ""
    settings.LANGUAGE_SYNC_SITE_NAME = ""
    settings.LANGUAGE_SYNC_BATCH_SIZE = DEFAULT_BATCH_SIZE
    settings.LANGUAGE_SYNC_BATCH_BACKEND = BATCH_BACKEND_INLINE
    settings.LANGUAGE_SYNC_CACHE_ALIAS = DEFAULT_CACHE_ALIAS


def plugin_settings(settings):
    """Entry point for hosts that load plugin settings by module."""
    apply_common_settings(settings)
