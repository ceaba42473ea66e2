"""
Configuration helpers.

Values come from command options first, then Django settings, then the
environment.
"""

import os
from pathlib import Path
from typing import Any

from django.conf import settings

from ol_openedx_language_sync.constants import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_CACHE_ALIAS,
    DEFAULT_EXPORT_FILE_PATTERN,
)


def get_config_value(key: str, options: dict | None = None, default: Any = None) -> Any:
    """Get configuration value from options, settings, or environment."""
    options = options or {}
    if options.get(key):
        return options[key]
    setting_key = key.upper().replace("-", "_")
    if hasattr(settings, setting_key):
        return getattr(settings, setting_key)
    return os.environ.get(setting_key, default)


def get_root_dir(options: dict | None = None) -> Path:
    root = get_config_value("language_sync_root_dir", options)
    return Path(root) if root else Path.cwd()


def get_translations_dir(options: dict | None = None) -> Path | None:
    translations_dir = get_config_value("language_sync_translations_dir", options)
    return Path(translations_dir) if translations_dir else None


def get_site_name(options: dict | None = None) -> str:
    return get_config_value("language_sync_site_name", options, "") or ""


def get_export_file_pattern(options: dict | None = None) -> str:
    return (
        get_config_value("language_sync_export_file_pattern", options)
        or DEFAULT_EXPORT_FILE_PATTERN
    )


def get_batch_size(options: dict | None = None) -> int:
    return int(
        get_config_value("language_sync_batch_size", options) or DEFAULT_BATCH_SIZE
    )


def get_cache_alias(options: dict | None = None) -> str:
    return get_config_value("language_sync_cache_alias", options) or DEFAULT_CACHE_ALIAS
