"""Page cache invalidation after visible language changes."""

import logging

from django.conf import settings
from django.core.cache import caches

from ol_openedx_language_sync.constants import DEFAULT_CACHE_ALIAS

logger = logging.getLogger(__name__)


class DjangoCacheInvalidator:
    """Clear a Django cache backend whenever the language setup changes."""

    def __init__(self, alias: str | None = None):
        self.alias = alias or getattr(
            settings, "LANGUAGE_SYNC_CACHE_ALIAS", DEFAULT_CACHE_ALIAS
        )

    def invalidate(self) -> None:
        caches[self.alias].clear()
        logger.debug("Cleared cache %s", self.alias)
