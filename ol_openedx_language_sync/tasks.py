"""Celery tasks for translation sync."""

import logging

from celery import shared_task

from ol_openedx_language_sync.po import TranslationEntry
from ol_openedx_language_sync.store import DatabaseTranslationStore, OverwritePolicy

logger = logging.getLogger(__name__)


def store_chunk(chunk: dict) -> dict[str, int]:
    """Persist one batch chunk (``langcode``, ``entries``, ``policy``)."""
    entries = [TranslationEntry.from_dict(data) for data in chunk["entries"]]
    return DatabaseTranslationStore().write(
        chunk["langcode"],
        entries,
        OverwritePolicy.from_dict(chunk.get("policy")),
    )


@shared_task(bind=True, name="store_translations_chunk")
def store_translations_chunk(_self, chunk: dict):
    """Persist a chunk of imported translations."""
    logger.info(
        "Storing %d translations for %s", len(chunk["entries"]), chunk["langcode"]
    )
    return store_chunk(chunk)
