"""
Database persistence of translations.

``DatabaseTranslationStore`` is what the sync engine reads from on export and
writes merged entries to on import.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import asdict, dataclass

from django.db import transaction
from django.db.models import Prefetch

from ol_openedx_language_sync.constants import PLURAL_DELIMITER
from ol_openedx_language_sync.models import Language, Translation, TranslationSource
from ol_openedx_language_sync.po import TranslationEntry
from ol_openedx_language_sync.status import classify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OverwritePolicy:
    """Which existing translations an import may replace."""

    overwrite_customized: bool = False
    overwrite_not_customized: bool = True
    # Value of the customized flag given to rows written by this import
    mark_customized: bool = False

    @classmethod
    def for_import(cls, replace: bool) -> "OverwritePolicy":  # noqa: FBT001
        if replace:
            return cls(
                overwrite_customized=True,
                overwrite_not_customized=True,
                mark_customized=True,
            )
        return cls()

    def allows(self, customized: bool) -> bool:  # noqa: FBT001
        if customized:
            return self.overwrite_customized
        return self.overwrite_not_customized

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict | None) -> "OverwritePolicy":
        return cls(**(data or {}))


def _join_translation(entry: TranslationEntry) -> str:
    if entry.is_plural:
        return PLURAL_DELIMITER.join(entry.translation)
    return entry.translation


class DatabaseTranslationStore:
    """Translation store backed by the ``TranslationSource``/``Translation`` models."""

    def read(self, langcode: str) -> Iterator[TranslationEntry]:
        """
        Yield every known source string with its ``langcode`` translation.

        Entries come back in source creation order and carry their status.
        """
        sources = TranslationSource.objects.order_by("id").prefetch_related(
            Prefetch(
                "translations",
                queryset=Translation.objects.filter(language__langcode=langcode),
                to_attr="language_translations",
            )
        )
        for source in sources.iterator(chunk_size=2000):
            translations = source.language_translations
            row = translations[0] if translations else None
            entry = self._to_entry(source, row)
            entry.status = classify(
                entry,
                had_translation=row is not None and entry.is_translated,
                customized=bool(row and row.customized),
            )
            yield entry

    @staticmethod
    def _to_entry(
        source: TranslationSource, row: Translation | None
    ) -> TranslationEntry:
        if source.source_plural is not None:
            translation = row.plural_forms if row else ()
        else:
            translation = row.translation if row else ""
        return TranslationEntry(
            source=source.source,
            source_plural=source.source_plural,
            context=source.context,
            translation=translation,
        )

    def write(
        self,
        langcode: str,
        entries: Iterable[TranslationEntry],
        policy: OverwritePolicy | None = None,
    ) -> dict[str, int]:
        """
        Merge ``entries`` into the store for ``langcode``.

        Returns counters: ``additions`` (new translations), ``updates``
        (replaced translations) and ``skipped`` (protected or unchanged).
        """
        policy = policy or OverwritePolicy()
        counts = {"additions": 0, "updates": 0, "skipped": 0}
        language = Language.objects.get(langcode=langcode)
        with transaction.atomic():
            for entry in entries:
                source, _ = TranslationSource.objects.get_or_create(
                    source_hash=TranslationSource.hash_key(
                        entry.context, entry.source
                    ),
                    defaults={
                        "context": entry.context,
                        "source": entry.source,
                        "source_plural": entry.source_plural,
                    },
                )
                if entry.is_plural and source.source_plural is None:
                    source.source_plural = entry.source_plural
                    source.save(update_fields=["source_plural"])
                if not entry.is_translated:
                    counts["skipped"] += 1
                    continue
                self._write_translation(language, source, entry, policy, counts)
        logger.debug("Stored translations for %s: %s", langcode, counts)
        return counts

    @staticmethod
    def _write_translation(language, source, entry, policy, counts):
        value = _join_translation(entry)
        existing = Translation.objects.filter(source=source, language=language).first()
        if existing is None:
            Translation.objects.create(
                source=source,
                language=language,
                translation=value,
                customized=policy.mark_customized,
            )
            counts["additions"] += 1
        elif policy.allows(existing.customized) and (
            existing.translation != value
            or existing.customized != policy.mark_customized
        ):
            existing.translation = value
            existing.customized = policy.mark_customized
            existing.save(update_fields=["translation", "customized", "updated_at"])
            counts["updates"] += 1
        else:
            counts["skipped"] += 1
