"""
Language administration and translation import/export.

``SyncEngine`` drives every operation of the management commands. Batch style
operations (add, enable, disable, import, export-all) never stop at the first
failing item; they return a ``JobReport`` holding one ``Outcome`` per unit of
work. Single-target operations (default, export) raise instead.
"""

import logging
import sys
from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from ol_openedx_language_sync.batch import BatchRunner, chunked, get_batch_runner
from ol_openedx_language_sync.cache import DjangoCacheInvalidator
from ol_openedx_language_sync.catalog import LanguageCatalog
from ol_openedx_language_sync.constants import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_EXPORT_FILE_PATTERN,
    JOB_FAILURE,
    JOB_PARTIAL_FAILURE,
    JOB_SUCCESS,
    LANGUAGE_PLACEHOLDER,
    LEVEL_ERROR,
    LEVEL_INFO,
    LEVEL_WARNING,
    MSG_DEFAULT_ASSIGNED,
    MSG_EMPTY_LANGCODES,
    MSG_EXPORTED_LANGUAGE,
    MSG_IMPORT_COMPLETE,
    MSG_LANGUAGE_ADDED,
    MSG_LANGUAGE_CREATED,
    MSG_LANGUAGE_DISABLED,
    MSG_LANGUAGE_ENABLED,
    MSG_NO_SUCH_LANGUAGE,
    MSG_NOTHING_TO_EXPORT,
    STATUS_ALL,
)
from ol_openedx_language_sync.exceptions import (
    ConflictError,
    EmptyLangcodeListError,
    LanguageExistsError,
    LanguageNotFoundError,
    LanguageSyncError,
    NothingToExportError,
    TranslationFileError,
    UnknownLangcodeError,
)
from ol_openedx_language_sync.po import (
    PoHeader,
    PoReader,
    TranslationEntry,
    TranslationSet,
    encode,
    iter_po_file,
    scan_po_file,
    write_po_file,
)
from ol_openedx_language_sync.status import (
    count_by_status,
    filter_entries,
    parse_statuses,
)
from ol_openedx_language_sync.store import DatabaseTranslationStore, OverwritePolicy
from ol_openedx_language_sync.utils import config
from ol_openedx_language_sync.utils.file_utils import (
    find_translation_files,
    parse_po_filename,
    prepare_directory,
    resolve_source_path,
    resolve_target_path,
)

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    LEVEL_INFO: logging.INFO,
    LEVEL_WARNING: logging.WARNING,
    LEVEL_ERROR: logging.ERROR,
}


def _require_langcodes(langcodes) -> None:
    if not langcodes:
        raise EmptyLangcodeListError(MSG_EMPTY_LANGCODES)


@dataclass
class Outcome:
    """Result of one unit of work."""

    level: str
    message: str
    langcode: str | None = None
    path: str | None = None


@dataclass
class JobReport:
    """
    Accumulated outcomes of a batch style operation.

    The job failed when there are errors and nothing succeeded, partially
    failed when both happened. Warnings are skipped items, not failures.
    """

    outcomes: list[Outcome] = field(default_factory=list)
    counts: Counter = field(default_factory=Counter)
    successes: int = 0

    def _add(self, level, message, langcode=None, path=None) -> Outcome:
        outcome = Outcome(
            level, message, langcode, str(path) if path is not None else None
        )
        self.outcomes.append(outcome)
        logger.log(_LOG_LEVELS[level], message)
        return outcome

    def info(self, message, langcode=None, path=None) -> Outcome:
        return self._add(LEVEL_INFO, message, langcode, path)

    def succeed(self, message, langcode=None, path=None) -> Outcome:
        self.successes += 1
        return self._add(LEVEL_INFO, message, langcode, path)

    def warn(self, message, langcode=None, path=None) -> Outcome:
        return self._add(LEVEL_WARNING, message, langcode, path)

    def fail(self, message, langcode=None, path=None) -> Outcome:
        return self._add(LEVEL_ERROR, message, langcode, path)

    @property
    def errors(self) -> list[Outcome]:
        return [outcome for outcome in self.outcomes if outcome.level == LEVEL_ERROR]

    @property
    def warnings(self) -> list[Outcome]:
        return [
            outcome for outcome in self.outcomes if outcome.level == LEVEL_WARNING
        ]

    @property
    def status(self) -> str:
        if not self.errors:
            return JOB_SUCCESS
        if self.successes:
            return JOB_PARTIAL_FAILURE
        return JOB_FAILURE


@dataclass
class ImportJob:
    """Sources (paths or binary streams) to merge into one language."""

    langcode: str
    sources: list = field(default_factory=list)
    policy: OverwritePolicy = field(default_factory=OverwritePolicy)
    plural_forms: str | None = None
    files_read: int = 0


@dataclass
class ExportJob:
    langcode: str
    target: str | Path | None = None
    statuses: frozenset = frozenset()


@dataclass
class ExportResult:
    """Where an export went (``None`` for a stream) and how many entries."""

    path: Path | None
    count: int


class SyncEngine:
    """
    Orchestrates the language catalog, the translation store and PO files.

    Every collaborator can be injected; ``from_settings`` builds an engine
    from the Django settings.
    """

    def __init__(  # noqa: PLR0913
        self,
        catalog: LanguageCatalog | None = None,
        store: DatabaseTranslationStore | None = None,
        batch_runner: BatchRunner | None = None,
        cache=None,
        root_dir=None,
        translations_dir=None,
        site_name: str = "",
        batch_size: int = DEFAULT_BATCH_SIZE,
        export_file_pattern: str = DEFAULT_EXPORT_FILE_PATTERN,
    ):
        self.cache = cache
        self.catalog = catalog or LanguageCatalog(cache=cache)
        self.store = store or DatabaseTranslationStore()
        self.batch_runner = batch_runner or get_batch_runner()
        self.root_dir = Path(root_dir) if root_dir else Path.cwd()
        self.translations_dir = Path(translations_dir) if translations_dir else None
        self.site_name = site_name
        self.batch_size = batch_size
        self.export_file_pattern = export_file_pattern

    @classmethod
    def from_settings(cls, options: dict | None = None) -> "SyncEngine":
        return cls(
            cache=DjangoCacheInvalidator(config.get_cache_alias(options)),
            batch_runner=get_batch_runner(),
            root_dir=config.get_root_dir(options),
            translations_dir=config.get_translations_dir(options),
            site_name=config.get_site_name(options),
            batch_size=config.get_batch_size(options),
            export_file_pattern=config.get_export_file_pattern(options),
        )

    def _invalidate_cache(self):
        if self.cache is not None:
            self.cache.invalidate()

    # Language administration

    def add_languages(self, langcodes) -> JobReport:
        """Add every standard langcode and fetch its translations."""
        report = JobReport()
        try:
            _require_langcodes(langcodes)
        except EmptyLangcodeListError as exc:
            report.fail(str(exc))
            return report

        added = []
        for langcode in langcodes:
            try:
                self.catalog.add(langcode)
            except (LanguageExistsError, UnknownLangcodeError) as exc:
                report.warn(str(exc), langcode=langcode)
                continue
            report.succeed(MSG_LANGUAGE_ADDED.format(langcode=langcode), langcode)
            added.append(langcode)

        if added:
            self._invalidate_cache()
        for langcode in added:
            self._fetch_translations(langcode, report)
        return report

    def _fetch_translations(self, langcode: str, report: JobReport) -> None:
        if self.translations_dir is None:
            return
        files = find_translation_files(self.translations_dir, langcode)
        if not files:
            logger.info("No translation files found for %s", langcode)
            return
        job = ImportJob(langcode=langcode, sources=files)
        self._run_import(job, report)

    def _set_enabled(self, langcodes, enabled: bool) -> JobReport:  # noqa: FBT001
        report = JobReport()
        try:
            _require_langcodes(langcodes)
        except EmptyLangcodeListError as exc:
            report.fail(str(exc))
            return report

        template = MSG_LANGUAGE_ENABLED if enabled else MSG_LANGUAGE_DISABLED
        for langcode in langcodes:
            try:
                self.catalog.set_enabled(langcode, enabled)
            except (LanguageNotFoundError, ConflictError) as exc:
                report.warn(str(exc), langcode=langcode)
                continue
            report.succeed(template.format(langcode=langcode), langcode)
        return report

    def enable_languages(self, langcodes) -> JobReport:
        return self._set_enabled(langcodes, enabled=True)

    def disable_languages(self, langcodes) -> JobReport:
        return self._set_enabled(langcodes, enabled=False)

    def set_default_language(self, langcode: str) -> Outcome:
        self.catalog.set_default(langcode)
        return Outcome(LEVEL_INFO, MSG_DEFAULT_ASSIGNED.format(langcode=langcode))

    def language_summary(self) -> list[dict]:
        """Catalog listing with per-status translation counts."""
        return [
            {
                "langcode": language.langcode,
                "name": language.name,
                "enabled": language.enabled,
                "locked": language.locked,
                "is_default": language.is_default,
                "counts": count_by_status(self.store.read(language.langcode)),
            }
            for language in self.catalog.list_languages()
        ]

    # Import

    def import_translations(
        self,
        langcode: str,
        sources,
        replace=False,  # noqa: FBT002
    ) -> JobReport:
        """
        Merge PO files (paths or binary streams) into the ``langcode`` store.

        The language is created when missing. A failing file is reported and
        the remaining files are still imported.
        """
        report = JobReport()
        _, created = self.catalog.ensure(langcode)
        if created:
            language = self.catalog.get(langcode)
            report.info(
                MSG_LANGUAGE_CREATED.format(langcode=langcode, name=language.name),
                langcode,
            )
            self._invalidate_cache()
        job = ImportJob(
            langcode=langcode,
            sources=list(sources),
            policy=OverwritePolicy.for_import(replace),
        )
        self._run_import(job, report)
        return report

    def _iter_source(self, source, job: ImportJob) -> Iterator[TranslationEntry]:
        """
        Yield the entries of one source (path or binary stream).

        Files are read twice: a first pass validates the whole file so a
        malformed one stores nothing, the second streams its entries.
        """
        if hasattr(source, "read"):
            reader = PoReader(source, path=getattr(source, "name", None))
            yield from reader
            self._note_plural_forms(job, reader)
            return

        path = resolve_source_path(source, self.root_dir)
        file_langcode = parse_po_filename(path)["langcode"]
        if file_langcode and file_langcode != job.langcode:
            logger.info(
                "File %s is named for %s, importing it as %s",
                path,
                file_langcode,
                job.langcode,
            )
        self._note_plural_forms(job, scan_po_file(path))
        yield from iter_po_file(path)

    @staticmethod
    def _note_plural_forms(job: ImportJob, reader: PoReader) -> None:
        if job.plural_forms or not reader.max_plural_forms or not reader.header:
            return
        job.plural_forms = reader.header.plural_forms

    def _iter_job_entries(
        self, job: ImportJob, report: JobReport
    ) -> Iterator[TranslationEntry]:
        """
        Stream the entries of every source of ``job``, skipping repeated keys.

        Sources are read last to first so the entry of a later file wins. A
        failing source is reported and the next one is read.
        """
        seen = set()
        for source in reversed(job.sources):
            name = getattr(source, "name", source)
            count = 0
            try:
                for entry in self._iter_source(source, job):
                    count += 1
                    if entry.key in seen:
                        continue
                    seen.add(entry.key)
                    yield entry
            except TranslationFileError as exc:
                report.fail(str(exc), langcode=job.langcode, path=exc.path)
                continue
            job.files_read += 1
            logger.info(
                "Read %d translations for %s from %s", count, job.langcode, name
            )

    def _run_import(self, job: ImportJob, report: JobReport) -> None:
        result = self._persist(
            job.langcode, self._iter_job_entries(job, report), job.policy
        )
        if not job.files_read:
            return

        report.counts.update(result.counts)
        for error in result.errors:
            report.fail(error, langcode=job.langcode)
        if job.plural_forms:
            self.catalog.set_plural_forms(job.langcode, job.plural_forms)
        self._invalidate_cache()
        if result.chunks or not result.errors:
            report.succeed(
                f"{MSG_IMPORT_COMPLETE} {result.counts['additions']} added, "
                f"{result.counts['updates']} updated, "
                f"{result.counts['skipped']} skipped.",
                langcode=job.langcode,
            )

    def _store_chunk(self, chunk: dict) -> dict[str, int]:
        return self.store.write(
            chunk["langcode"],
            [TranslationEntry.from_dict(data) for data in chunk["entries"]],
            OverwritePolicy.from_dict(chunk["policy"]),
        )

    def _persist(self, langcode, entries, policy: OverwritePolicy):
        chunks = (
            {
                "langcode": langcode,
                "entries": [entry.to_dict() for entry in chunk],
                "policy": policy.to_dict(),
            }
            for chunk in chunked(entries, self.batch_size)
        )
        return self.batch_runner.run(chunks, self._store_chunk)

    # Export

    def export_translations(
        self, langcode: str, target=None, statuses=None, stream=None
    ) -> ExportResult:
        """
        Write the ``langcode`` translations matching ``statuses`` to ``target``.

        ``target`` ``None`` or ``-`` writes to ``stream`` (stdout by default).
        Nothing is written when no translation matches.
        """
        try:
            language = self.catalog.get(langcode)
        except LanguageNotFoundError as exc:
            raise LanguageNotFoundError(
                MSG_NO_SUCH_LANGUAGE.format(langcode=langcode), langcode=langcode
            ) from exc
        job = ExportJob(
            langcode=langcode, target=target, statuses=parse_statuses(statuses)
        )

        entries = filter_entries(self.store.read(job.langcode), job.statuses)
        translation_set = TranslationSet(
            langcode=langcode,
            header=PoHeader(
                project_name=self.site_name,
                language_name=language.name,
                langcode=langcode,
                plural_forms=language.plural_forms or None,
            ),
            entries=entries,
        )
        if not len(translation_set):
            raise NothingToExportError(MSG_NOTHING_TO_EXPORT)

        path = resolve_target_path(job.target, self.root_dir)
        if path is None:
            encode(translation_set, stream or sys.stdout)
        else:
            prepare_directory(path)
            write_po_file(translation_set, path)
        logger.info(
            "Exported %d translations for %s to %s",
            len(translation_set),
            langcode,
            path or "stdout",
        )
        return ExportResult(path=path, count=len(translation_set))

    def export_all_translations(
        self,
        langcodes=None,
        file_pattern: str | None = None,
        all_statuses=False,  # noqa: FBT002
    ) -> JobReport:
        """Export every listed (default: every enabled) language."""
        report = JobReport()
        if not langcodes:
            langcodes = [
                language.langcode
                for language in self.catalog.list_languages(enabled=True)
            ]
        pattern = file_pattern or self.export_file_pattern
        if LANGUAGE_PLACEHOLDER not in pattern and len(langcodes) > 1:
            logger.warning(
                "File pattern %s has no %s placeholder", pattern, LANGUAGE_PLACEHOLDER
            )
        statuses = [STATUS_ALL] if all_statuses else None

        for langcode in langcodes:
            target = pattern.replace(LANGUAGE_PLACEHOLDER, langcode)
            try:
                result = self.export_translations(langcode, target, statuses)
            except LanguageSyncError as exc:
                report.fail(f"{langcode}: {exc}", langcode=langcode, path=target)
                continue
            report.counts["exported"] += result.count
            report.succeed(
                MSG_EXPORTED_LANGUAGE.format(langcode=langcode, file=result.path),
                langcode=langcode,
                path=result.path,
            )
        return report
