"""
Management command to import PO files into the translation store.

Usage:
    python manage.py language_import fr translations/fr.po extra.fr.po
    python manage.py language_import fr custom.fr.po --replace

Without --replace, imported strings are stored as not customized and never
overwrite customized ones. With --replace they are stored as customized and
replace any existing translation.
"""

from django.core.management.base import BaseCommand, CommandError

from ol_openedx_language_sync.exceptions import LanguageSyncError
from ol_openedx_language_sync.sync import SyncEngine
from ol_openedx_language_sync.utils.command_utils import finish_report


class Command(BaseCommand):
    help = "Import gettext PO files for a language."

    def add_arguments(self, parser):
        parser.add_argument("langcode", type=str, help="Language code, e.g. fr")
        parser.add_argument(
            "po_files",
            nargs="+",
            type=str,
            help="PO files, absolute or relative to LANGUAGE_SYNC_ROOT_DIR",
        )
        parser.add_argument(
            "--replace",
            action="store_true",
            help="Replace customized translations and mark imports as customized",
        )

    def handle(self, *args, **options):  # noqa: ARG002
        engine = SyncEngine.from_settings()
        try:
            report = engine.import_translations(
                options["langcode"], options["po_files"], replace=options["replace"]
            )
        except LanguageSyncError as e:
            raise CommandError(str(e)) from e
        finish_report(self, report)
