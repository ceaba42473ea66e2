"""
Management command to export translations of a language to a PO file.

Usage:
    python manage.py language_export fr custom/fr.po
    python manage.py language_export fr - --status=all
    python manage.py language_export fr fr.po --status=customized,not-customized
"""

from django.core.management.base import BaseCommand, CommandError

from ol_openedx_language_sync.constants import MSG_EXPORTED_LANGUAGE, STDOUT_TARGET
from ol_openedx_language_sync.exceptions import LanguageSyncError
from ol_openedx_language_sync.sync import SyncEngine


class Command(BaseCommand):
    help = "Export the translations of a language to a PO file."

    def add_arguments(self, parser):
        parser.add_argument("langcode", type=str, help="Language code, e.g. fr")
        parser.add_argument(
            "po_file",
            type=str,
            help="Target file, or - for standard output",
        )
        parser.add_argument(
            "--status",
            default="customized",
            help=(
                "Comma separated statuses to export: customized, not-customized, "
                "not-translated or all"
            ),
        )

    def handle(self, *args, **options):  # noqa: ARG002
        engine = SyncEngine.from_settings()
        target = options["po_file"]
        try:
            result = engine.export_translations(
                options["langcode"],
                target,
                options["status"],
                stream=self.stdout,
            )
        except LanguageSyncError as e:
            raise CommandError(str(e)) from e
        if target != STDOUT_TARGET:
            self.stdout.write(
                self.style.SUCCESS(
                    MSG_EXPORTED_LANGUAGE.format(
                        langcode=options["langcode"], file=result.path
                    )
                )
            )
