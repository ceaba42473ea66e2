"""
Management command to export the translations of several languages.

Usage:
    python manage.py language_export_all
    python manage.py language_export_all fr,de --file-pattern=custom/%language.po
    python manage.py language_export_all --all

Without langcodes every enabled language is exported. A failing language is
reported and the remaining ones are still exported.
"""

from django.core.management.base import BaseCommand

from ol_openedx_language_sync.sync import SyncEngine
from ol_openedx_language_sync.utils.command_utils import csv_to_list, finish_report


class Command(BaseCommand):
    help = "Export translations of every enabled (or listed) language."

    def add_arguments(self, parser):
        parser.add_argument(
            "langcodes",
            nargs="*",
            type=str,
            help="Comma or space separated language codes (default: all enabled)",
        )
        parser.add_argument(
            "--file-pattern",
            dest="file_pattern",
            default=None,
            help="Target file template; %%language is replaced by the langcode",
        )
        parser.add_argument(
            "--all",
            action="store_true",
            help="Export every translation instead of customized ones only",
        )

    def handle(self, *args, **options):  # noqa: ARG002
        engine = SyncEngine.from_settings()
        report = engine.export_all_translations(
            csv_to_list(options["langcodes"]),
            file_pattern=options["file_pattern"],
            all_statuses=options["all"],
        )
        finish_report(self, report)
