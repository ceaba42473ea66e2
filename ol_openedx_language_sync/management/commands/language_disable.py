"""
Management command to disable languages.

Locked languages are skipped with a warning.
"""

from django.core.management.base import BaseCommand

from ol_openedx_language_sync.sync import SyncEngine
from ol_openedx_language_sync.utils.command_utils import csv_to_list, finish_report


class Command(BaseCommand):
    help = "Disable one or more languages."

    def add_arguments(self, parser):
        parser.add_argument(
            "langcodes",
            nargs="*",
            type=str,
            help="Comma or space separated language codes",
        )

    def handle(self, *args, **options):  # noqa: ARG002
        engine = SyncEngine.from_settings()
        report = engine.disable_languages(csv_to_list(options["langcodes"]))
        finish_report(self, report)
