"""
Management command to add languages to the site.

Usage:
    python manage.py language_add fr,de
    python manage.py language_add fr de

Each standard langcode is created enabled. When LANGUAGE_SYNC_TRANSLATIONS_DIR
is set, the PO files found there for the new language are imported.
"""

from django.core.management.base import BaseCommand

from ol_openedx_language_sync.sync import SyncEngine
from ol_openedx_language_sync.utils.command_utils import csv_to_list, finish_report


class Command(BaseCommand):
    help = "Add and enable one or more languages."

    def add_arguments(self, parser):
        parser.add_argument(
            "langcodes",
            nargs="*",
            type=str,
            help="Comma or space separated language codes, e.g. fr,pt-br",
        )

    def handle(self, *args, **options):  # noqa: ARG002
        engine = SyncEngine.from_settings()
        report = engine.add_languages(csv_to_list(options["langcodes"]))
        finish_report(self, report)
