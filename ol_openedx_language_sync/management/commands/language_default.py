"""
Management command to set the default language.
"""

from django.core.management.base import BaseCommand, CommandError

from ol_openedx_language_sync.exceptions import LanguageSyncError
from ol_openedx_language_sync.sync import SyncEngine


class Command(BaseCommand):
    help = "Assign the site default language."

    def add_arguments(self, parser):
        parser.add_argument("langcode", type=str, help="Language code, e.g. fr")

    def handle(self, *args, **options):  # noqa: ARG002
        engine = SyncEngine.from_settings()
        try:
            outcome = engine.set_default_language(options["langcode"])
        except LanguageSyncError as e:
            raise CommandError(str(e)) from e
        self.stdout.write(self.style.SUCCESS(outcome.message))
