"""
Management command to list the languages of the site.
"""

from django.core.management.base import BaseCommand

from ol_openedx_language_sync.constants import (
    STATUS_CUSTOMIZED,
    STATUS_NOT_CUSTOMIZED,
    STATUS_NOT_TRANSLATED,
)
from ol_openedx_language_sync.sync import SyncEngine


def _flag(value):
    return "yes" if value else "no"


class Command(BaseCommand):
    help = "List languages with their state and translation counts."

    def handle(self, *args, **options):  # noqa: ARG002
        summary = SyncEngine.from_settings().language_summary()
        if not summary:
            self.stdout.write(self.style.WARNING("No languages configured."))
            return

        self.stdout.write(
            f"{'langcode':<12} {'name':<28} {'enabled':<8} {'locked':<7} "
            f"{'default':<8} {'customized':>10} {'not_customized':>14} "
            f"{'not_translated':>14}"
        )
        for row in summary:
            counts = row["counts"]
            self.stdout.write(
                f"{row['langcode']:<12} {row['name'][:28]:<28} "
                f"{_flag(row['enabled']):<8} {_flag(row['locked']):<7} "
                f"{_flag(row['is_default']):<8} "
                f"{counts[STATUS_CUSTOMIZED]:>10} "
                f"{counts[STATUS_NOT_CUSTOMIZED]:>14} "
                f"{counts[STATUS_NOT_TRANSLATED]:>14}"
            )
