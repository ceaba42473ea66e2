"""
Utility functions for management commands.
"""

from django.core.management.base import CommandError

from ol_openedx_language_sync.constants import (
    JOB_FAILURE,
    JOB_PARTIAL_FAILURE,
    LEVEL_ERROR,
    LEVEL_WARNING,
)


def csv_to_list(values) -> list[str]:
    """
    Flatten comma and space separated langcode arguments into a list.

    ``["fr,de", "es"]`` and ``"fr, de es"`` both give ``["fr", "de", "es"]``.
    """
    if isinstance(values, str):
        values = [values]
    langcodes = []
    for value in values or ():
        langcodes.extend(
            token.strip() for token in value.replace(",", " ").split() if token.strip()
        )
    return langcodes


def write_outcome(command, outcome) -> None:
    """Echo one outcome with the style matching its level."""
    if outcome.level == LEVEL_ERROR:
        command.stderr.write(command.style.ERROR(outcome.message))
    elif outcome.level == LEVEL_WARNING:
        command.stdout.write(command.style.WARNING(outcome.message))
    else:
        command.stdout.write(command.style.SUCCESS(outcome.message))


def write_report(command, report) -> None:
    """Echo every outcome of a job report."""
    for outcome in report.outcomes:
        write_outcome(command, outcome)


def finish_report(command, report) -> None:
    """
    Echo a job report and summarise its status.

    A job where every item failed ends the command with ``CommandError``.
    """
    write_report(command, report)
    if report.status == JOB_FAILURE:
        msg = f"{len(report.errors)} item(s) failed."
        raise CommandError(msg)
    if report.status == JOB_PARTIAL_FAILURE:
        command.stderr.write(
            command.style.WARNING(
                f"Completed with {len(report.errors)} failed item(s)."
            )
        )
