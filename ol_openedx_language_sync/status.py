"""Classification and filtering of translation entries by status."""

from collections.abc import Iterable, Iterator

from ol_openedx_language_sync.constants import (
    DEFAULT_EXPORT_STATUSES,
    MSG_UNKNOWN_STATUS,
    STATUS_ALL,
    STATUS_CUSTOMIZED,
    STATUS_INPUT_VALUES,
    STATUS_NOT_CUSTOMIZED,
    STATUS_NOT_TRANSLATED,
    TRANSLATION_STATUSES,
)
from ol_openedx_language_sync.exceptions import UnknownStatusError
from ol_openedx_language_sync.po import TranslationEntry, TranslationSet


def classify(
    entry: TranslationEntry,
    had_translation: bool | None = None,
    customized: bool = False,  # noqa: FBT001, FBT002
) -> str:
    """
    Return the status of an entry.

    ``had_translation`` defaults to whether the entry carries a non-empty
    translation; ``customized`` tells whether a user edited it by hand.
    """
    if had_translation is None:
        had_translation = entry.is_translated
    if not had_translation:
        return STATUS_NOT_TRANSLATED
    if customized:
        return STATUS_CUSTOMIZED
    return STATUS_NOT_CUSTOMIZED


def parse_statuses(tokens: Iterable[str] | str | None) -> frozenset[str]:
    """
    Normalize requested status tokens into a set of internal status values.

    Accepts comma-separated strings, both the command-line spelling
    (``not-customized``) and the internal one (``not_customized``), and
    ``all`` as shorthand for every status. ``None`` or an empty request means
    the default, customized only.
    """
    if isinstance(tokens, str):
        tokens = tokens.split(",")
    tokens = [token.strip() for token in tokens or () if token and token.strip()]
    if not tokens:
        return frozenset(DEFAULT_EXPORT_STATUSES)

    statuses = set()
    unknown = []
    for token in tokens:
        if token == STATUS_ALL:
            statuses.update(TRANSLATION_STATUSES)
        elif token in STATUS_INPUT_VALUES:
            statuses.add(STATUS_INPUT_VALUES[token])
        elif token in TRANSLATION_STATUSES:
            statuses.add(token)
        else:
            unknown.append(token)

    if unknown:
        raise UnknownStatusError(
            MSG_UNKNOWN_STATUS.format(options=", ".join(unknown)), tokens=unknown
        )
    return frozenset(statuses)


def _status_of(entry: TranslationEntry) -> str:
    return entry.status or classify(entry)


def filter_entries(
    entries: Iterable[TranslationEntry], allowed_statuses
) -> Iterator[TranslationEntry]:
    """Yield the entries whose status is allowed, preserving order."""
    allowed = parse_statuses(allowed_statuses)
    return (entry for entry in entries if _status_of(entry) in allowed)


def filter_set(translation_set: TranslationSet, allowed_statuses) -> TranslationSet:
    """Return a new set holding the subsequence of allowed entries."""
    return TranslationSet(
        langcode=translation_set.langcode,
        header=translation_set.header,
        entries=filter_entries(translation_set, allowed_statuses),
    )


def count_by_status(entries: Iterable[TranslationEntry]) -> dict[str, int]:
    counts = dict.fromkeys(
        (STATUS_CUSTOMIZED, STATUS_NOT_CUSTOMIZED, STATUS_NOT_TRANSLATED), 0
    )
    for entry in entries:
        counts[_status_of(entry)] += 1
    return counts
