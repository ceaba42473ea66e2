"""
Tests for status classification and filtering
"""

import pytest

from ol_openedx_language_sync.constants import (
    STATUS_CUSTOMIZED,
    STATUS_NOT_CUSTOMIZED,
    STATUS_NOT_TRANSLATED,
    TRANSLATION_STATUSES,
)
from ol_openedx_language_sync.exceptions import UnknownStatusError
from ol_openedx_language_sync.po import TranslationEntry, TranslationSet
from ol_openedx_language_sync.status import (
    classify,
    count_by_status,
    filter_entries,
    filter_set,
    parse_statuses,
)


@pytest.mark.parametrize(
    ("entry", "had_translation", "customized", "expected"),
    [
        (TranslationEntry("a", "b"), None, False, STATUS_NOT_CUSTOMIZED),
        (TranslationEntry("a", "b"), None, True, STATUS_CUSTOMIZED),
        (TranslationEntry("a", ""), None, True, STATUS_NOT_TRANSLATED),
        (TranslationEntry("a", "b"), False, False, STATUS_NOT_TRANSLATED),
        (
            TranslationEntry("a", ("", ""), source_plural="as"),
            None,
            False,
            STATUS_NOT_TRANSLATED,
        ),
    ],
)
def test_classify(entry, had_translation, customized, expected):
    assert classify(entry, had_translation, customized) == expected


@pytest.mark.parametrize(
    ("tokens", "expected"),
    [
        (None, {STATUS_CUSTOMIZED}),
        ("", {STATUS_CUSTOMIZED}),
        ("all", set(TRANSLATION_STATUSES)),
        (["all"], set(TRANSLATION_STATUSES)),
        ("customized,not-customized", {STATUS_CUSTOMIZED, STATUS_NOT_CUSTOMIZED}),
        ("not_translated", {STATUS_NOT_TRANSLATED}),
        (" not-translated , customized ", {STATUS_NOT_TRANSLATED, STATUS_CUSTOMIZED}),
    ],
)
def test_parse_statuses(tokens, expected):
    assert parse_statuses(tokens) == expected


def test_parse_statuses_lists_every_unknown_token():
    with pytest.raises(UnknownStatusError) as exc_info:
        parse_statuses("customized,bogus,weird")
    assert exc_info.value.tokens == ["bogus", "weird"]
    assert str(exc_info.value) == "Unknown status options: bogus, weird"


def _entries():
    return [
        TranslationEntry("one", "un", status=STATUS_CUSTOMIZED),
        TranslationEntry("two", "deux", status=STATUS_NOT_CUSTOMIZED),
        TranslationEntry("three", "", status=STATUS_NOT_TRANSLATED),
        TranslationEntry("four", "quatre", status=STATUS_CUSTOMIZED),
    ]


def test_filter_entries_keeps_order():
    filtered = filter_entries(_entries(), ["customized"])
    assert [entry.source for entry in filtered] == ["one", "four"]


def test_filter_set_all_is_identity():
    translation_set = TranslationSet(langcode="fr", entries=_entries())
    filtered = filter_set(translation_set, "all")
    assert filtered == translation_set
    assert filtered.langcode == "fr"


def test_filter_classifies_entries_without_status():
    entries = [TranslationEntry("one", "un"), TranslationEntry("two", "")]
    filtered = filter_entries(entries, "not-translated")
    assert [entry.source for entry in filtered] == ["two"]


def test_count_by_status():
    assert count_by_status(_entries()) == {
        STATUS_CUSTOMIZED: 2,
        STATUS_NOT_CUSTOMIZED: 1,
        STATUS_NOT_TRANSLATED: 1,
    }
