"""
Tests for models
"""

import pytest
from django.contrib import admin
from django.db import IntegrityError

from ol_openedx_language_sync.models import Language, TranslationSource
from tests.factories import LanguageFactory, TranslationFactory

pytestmark = pytest.mark.django_db


def test_only_one_default_language():
    LanguageFactory.create(langcode="en", is_default=True)
    with pytest.raises(IntegrityError):
        LanguageFactory.create(langcode="fr", is_default=True)


def test_source_strings_are_unique_per_context():
    TranslationSource.objects.create(source="May", context="month")
    TranslationSource.objects.create(source="May", context="verb")
    with pytest.raises(IntegrityError):
        TranslationSource.objects.create(source="May", context="month")


def test_source_hash_covers_context_and_source():
    month = TranslationSource.objects.create(source="May", context="month")
    verb = TranslationSource.objects.create(source="May", context="verb")

    assert month.source_hash == TranslationSource.hash_key("month", "May")
    assert len(month.source_hash) == 64  # noqa: PLR2004
    assert month.source_hash != verb.source_hash

    verb.source = "Might"
    verb.save(update_fields=["source"])
    verb.refresh_from_db()
    assert verb.source_hash == TranslationSource.hash_key("verb", "Might")


def test_str():
    translation = TranslationFactory.create(
        language__langcode="fr", source__source="May", source__context="month"
    )
    assert str(translation.language) == "Language fr (fr)"
    assert str(translation.source) == "May [month]"
    assert str(translation) == "May [month] (fr)"


def test_locked_language_admin_delete_permission():
    model_admin = admin.site._registry[Language]  # noqa: SLF001
    assert model_admin.has_delete_permission(None, LanguageFactory.create()) is True
    locked = LanguageFactory.create(locked=True)
    assert model_admin.has_delete_permission(None, locked) is False
