"""
Tests for the language catalog
"""

import pytest

from ol_openedx_language_sync.exceptions import (
    AlreadyInStateError,
    LanguageExistsError,
    LanguageNotFoundError,
    LockedLanguageError,
    UnknownLangcodeError,
)
from ol_openedx_language_sync.models import Language
from tests.factories import LanguageFactory

pytestmark = pytest.mark.django_db


def test_add_standard_language(catalog):
    language = catalog.add("fr")

    assert language.name == "French"
    assert language.native_name == "Français"
    assert language.enabled is True
    assert catalog.exists("fr")


def test_add_existing_language(catalog):
    LanguageFactory.create(langcode="fr")
    with pytest.raises(LanguageExistsError) as exc_info:
        catalog.add("fr")
    assert exc_info.value.langcode == "fr"


def test_add_unknown_langcode(catalog):
    with pytest.raises(UnknownLangcodeError, match="Invalid language code xx"):
        catalog.add("xx")
    assert not Language.objects.exists()


def test_add_custom_language_with_name(catalog):
    language = catalog.add("xx", name="Klingon")
    assert language.name == "Klingon"


def test_ensure_creates_missing_language_once(catalog):
    language, created = catalog.ensure("de")
    assert created is True
    assert language.name == "German"

    same, created = catalog.ensure("de")
    assert created is False
    assert same.pk == language.pk


def test_ensure_uses_langcode_as_name_for_custom_language(catalog):
    language, created = catalog.ensure("tlh")
    assert created is True
    assert language.name == "tlh"


def test_list_languages_is_stable(catalog):
    LanguageFactory.create(langcode="fr", weight=1)
    LanguageFactory.create(langcode="de", weight=1)
    LanguageFactory.create(langcode="es", weight=0, enabled=False)

    assert [lang.langcode for lang in catalog.list_languages()] == ["es", "de", "fr"]
    assert [lang.langcode for lang in catalog.list_languages(enabled=True)] == [
        "de",
        "fr",
    ]


def test_get_missing_language(catalog):
    with pytest.raises(LanguageNotFoundError):
        catalog.get("fr")


def test_enable_is_idempotent(catalog, cache):
    """Enabling twice reports AlreadyInState and changes nothing"""
    LanguageFactory.create(langcode="fr", enabled=False)

    catalog.set_enabled("fr", True)  # noqa: FBT003
    assert cache.invalidate.call_count == 1
    updated_at = Language.objects.get(langcode="fr").updated_at

    with pytest.raises(AlreadyInStateError):
        catalog.set_enabled("fr", True)  # noqa: FBT003
    language = Language.objects.get(langcode="fr")
    assert language.enabled is True
    assert language.updated_at == updated_at
    assert cache.invalidate.call_count == 1


def test_disable_locked_language(catalog, cache):
    LanguageFactory.create(langcode="en", locked=True, enabled=True)

    with pytest.raises(LockedLanguageError):
        catalog.set_enabled("en", False)  # noqa: FBT003
    assert Language.objects.get(langcode="en").enabled is True
    cache.invalidate.assert_not_called()


def test_enable_locked_language_is_allowed(catalog):
    LanguageFactory.create(langcode="en", locked=True, enabled=False)
    catalog.set_enabled("en", True)  # noqa: FBT003
    assert Language.objects.get(langcode="en").enabled is True


def test_set_enabled_missing_language(catalog):
    with pytest.raises(LanguageNotFoundError):
        catalog.set_enabled("fr", True)  # noqa: FBT003


def test_set_default_keeps_exactly_one_default(catalog, cache):
    for langcode in ("en", "fr", "de"):
        LanguageFactory.create(langcode=langcode)
    assert catalog.get_default() is None

    for langcode in ("fr", "de", "fr", "fr", "en"):
        catalog.set_default(langcode)
        assert Language.objects.filter(is_default=True).count() == 1
        assert catalog.get_default().langcode == langcode
    assert cache.invalidate.call_count == 5  # noqa: PLR2004


def test_set_default_missing_language(catalog):
    LanguageFactory.create(langcode="en", is_default=True)
    with pytest.raises(LanguageNotFoundError):
        catalog.set_default("fr")
    assert catalog.get_default().langcode == "en"


def test_is_standard(catalog):
    assert catalog.is_standard("pt-br")
    assert not catalog.is_standard("xx")


def test_set_plural_forms(catalog):
    LanguageFactory.create(langcode="xx")

    catalog.set_plural_forms("xx", "nplurals=3; plural=(n > 2 ? 2 : n);")
    catalog.set_plural_forms("xx", "")

    assert (
        Language.objects.get(langcode="xx").plural_forms
        == "nplurals=3; plural=(n > 2 ? 2 : n);"
    )
