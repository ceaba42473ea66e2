"""Registry of the languages known to the site."""

import logging

from django.db import transaction

from ol_openedx_language_sync.constants import (
    MSG_ALREADY_DISABLED,
    MSG_ALREADY_ENABLED,
    MSG_INVALID_LANGCODE,
    MSG_LANGUAGE_EXISTS,
    MSG_LANGUAGE_MISSING,
    MSG_LOCKED_LANGUAGE,
    STANDARD_LANGUAGES,
)
from ol_openedx_language_sync.exceptions import (
    AlreadyInStateError,
    LanguageExistsError,
    LanguageNotFoundError,
    LockedLanguageError,
    UnknownLangcodeError,
)
from ol_openedx_language_sync.models import Language

logger = logging.getLogger(__name__)


class LanguageCatalog:
    """
    Language lookups and state changes over the ``Language`` model.

    ``cache`` is any object with an ``invalidate()`` method; it is called
    synchronously after every visible state change.
    """

    def __init__(self, cache=None):
        self.cache = cache

    def _invalidate_cache(self):
        if self.cache is not None:
            self.cache.invalidate()

    def list_languages(self, enabled=None):
        """Return languages in stable (weight, langcode) order."""
        languages = Language.objects.order_by("weight", "langcode")
        if enabled is not None:
            languages = languages.filter(enabled=enabled)
        return list(languages)

    def exists(self, langcode: str) -> bool:
        return Language.objects.filter(langcode=langcode).exists()

    def get(self, langcode: str) -> Language:
        try:
            return Language.objects.get(langcode=langcode)
        except Language.DoesNotExist as exc:
            raise LanguageNotFoundError(
                MSG_LANGUAGE_MISSING.format(langcode=langcode), langcode=langcode
            ) from exc

    @staticmethod
    def is_standard(langcode: str) -> bool:
        return langcode in STANDARD_LANGUAGES

    def add(self, langcode: str, name: str | None = None) -> Language:
        """
        Create an enabled language.

        Non-standard langcodes are only accepted with an explicit ``name``.
        """
        if self.exists(langcode):
            raise LanguageExistsError(
                MSG_LANGUAGE_EXISTS.format(langcode=langcode), langcode=langcode
            )
        native_name = ""
        if self.is_standard(langcode):
            standard_name, native_name = STANDARD_LANGUAGES[langcode]
            name = name or standard_name
        elif not name:
            raise UnknownLangcodeError(
                MSG_INVALID_LANGCODE.format(langcode=langcode), langcode=langcode
            )
        language = Language.objects.create(
            langcode=langcode, name=name, native_name=native_name, enabled=True
        )
        logger.info("Added language %s (%s)", langcode, name)
        return language

    def ensure(self, langcode: str) -> tuple[Language, bool]:
        """Return the language, creating it first when missing."""
        try:
            return self.get(langcode), False
        except LanguageNotFoundError:
            name = None
            if not self.is_standard(langcode):
                name = langcode
            return self.add(langcode, name=name), True

    def set_enabled(self, langcode: str, enabled: bool) -> Language:  # noqa: FBT001
        language = self.get(langcode)
        if not enabled and language.locked:
            raise LockedLanguageError(
                MSG_LOCKED_LANGUAGE.format(langcode=langcode), langcode=langcode
            )
        if language.enabled == enabled:
            template = MSG_ALREADY_ENABLED if enabled else MSG_ALREADY_DISABLED
            raise AlreadyInStateError(
                template.format(langcode=langcode), langcode=langcode
            )
        language.enabled = enabled
        language.save(update_fields=["enabled", "updated_at"])
        self._invalidate_cache()
        logger.info("Set enabled=%s for language %s", enabled, langcode)
        return language

    def set_default(self, langcode: str) -> Language:
        """Make ``langcode`` the only default language in one transaction."""
        with transaction.atomic():
            language = self.get(langcode)
            # Row locks keep concurrent callers from both committing a default
            list(Language.objects.select_for_update().filter(is_default=True))
            Language.objects.filter(is_default=True).exclude(pk=language.pk).update(
                is_default=False
            )
            if not language.is_default:
                language.is_default = True
                language.save(update_fields=["is_default", "updated_at"])
        self._invalidate_cache()
        logger.info("Language %s is now the default", langcode)
        return language

    def set_plural_forms(self, langcode: str, plural_forms: str) -> Language:
        """Remember the gettext Plural-Forms rule used by ``langcode``."""
        language = self.get(langcode)
        if plural_forms and language.plural_forms != plural_forms:
            language.plural_forms = plural_forms
            language.save(update_fields=["plural_forms", "updated_at"])
            logger.info("Plural forms of %s set to %s", langcode, plural_forms)
        return language

    def get_default(self) -> Language | None:
        return Language.objects.filter(is_default=True).first()
