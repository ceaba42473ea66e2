"""Models for the language sync plugin"""

import hashlib

from django.db import models
from django.db.models import Q

from ol_openedx_language_sync.constants import PLURAL_DELIMITER


class Language(models.Model):
    """
    A language known to the site.

    At most one language is the default; locked (system) languages can not be
    disabled.
    """

    langcode = models.CharField(
        max_length=12,
        unique=True,
        help_text="Short locale tag (e.g. 'fr', 'pt-br')",
    )
    name = models.CharField(max_length=255, help_text="English display name")
    native_name = models.CharField(max_length=255, blank=True, default="")
    enabled = models.BooleanField(default=True)
    locked = models.BooleanField(
        default=False, help_text="System languages that can not be disabled"
    )
    is_default = models.BooleanField(default=False)
    plural_forms = models.CharField(
        max_length=255,
        blank=True,
        default="",
        help_text="Plural-Forms header of imported plural entries",
    )
    weight = models.IntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "ol_openedx_language_sync"
        ordering = ("weight", "langcode")
        constraints = [
            models.UniqueConstraint(
                fields=["is_default"],
                condition=Q(is_default=True),
                name="unique_default_language",
            )
        ]

    def __str__(self):
        return f"{self.name} ({self.langcode})"


class TranslationSource(models.Model):
    """
    A translatable source string, unique by context and text.

    Uniqueness is enforced on ``source_hash`` since MySQL can not index a
    whole TEXT column.
    """

    source = models.TextField()
    source_plural = models.TextField(null=True, blank=True)  # noqa: DJ001
    context = models.CharField(max_length=255, blank=True, default="")
    source_hash = models.CharField(
        max_length=64,
        editable=False,
        help_text="sha256 of the context and source string",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        app_label = "ol_openedx_language_sync"
        ordering = ("id",)
        constraints = [
            models.UniqueConstraint(
                fields=["source_hash"], name="unique_translation_source"
            )
        ]

    @staticmethod
    def hash_key(context: str, source: str) -> str:
        # gettext joins context and msgid with EOT
        key = f"{context or ''}\x04{source}"
        return hashlib.sha256(key.encode("utf-8")).hexdigest()

    def save(self, *args, **kwargs):
        self.source_hash = self.hash_key(self.context, self.source)
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and {"context", "source"} & set(update_fields):
            kwargs["update_fields"] = {*update_fields, "source_hash"}
        super().save(*args, **kwargs)

    def __str__(self):
        if self.context:
            return f"{self.source} [{self.context}]"
        return self.source


class Translation(models.Model):
    """The translation of a source string into one language."""

    source = models.ForeignKey(
        TranslationSource, on_delete=models.CASCADE, related_name="translations"
    )
    language = models.ForeignKey(
        Language, on_delete=models.CASCADE, related_name="translations"
    )
    translation = models.TextField(
        help_text="Plural forms are separated by the \\x03 character"
    )
    customized = models.BooleanField(
        default=False, help_text="Manually edited, protected from overwrite"
    )
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "ol_openedx_language_sync"
        constraints = [
            models.UniqueConstraint(
                fields=["source", "language"], name="unique_translation"
            )
        ]

    def __str__(self):
        return f"{self.source} ({self.language.langcode})"

    @property
    def plural_forms(self) -> tuple[str, ...]:
        return tuple(self.translation.split(PLURAL_DELIMITER))
