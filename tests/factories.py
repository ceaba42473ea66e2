"""Model factories for the language sync tests"""

import factory
from factory.django import DjangoModelFactory

from ol_openedx_language_sync.models import Language, Translation, TranslationSource


class LanguageFactory(DjangoModelFactory):
    langcode = factory.Sequence(lambda n: f"l{n}")
    name = factory.LazyAttribute(lambda obj: f"Language {obj.langcode}")
    enabled = True
    locked = False
    is_default = False

    class Meta:
        model = Language
        django_get_or_create = ("langcode",)


class TranslationSourceFactory(DjangoModelFactory):
    source = factory.Sequence(lambda n: f"Source string {n}")
    context = ""

    class Meta:
        model = TranslationSource


class TranslationFactory(DjangoModelFactory):
    source = factory.SubFactory(TranslationSourceFactory)
    language = factory.SubFactory(LanguageFactory)
    translation = factory.LazyAttribute(lambda obj: f"{obj.source.source} (translated)")
    customized = False

    class Meta:
        model = Translation
