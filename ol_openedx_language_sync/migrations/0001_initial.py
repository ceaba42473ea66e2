# Generated migration for the language sync models

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []  # type: ignore  # noqa: PGH003

    operations = [
        migrations.CreateModel(
            name="Language",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "langcode",
                    models.CharField(
                        help_text="Short locale tag (e.g. 'fr', 'pt-br')",
                        max_length=12,
                        unique=True,
                    ),
                ),
                (
                    "name",
                    models.CharField(help_text="English display name", max_length=255),
                ),
                (
                    "native_name",
                    models.CharField(blank=True, default="", max_length=255),
                ),
                ("enabled", models.BooleanField(default=True)),
                (
                    "locked",
                    models.BooleanField(
                        default=False,
                        help_text="System languages that can not be disabled",
                    ),
                ),
                ("is_default", models.BooleanField(default=False)),
                ("weight", models.IntegerField(default=0)),
                (
                    "plural_forms",
                    models.CharField(
                        blank=True,
                        default="",
                        help_text="Plural-Forms header of imported plural entries",
                        max_length=255,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ("weight", "langcode"),
            },
        ),
        migrations.CreateModel(
            name="TranslationSource",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("source", models.TextField()),
                ("source_plural", models.TextField(blank=True, null=True)),
                ("context", models.CharField(blank=True, default="", max_length=255)),
                (
                    "source_hash",
                    models.CharField(
                        editable=False,
                        help_text="sha256 of the context and source string",
                        max_length=64,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ("id",),
            },
        ),
        migrations.CreateModel(
            name="Translation",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "translation",
                    models.TextField(
                        help_text="Plural forms are separated by the \\x03 character"
                    ),
                ),
                (
                    "customized",
                    models.BooleanField(
                        default=False,
                        help_text="Manually edited, protected from overwrite",
                    ),
                ),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "language",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="translations",
                        to="ol_openedx_language_sync.language",
                    ),
                ),
                (
                    "source",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="translations",
                        to="ol_openedx_language_sync.translationsource",
                    ),
                ),
            ],
        ),
        migrations.AddConstraint(
            model_name="language",
            constraint=models.UniqueConstraint(
                condition=models.Q(("is_default", True)),
                fields=("is_default",),
                name="unique_default_language",
            ),
        ),
        migrations.AddConstraint(
            model_name="translationsource",
            constraint=models.UniqueConstraint(
                fields=("source_hash",), name="unique_translation_source"
            ),
        ),
        migrations.AddConstraint(
            model_name="translation",
            constraint=models.UniqueConstraint(
                fields=("source", "language"), name="unique_translation"
            ),
        ),
    ]
