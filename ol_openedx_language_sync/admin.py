"""
Django admin pages for the language sync plugin
"""

from django.contrib import admin

from ol_openedx_language_sync.models import Language, Translation, TranslationSource


@admin.register(Language)
class LanguageAdmin(admin.ModelAdmin):
    """
    Admin interface for the Language model.
    """

    list_display = (
        "langcode",
        "name",
        "native_name",
        "enabled",
        "locked",
        "is_default",
        "weight",
    )
    list_filter = ("enabled", "locked", "is_default")
    search_fields = ("langcode", "name", "native_name")
    readonly_fields = ("is_default", "created_at", "updated_at")
    ordering = ("weight", "langcode")

    def has_delete_permission(self, request, obj=None):  # noqa: ARG002
        """
        Locked languages can not be deleted.
        """
        return obj is None or not obj.locked


class TranslationInline(admin.TabularInline):
    model = Translation
    extra = 0
    fields = ("language", "translation", "customized", "updated_at")
    readonly_fields = ("updated_at",)


@admin.register(TranslationSource)
class TranslationSourceAdmin(admin.ModelAdmin):
    """
    Admin interface for the TranslationSource model.
    """

    list_display = ("source", "context", "created_at")
    search_fields = ("source", "source_plural", "context")
    readonly_fields = ("created_at",)
    inlines = (TranslationInline,)
    list_per_page = 50
