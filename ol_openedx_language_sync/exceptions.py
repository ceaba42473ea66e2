"""Exceptions for language administration and translation sync"""


class LanguageSyncError(Exception):
    """
    Convenience exception class for language sync errors
    """

    def __init__(self, message):
        # Force the lazy i18n values to turn into actual unicode objects
        super().__init__(str(message))


class ValidationError(LanguageSyncError):
    """Bad or empty input (langcode list, status tokens)."""


class EmptyLangcodeListError(ValidationError):
    """No langcodes were supplied to a batch command."""


class UnknownLangcodeError(ValidationError):
    """The langcode is not one of the predefined language definitions."""

    def __init__(self, message, langcode=None):
        super().__init__(message)
        self.langcode = langcode


class UnknownStatusError(ValidationError):
    """One or more translation status tokens are not recognised."""

    def __init__(self, message, tokens=()):
        super().__init__(message)
        self.tokens = list(tokens)


class NotFoundError(LanguageSyncError):
    """A referenced object does not exist."""


class LanguageNotFoundError(NotFoundError):
    """The langcode is unknown to the language catalog."""

    def __init__(self, message, langcode=None):
        super().__init__(message)
        self.langcode = langcode


class ConflictError(LanguageSyncError):
    """The requested change conflicts with the current catalog state."""

    def __init__(self, message, langcode=None):
        super().__init__(message)
        self.langcode = langcode


class LanguageExistsError(ConflictError):
    """The language is already part of the catalog."""


class AlreadyInStateError(ConflictError):
    """The language is already enabled/disabled as requested."""


class LockedLanguageError(ConflictError):
    """Locked system languages cannot be disabled."""


class TranslationFileError(LanguageSyncError):
    """
    Reading or writing a translation file failed
    """

    def __init__(self, message, path=None):
        super().__init__(message)
        self.path = path


class PoFileNotFoundError(TranslationFileError):
    """The source file could not be located."""


class MalformedPoFileError(TranslationFileError):
    """The source file is not structurally valid gettext PO."""

    def __init__(self, message, path=None, lineno=None):
        super().__init__(message, path=path)
        self.lineno = lineno


class TargetNotWritableError(TranslationFileError):
    """The export target directory cannot be created or written to."""


class EmptyResultError(LanguageSyncError):
    """A query produced no rows to act upon."""


class NothingToExportError(EmptyResultError):
    """No translation matched the export status filter."""
