"""Constants for language administration and translation sync."""

# Translation status tokens (internal spelling)
STATUS_CUSTOMIZED = "customized"
STATUS_NOT_CUSTOMIZED = "not_customized"
STATUS_NOT_TRANSLATED = "not_translated"
STATUS_ALL = "all"

TRANSLATION_STATUSES = (
    STATUS_CUSTOMIZED,
    STATUS_NOT_CUSTOMIZED,
    STATUS_NOT_TRANSLATED,
)

# Command-line spelling -> internal spelling
STATUS_INPUT_VALUES = {
    "customized": STATUS_CUSTOMIZED,
    "not-customized": STATUS_NOT_CUSTOMIZED,
    "not-translated": STATUS_NOT_TRANSLATED,
}

DEFAULT_EXPORT_STATUSES = (STATUS_CUSTOMIZED,)

# Separates plural forms of one translation in the database (gettext convention)
PLURAL_DELIMITER = "\x03"

# Export-all file name template
LANGUAGE_PLACEHOLDER = "%language"
DEFAULT_EXPORT_FILE_PATTERN = "translations/custom/%language.po"

# Export target meaning "write to standard output"
STDOUT_TARGET = "-"

# Batch processing
DEFAULT_BATCH_SIZE = 200
BATCH_BACKEND_INLINE = "inline"
BATCH_BACKEND_CELERY = "celery"

DEFAULT_CACHE_ALIAS = "default"

PO_FILE_EXTENSION = ".po"

# Job states
JOB_SUCCESS = "success"
JOB_PARTIAL_FAILURE = "partial_failure"
JOB_FAILURE = "failure"

# Outcome levels
LEVEL_INFO = "info"
LEVEL_WARNING = "warning"
LEVEL_ERROR = "error"

# Predefined language definitions: langcode -> (English name, native name)
STANDARD_LANGUAGES = {
    "af": ("Afrikaans", "Afrikaans"),
    "am": ("Amharic", "አማርኛ"),
    "ar": ("Arabic", "العربية"),
    "ast": ("Asturian", "Asturianu"),
    "az": ("Azerbaijani", "Azərbaycanca"),
    "be": ("Belarusian", "Беларуская"),
    "bg": ("Bulgarian", "Български"),
    "bn": ("Bengali", "বাংলা"),
    "bs": ("Bosnian", "Bosanski"),
    "ca": ("Catalan", "Català"),
    "cs": ("Czech", "Čeština"),
    "cy": ("Welsh", "Cymraeg"),
    "da": ("Danish", "Dansk"),
    "de": ("German", "Deutsch"),
    "el": ("Greek", "Ελληνικά"),
    "en": ("English", "English"),
    "en-x-simple": ("Simple English", "Simple English"),
    "eo": ("Esperanto", "Esperanto"),
    "es": ("Spanish", "Español"),
    "et": ("Estonian", "Eesti"),
    "eu": ("Basque", "Euskera"),
    "fa": ("Persian, Farsi", "فارسی"),
    "fi": ("Finnish", "Suomi"),
    "fil": ("Filipino", "Filipino"),
    "fr": ("French", "Français"),
    "ga": ("Irish", "Gaeilge"),
    "gl": ("Galician", "Galego"),
    "gu": ("Gujarati", "ગુજરાતી"),
    "he": ("Hebrew", "עברית"),
    "hi": ("Hindi", "हिन्दी"),
    "hr": ("Croatian", "Hrvatski"),
    "hu": ("Hungarian", "Magyar"),
    "hy": ("Armenian", "Հայերեն"),
    "id": ("Indonesian", "Bahasa Indonesia"),
    "is": ("Icelandic", "Íslenska"),
    "it": ("Italian", "Italiano"),
    "ja": ("Japanese", "日本語"),
    "ka": ("Georgian", "ქართული ენა"),
    "kk": ("Kazakh", "Қазақ"),
    "km": ("Khmer", "ខ្មែរ"),
    "kn": ("Kannada", "ಕನ್ನಡ"),
    "ko": ("Korean", "한국어"),
    "lt": ("Lithuanian", "Lietuvių"),
    "lv": ("Latvian", "Latviešu"),
    "mk": ("Macedonian", "Македонски"),
    "ml": ("Malayalam", "മലയാളം"),
    "mn": ("Mongolian", "монгол"),
    "mr": ("Marathi", "मराठी"),
    "ms": ("Bahasa Malaysia", "بهاس ملايو"),
    "my": ("Burmese", "ဗမာစကား"),
    "nb": ("Norwegian Bokmål", "Norsk, bokmål"),
    "ne": ("Nepali", "नेपाली"),
    "nl": ("Dutch", "Nederlands"),
    "nn": ("Norwegian Nynorsk", "Nynorsk"),
    "pa": ("Punjabi", "ਪੰਜਾਬੀ"),
    "pl": ("Polish", "Polski"),
    "pt-br": ("Portuguese, Brazil", "Português, Brasil"),
    "pt-pt": ("Portuguese, Portugal", "Português, Portugal"),
    "ro": ("Romanian", "Română"),
    "ru": ("Russian", "Русский"),
    "si": ("Sinhala", "සිංහල"),
    "sk": ("Slovak", "Slovenčina"),
    "sl": ("Slovenian", "Slovenščina"),
    "sq": ("Albanian", "Shqip"),
    "sr": ("Serbian", "Српски"),
    "sv": ("Swedish", "Svenska"),
    "sw": ("Swahili", "Kiswahili"),
    "ta": ("Tamil", "தமிழ்"),
    "te": ("Telugu", "తెలుగు"),
    "th": ("Thai", "ภาษาไทย"),
    "tr": ("Turkish", "Türkçe"),
    "uk": ("Ukrainian", "Українська"),
    "ur": ("Urdu", "اردو"),
    "uz": ("Uzbek", "o'zbek"),
    "vi": ("Vietnamese", "Tiếng Việt"),
    "zh-hans": ("Chinese, Simplified", "简体中文"),
    "zh-hant": ("Chinese, Traditional", "繁體中文"),
}

# Message templates, formatted with str.format(**kwargs)
MSG_EMPTY_LANGCODES = (
    "Please provide one or more comma-separated language codes as arguments."
)
MSG_LANGUAGE_EXISTS = "The language with code {langcode} already exists."
MSG_INVALID_LANGCODE = "Invalid language code {langcode}"
MSG_LANGUAGE_ADDED = "Added language: {langcode}"
MSG_LANGUAGE_CREATED = "Language {langcode} ({name}) has been created."
MSG_LANGUAGE_MISSING = "Specified language does not exist {langcode}"
MSG_ALREADY_ENABLED = "Language already enabled: {langcode}"
MSG_ALREADY_DISABLED = "Language already disabled: {langcode}"
MSG_LOCKED_LANGUAGE = "Not disabling locked specified language {langcode}"
MSG_LANGUAGE_ENABLED = "Enabled language : {langcode}"
MSG_LANGUAGE_DISABLED = "Disabled language : {langcode}"
MSG_DEFAULT_ASSIGNED = "{langcode} assigned as default"
MSG_FILE_NOT_FOUND = "File to import at {filepath} not found."
MSG_IMPORT_COMPLETE = "Import complete."
MSG_NO_SUCH_LANGUAGE = "No such language: {langcode}"
MSG_UNKNOWN_STATUS = "Unknown status options: {options}"
MSG_NOTHING_TO_EXPORT = "Nothing to export."
MSG_EXPORTED_LANGUAGE = "Exported translations for language {langcode} to file {file}."
