# ABOUTME: Supported bulletin languages and their display names.
# ABOUTME: Shared by subscriber validation, templating profiles, and edition tags.

SOURCE_LANGUAGE = "en"

SUPPORTED_LANGUAGES: dict[str, str] = {
    "en": "English",
    "zh-CN": "Simplified Chinese",
    "zh-TW": "Traditional Chinese",
    "ar": "Arabic",
    "vi": "Vietnamese",
    "es": "Spanish",
    "hi": "Hindi",
    "ko": "Korean",
    "ja": "Japanese",
}


def display_name(code: str) -> str:
    """Return the English display name for a language code, or the code itself."""
    return SUPPORTED_LANGUAGES.get(code, code)


def code_for_display_name(name: str) -> str | None:
    """Reverse lookup of a display name, case-insensitive."""
    wanted = name.strip().casefold()
    for code, label in SUPPORTED_LANGUAGES.items():
        if label.casefold() == wanted:
            return code
    return None
