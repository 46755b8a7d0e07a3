"""Language catalog - the fixed, ordered list of languages offered by the form."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class LanguageEntry:
    """A selectable language: short code plus the label shown to users."""

    code: str
    name: str


# Display order of the language selectors
SUPPORTED_LANGUAGES: Tuple[LanguageEntry, ...] = (
    LanguageEntry("en", "English"),
    LanguageEntry("es", "Spanish"),
    LanguageEntry("fr", "French"),
    LanguageEntry("de", "German"),
    LanguageEntry("ja", "Japanese"),
    LanguageEntry("it", "Italian"),
    LanguageEntry("pt", "Portuguese"),
    LanguageEntry("ru", "Russian"),
    LanguageEntry("zh", "Chinese (Simplified)"),
    LanguageEntry("ar", "Arabic"),
    LanguageEntry("ko", "Korean"),
    LanguageEntry("hi", "Hindi"),
    LanguageEntry("tr", "Turkish"),
    LanguageEntry("nl", "Dutch"),
    LanguageEntry("sv", "Swedish"),
)

_NAMES_BY_CODE = {entry.code: entry.name for entry in SUPPORTED_LANGUAGES}


def list_languages() -> Tuple[LanguageEntry, ...]:
    """Return the catalog in display order."""
    return SUPPORTED_LANGUAGES


def code_to_name(code: str) -> str:
    """
    Resolve a language code to its display name.

    Unknown codes are returned unchanged so that a request can still be
    dispatched for languages the catalog does not list yet.
    """
    return _NAMES_BY_CODE.get(code, code)


def is_supported(code: str) -> bool:
    """True if code is listed in the catalog."""
    return code in _NAMES_BY_CODE
