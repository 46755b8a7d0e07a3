"""Domain layer - Pure entities for languages, form state and validation."""

from .form_state import FieldError, FormField, FormState, RawInput, TranslationRequest, validate
from .languages import SUPPORTED_LANGUAGES, LanguageEntry, code_to_name, is_supported, list_languages

__all__ = [
    "LanguageEntry",
    "SUPPORTED_LANGUAGES",
    "list_languages",
    "code_to_name",
    "is_supported",
    "FormState",
    "RawInput",
    "FormField",
    "FieldError",
    "TranslationRequest",
    "validate",
]
