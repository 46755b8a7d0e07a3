"""Form entities - translator form state, raw input and validation rules."""

from dataclasses import dataclass
from enum import Enum
from typing import List

from .languages import is_supported

MAX_INPUT_LENGTH = 2000

DEFAULT_SOURCE_LANGUAGE = "en"
DEFAULT_TARGET_LANGUAGE = "es"


class FormField(str, Enum):
    """Form fields that can carry an inline validation error."""

    INPUT_TEXT = "input_text"
    SOURCE_LANGUAGE = "source_language"
    TARGET_LANGUAGE = "target_language"


@dataclass(frozen=True)
class FieldError:
    """A validation failure attached to a single form field."""

    field: FormField
    message: str


@dataclass(frozen=True)
class RawInput:
    """Values captured from the form fields at submit time."""

    input_text: str
    source_language_code: str
    target_language_code: str


@dataclass
class FormState:
    """Everything the translator form displays."""

    input_text: str = ""
    source_language_code: str = DEFAULT_SOURCE_LANGUAGE
    target_language_code: str = DEFAULT_TARGET_LANGUAGE
    output_text: str = ""
    is_submitting: bool = False


@dataclass(frozen=True)
class TranslationRequest:
    """Payload sent to the translation service, with display names instead of codes."""

    text: str
    source_language_name: str
    target_language_name: str


def utf16_length(text: str) -> int:
    """Length of text in UTF-16 code units (characters outside the BMP count twice)."""
    return len(text.encode("utf-16-le")) // 2


def validate(raw: RawInput) -> List[FieldError]:
    """
    Check submitted form values before anything is dispatched.

    Each field gets at most one error. The same-language rule is only
    evaluated once every per-field rule passes, and it reports on the
    target field.

    Args:
        raw: Values captured from the form.

    Returns:
        List of field errors; empty when the input may be dispatched.
    """
    errors: List[FieldError] = []

    length = utf16_length(raw.input_text)
    if length < 1:
        errors.append(FieldError(FormField.INPUT_TEXT, "Please enter text to translate."))
    elif length > MAX_INPUT_LENGTH:
        errors.append(FieldError(FormField.INPUT_TEXT, "Text must be 2000 characters or less."))

    if not raw.source_language_code:
        errors.append(FieldError(FormField.SOURCE_LANGUAGE, "Please select a source language."))
    elif not is_supported(raw.source_language_code):
        errors.append(FieldError(FormField.SOURCE_LANGUAGE, "Unsupported source language."))

    if not raw.target_language_code:
        errors.append(FieldError(FormField.TARGET_LANGUAGE, "Please select a target language."))
    elif not is_supported(raw.target_language_code):
        errors.append(FieldError(FormField.TARGET_LANGUAGE, "Unsupported target language."))

    if not errors and raw.source_language_code == raw.target_language_code:
        errors.append(
            FieldError(FormField.TARGET_LANGUAGE, "Source and target languages must be different.")
        )

    return errors
