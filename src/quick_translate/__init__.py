"""
Quick Translate - A small desktop form for translating text with Gemini.

This package provides:
- A fixed catalog of supported languages
- Form validation and the translate/swap/copy workflow
- A Gemini-backed translation service
"""

__version__ = "0.1.0"

from quick_translate.core import FormState, LanguageEntry, TranslationRequest, validate

__all__ = [
    "FormState",
    "LanguageEntry",
    "TranslationRequest",
    "validate",
]
