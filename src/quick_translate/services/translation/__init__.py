"""Translation services - abstract interface and Gemini implementation."""

from quick_translate.services.translation.translation_service import TranslationService, TranslationResult
from quick_translate.services.translation.gemini_translation_service import GeminiTranslationService

__all__ = [
    "TranslationService",
    "TranslationResult",
    "GeminiTranslationService",
]
