"""Translation Service - Abstract interface for the external translation capability."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from quick_translate.core import TranslationRequest


@dataclass
class TranslationResult:
    """Result of a translation request."""

    translated_text: str
    model: str = ""
    error: Optional[str] = None

    @property
    def is_error(self) -> bool:
        """True if translation failed."""
        return self.error is not None


class TranslationService(ABC):
    """
    Abstract service for translating text between two named languages.

    Implementations (e.g., GeminiTranslationService) own credentials,
    transport and any retry policy.
    """

    @abstractmethod
    def translate(self, request: TranslationRequest) -> TranslationResult:
        """
        Translate request.text from the source language to the target language.

        Args:
            request: Text plus source/target language display names.

        Returns:
            TranslationResult with translated text or error message.
        """
        pass
