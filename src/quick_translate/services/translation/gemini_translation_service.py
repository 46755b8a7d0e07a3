"""Gemini Translation Service - Implements translation via Google Gemini API."""

import logging
import time

import google.genai as genai
from google.genai import types

from quick_translate.core import TranslationRequest
from quick_translate.services.settings_manager import SettingsManager
from quick_translate.services.translation.translation_service import TranslationResult, TranslationService

logger = logging.getLogger(__name__)


class GeminiTranslationService(TranslationService):
    """
    Translation service using Google Gemini API.

    Rate-limit errors are retried with exponential backoff; every other
    failure is returned as an error result on the first attempt.
    """

    MAX_RETRIES = 3
    INITIAL_RETRY_DELAY = 2

    TRANSLATION_PROMPT = """Translate the following text from {source_language} to {target_language}.
Preserve the tone and meaning of the original.
Only output the translation, nothing else.

Text:
{text}"""

    def __init__(self, settings_manager: SettingsManager):
        self.settings_manager = settings_manager

    def translate(self, request: TranslationRequest) -> TranslationResult:
        """
        Translate text using Gemini API.

        Args:
            request: Text and the display names of both languages.

        Returns:
            TranslationResult with translated text or error message.
        """
        model_name = self.settings_manager.get_model_name()
        api_key = self.settings_manager.get_gemini_api_key()
        if not api_key:
            return TranslationResult(
                translated_text="",
                model=model_name,
                error="API key not configured. Add GEMINI_API_KEY to .env file.",
            )

        prompt = self.TRANSLATION_PROMPT.format(
            source_language=request.source_language_name,
            target_language=request.target_language_name,
            text=request.text,
        )

        retry_delay = self.INITIAL_RETRY_DELAY
        attempt = 0

        while True:
            attempt += 1
            try:
                logger.debug(
                    "Translating %d chars %s -> %s with %s (attempt %d/%d)",
                    len(request.text),
                    request.source_language_name,
                    request.target_language_name,
                    model_name,
                    attempt,
                    self.MAX_RETRIES,
                )
                client = genai.Client(api_key=api_key)
                response = client.models.generate_content(
                    model=model_name,
                    contents=prompt,
                    config=types.GenerateContentConfig(
                        temperature=0.3,
                        top_p=0.95,
                        top_k=40,
                        max_output_tokens=4096,
                    ),
                )

                if not response.text:
                    return TranslationResult(
                        translated_text="",
                        model=model_name,
                        error="Empty response from API",
                    )

                logger.debug("Translation received on attempt %d (%d chars)", attempt, len(response.text))
                return TranslationResult(
                    translated_text=response.text.strip(),
                    model=model_name,
                )

            except Exception as e:
                error_msg = str(e).lower()
                is_rate_limit = (
                    "429" in error_msg
                    or "resource_exhausted" in error_msg
                    or "quota" in error_msg
                    or "rate_limit" in error_msg
                )

                if is_rate_limit and attempt < self.MAX_RETRIES:
                    logger.warning("Rate limit hit, retrying in %s seconds", retry_delay)
                    time.sleep(retry_delay)
                    retry_delay *= 2
                    continue

                logger.error("Gemini request failed: %s: %s", type(e).__name__, e)
                return TranslationResult(
                    translated_text="",
                    model=model_name,
                    error=self._describe_error(e, error_msg, is_rate_limit),
                )

    @staticmethod
    def _describe_error(error: Exception, error_msg: str, is_rate_limit: bool) -> str:
        """Map an API exception to a message fit for the user."""
        if "api_key" in error_msg or "authentication" in error_msg or "invalid" in error_msg:
            return f"Invalid API key or request: {error}"
        if is_rate_limit:
            return "API quota exceeded. Please try again later."
        if "deadline" in error_msg or "timeout" in error_msg:
            return "Request timed out. Please check your connection."
        return f"Translation failed: {error}"
