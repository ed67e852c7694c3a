# SPDX-License-Identifier: Apache-2.0
"""Legacy service backed by Google Translate via deep-translator.

deep-translator's client is synchronous, so this behaves like any other
blocking legacy service and is adapted the same way.
"""

from deep_translator import GoogleTranslator as DeepGoogleTranslator  # type: ignore[import-untyped]

from translation_adapter.errors import TranslationError
from translation_adapter.languages import LanguageCode


class GoogleLegacyService:
    """Blocking Google Translate service exposing the legacy per-pair methods.

    No API key is required (uses free web API). A new deep-translator client
    is created per call, so instances can be shared between threads.
    """

    def translate_english_to_spanish(self, text: str) -> str:
        return self._translate_sync(text, LanguageCode.ENGLISH, LanguageCode.SPANISH)

    def translate_english_to_french(self, text: str) -> str:
        return self._translate_sync(text, LanguageCode.ENGLISH, LanguageCode.FRENCH)

    def _translate_sync(
        self,
        text: str,
        source: LanguageCode,
        target: LanguageCode,
    ) -> str:
        """Synchronous translation implementation.

        Raises:
            TranslationError: On translation failure.
        """
        # Google rejects empty payloads
        if not text or not text.strip():
            return text

        try:
            translator = DeepGoogleTranslator(source=source.value, target=target.value)
            result = translator.translate(text)
            return result if result is not None else text
        except Exception as e:
            raise TranslationError(f"Google Translate failed: {e}") from e
