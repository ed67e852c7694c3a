# SPDX-License-Identifier: Apache-2.0
"""Protocols for translation backends and legacy adaptees."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LegacyService(Protocol):
    """Blocking translation service being adapted.

    One method per supported language pair. Calls block until done and
    cannot be interrupted.
    """

    def translate_english_to_spanish(self, text: str) -> str:
        """Translate English text to Spanish."""
        ...

    def translate_english_to_french(self, text: str) -> str:
        """Translate English text to French."""
        ...


@runtime_checkable
class TranslatorBackend(Protocol):
    """Protocol definition for asynchronous translation backends."""

    @property
    def name(self) -> str:
        """Backend name ("legacy")."""
        ...

    async def translate(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
    ) -> str:
        """Translate a single text.

        Args:
            text: Text to translate.
            source_lang: Source language code ("en").
            target_lang: Target language code ("es", "fr").

        Returns:
            Translated text.

        Raises:
            TranslationError: On translation failure.
            UnsupportedLanguagePairError: If the pair cannot be routed.
            TranslationCancelledError: If the call was cancelled.
        """
        ...

    async def translate_batch(
        self,
        texts: list[str],
        source_lang: str,
        target_lang: str,
    ) -> list[str]:
        """Translate multiple texts in batch.

        Args:
            texts: List of texts to translate.
            source_lang: Source language code.
            target_lang: Target language code.

        Returns:
            List of translated texts (same order and length as input).
        """
        ...
