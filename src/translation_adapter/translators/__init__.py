# SPDX-License-Identifier: Apache-2.0
"""Translation backends and the legacy services they adapt.

Usage:
    from translation_adapter.translators import (
        LegacyTranslationService,
        TranslationAdapter,
    )
    adapter = TranslationAdapter(LegacyTranslationService())
    outcome = await adapter.translate_async("Hello", LanguageCode.ENGLISH, LanguageCode.SPANISH)

    # Google Translate as the legacy service (requires network access)
    from translation_adapter.translators import get_google_legacy_service
    GoogleLegacyService = get_google_legacy_service()
    adapter = TranslationAdapter(GoogleLegacyService())
"""

from translation_adapter.errors import (
    ConfigurationError,
    TranslationCancelledError,
    TranslationError,
    TranslatorError,
    UnsupportedLanguagePairError,
)
from translation_adapter.translators.adapter import AdapterConfig, TranslationAdapter
from translation_adapter.translators.base import LegacyService, TranslatorBackend
from translation_adapter.translators.legacy import LegacyTranslationService

__all__ = [
    # Protocols and exceptions
    "LegacyService",
    "TranslatorBackend",
    "TranslatorError",
    "TranslationError",
    "ConfigurationError",
    "UnsupportedLanguagePairError",
    "TranslationCancelledError",
    # Always available
    "AdapterConfig",
    "LegacyTranslationService",
    "TranslationAdapter",
    # Lazy import functions
    "get_google_legacy_service",
]


def get_google_legacy_service() -> type:
    """Get GoogleLegacyService class with lazy import.

    Importing deep-translator is deferred until the class is requested.

    Returns:
        GoogleLegacyService class.
    """
    from translation_adapter.translators.google import GoogleLegacyService

    return GoogleLegacyService
