# SPDX-License-Identifier: Apache-2.0
"""Asynchronous, cancellable adapter over a blocking legacy translation service."""

from translation_adapter.cancellation import CancellationSignal
from translation_adapter.languages import LanguageCode
from translation_adapter.outcomes import (
    Cancelled,
    Fault,
    Translated,
    TranslationOutcome,
    TranslationRequest,
    Unsupported,
)
from translation_adapter.translators import (
    AdapterConfig,
    LegacyTranslationService,
    TranslationAdapter,
)

__all__ = [
    "AdapterConfig",
    "CancellationSignal",
    "Cancelled",
    "Fault",
    "LanguageCode",
    "LegacyTranslationService",
    "Translated",
    "TranslationAdapter",
    "TranslationOutcome",
    "TranslationRequest",
    "Unsupported",
]

__version__ = "0.1.0"
