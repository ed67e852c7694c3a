# SPDX-License-Identifier: Apache-2.0
"""In-process legacy translation service.

Deterministic dictionary lookups with a tagged placeholder fallback. Each
call blocks for ``latency`` seconds to stand in for a slow legacy system.
"""

from __future__ import annotations

import logging
import math
import threading
import time

from translation_adapter.languages import LanguageCode

logger = logging.getLogger(__name__)

_SPANISH = {
    "Hello": "Hola",
    "World": "Mundo",
}

_FRENCH = {
    "Hello": "Bonjour",
}


class LegacyTranslationService:
    """Blocking English-to-Spanish/French translator with no cancellation support."""

    def __init__(self, latency: float = 0.0) -> None:
        """Initialize LegacyTranslationService.

        Args:
            latency: Seconds each call blocks before returning.
        """
        if math.isnan(latency) or latency < 0:
            raise ValueError(f"latency must be a non-negative number, got {latency}")
        self._latency = latency
        self._calls = 0
        self._lock = threading.Lock()

    @property
    def latency(self) -> float:
        return self._latency

    @property
    def calls(self) -> int:
        """Number of translation calls received so far."""
        with self._lock:
            return self._calls

    def translate_english_to_spanish(self, text: str) -> str:
        return self._lookup(_SPANISH, LanguageCode.SPANISH, text)

    def translate_english_to_french(self, text: str) -> str:
        return self._lookup(_FRENCH, LanguageCode.FRENCH, text)

    def _lookup(self, table: dict[str, str], target: LanguageCode, text: str) -> str:
        with self._lock:
            self._calls += 1
        logger.debug("Processing translation to %s...", target.label)
        if self._latency:
            time.sleep(self._latency)
        return table.get(text, f"[{target.label}: {text}]")
