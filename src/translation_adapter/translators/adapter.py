# SPDX-License-Identifier: Apache-2.0
"""Asynchronous, cancellable adapter over a blocking legacy service.

The blocking legacy call runs in a worker thread so the event loop is never
held up. A CancellationSignal is honoured at three points:

1. On entry: an already-triggered signal returns ``Cancelled`` and nothing
   is dispatched.
2. In the worker thread, before the legacy call: a signal triggered while
   the work was queued returns ``Cancelled`` and the legacy call is skipped.
3. While the caller waits: if the signal fires first, the caller gets
   ``Cancelled`` at once.

Case 3 does not stop the legacy call. A running thread cannot be
interrupted, so the call finishes in the background and its result is
discarded. The adapter keeps the task alive until then; ``aclose()`` waits
for all such work.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from translation_adapter.cancellation import CancellationSignal
from translation_adapter.errors import (
    ConfigurationError,
    TranslationCancelledError,
    TranslationError,
    UnsupportedLanguagePairError,
)
from translation_adapter.languages import LanguageCode
from translation_adapter.outcomes import (
    Cancelled,
    Fault,
    Translated,
    TranslationOutcome,
    TranslationRequest,
    Unsupported,
)
from translation_adapter.translators.base import LegacyService

logger = logging.getLogger(__name__)


@dataclass
class AdapterConfig:
    """Translation adapter configuration."""

    # Worker threads allowed to run legacy calls at the same time
    max_concurrent: int = 4


class TranslationAdapter:
    """Adapts a blocking LegacyService to async, cancellable calls.

    Only English to Spanish and English to French are routed. Every other
    pair is reported as ``Unsupported`` without touching the legacy service.

    An adapter may be reused across event loops (e.g. successive
    ``asyncio.run`` calls); the worker-slot semaphore is recreated for each
    loop. Work still in flight on a previous loop is not carried over.

    Attributes:
        name: Backend identifier ("legacy").
    """

    def __init__(
        self,
        legacy: LegacyService,
        config: AdapterConfig | None = None,
    ) -> None:
        """Initialize TranslationAdapter.

        Args:
            legacy: Blocking service to adapt. Must be safe for concurrent use.
            config: Adapter configuration.

        Raises:
            ConfigurationError: If max_concurrent is less than 1.
        """
        self._legacy = legacy
        self._config = config or AdapterConfig()
        if self._config.max_concurrent < 1:
            raise ConfigurationError(
                f"max_concurrent must be at least 1, got {self._config.max_concurrent}"
            )
        self._semaphore: asyncio.Semaphore | None = None
        self._semaphore_loop: asyncio.AbstractEventLoop | None = None
        self._routes: dict[tuple[LanguageCode, LanguageCode], Callable[[str], str]] = {
            (LanguageCode.ENGLISH, LanguageCode.SPANISH): legacy.translate_english_to_spanish,
            (LanguageCode.ENGLISH, LanguageCode.FRENCH): legacy.translate_english_to_french,
        }
        # TODO: route X -> English -> Y through two legacy calls once the
        # legacy service gains a to-English method.
        self._tasks: set[asyncio.Task[str]] = set()

    @property
    def name(self) -> str:
        """Return backend name."""
        return "legacy"

    @property
    def pending(self) -> int:
        """Number of dispatched legacy calls that have not finished yet."""
        return len(self._tasks)

    def supports(self, source: LanguageCode, target: LanguageCode) -> bool:
        return (source, target) in self._routes

    async def __aenter__(self) -> TranslationAdapter:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Wait for all dispatched work, including abandoned calls."""
        while self._tasks:
            await asyncio.wait(set(self._tasks))

    async def translate_async(
        self,
        text: str,
        source: LanguageCode | str,
        target: LanguageCode | str,
        cancellation: CancellationSignal | None = None,
    ) -> TranslationOutcome:
        """Translate text without blocking the event loop.

        Args:
            text: Text to translate. Empty text is translated like any other.
            source: Source language.
            target: Target language.
            cancellation: Optional signal; None never cancels.

        Returns:
            Translated, Unsupported, Cancelled or Fault.

        Raises:
            ConfigurationError: If a language code string is not known.
        """
        request = TranslationRequest(
            text, LanguageCode.parse(source), LanguageCode.parse(target)
        )

        if cancellation is not None and cancellation.cancelled:
            logger.debug("Cancelled before dispatch: %s -> %s", request.source, request.target)
            return Cancelled(cancellation.reason or "cancelled")

        task = asyncio.create_task(self._dispatch(request, cancellation))
        self._tasks.add(task)
        task.add_done_callback(self._forget)

        if cancellation is None:
            # asyncio.wait leaves the task running if this coroutine is cancelled
            await asyncio.wait({task})
            return self._classify(request, task)

        waiter = asyncio.create_task(cancellation.wait())
        try:
            await asyncio.wait({task, waiter}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            waiter.cancel()

        if task.done():
            return self._classify(request, task)

        logger.debug(
            "Stopped waiting for %s -> %s (%s); legacy call continues in background",
            request.source.value,
            request.target.value,
            cancellation.reason,
        )
        task.add_done_callback(_log_abandoned)
        return Cancelled(cancellation.reason or "cancelled")

    async def translate(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
        cancellation: CancellationSignal | None = None,
    ) -> str:
        """Translate a single text, raising on anything but success.

        Args:
            text: Text to translate.
            source_lang: Source language code ("en").
            target_lang: Target language code ("es", "fr").
            cancellation: Optional signal; None never cancels.

        Returns:
            Translated text.

        Raises:
            ConfigurationError: If a language code is not known.
            UnsupportedLanguagePairError: If the pair cannot be routed.
            TranslationCancelledError: If the call was cancelled.
            TranslationError: If the legacy call failed.
        """
        outcome = await self.translate_async(text, source_lang, target_lang, cancellation)
        return outcome.unwrap()

    async def translate_batch(
        self,
        texts: list[str],
        source_lang: str,
        target_lang: str,
    ) -> list[str]:
        """Translate multiple texts in parallel.

        Returns:
            List of translated texts (same order and length as input).
        """
        if not texts:
            return []

        tasks = [self.translate(t, source_lang, target_lang) for t in texts]
        return list(await asyncio.gather(*tasks))

    async def _dispatch(
        self,
        request: TranslationRequest,
        cancellation: CancellationSignal | None,
    ) -> str:
        async with self._worker_slots():
            return await asyncio.to_thread(self._translate_sync, request, cancellation)

    def _worker_slots(self) -> asyncio.Semaphore:
        """Return the worker-slot semaphore bound to the running loop."""
        loop = asyncio.get_running_loop()
        if self._semaphore is None or self._semaphore_loop is not loop:
            self._semaphore = asyncio.Semaphore(self._config.max_concurrent)
            self._semaphore_loop = loop
        return self._semaphore

    def _translate_sync(
        self,
        request: TranslationRequest,
        cancellation: CancellationSignal | None,
    ) -> str:
        """Route and run one request. Executes in a worker thread.

        Raises:
            TranslationCancelledError: If cancelled while queued.
            UnsupportedLanguagePairError: If the pair has no route.
            TranslationError: On legacy failure.
        """
        if cancellation is not None and cancellation.cancelled:
            raise TranslationCancelledError(cancellation.reason or "cancelled")

        route = self._routes.get(request.pair)
        if route is None:
            raise UnsupportedLanguagePairError(request.source, request.target)

        try:
            return route(request.text)
        except TranslationError:
            raise
        except Exception as e:
            raise TranslationError(f"Legacy service failed: {e}") from e

    def _classify(
        self,
        request: TranslationRequest,
        task: asyncio.Task[str],
    ) -> TranslationOutcome:
        try:
            text = task.result()
        except UnsupportedLanguagePairError as e:
            return Unsupported(e.source, e.target)
        except TranslationCancelledError as e:
            logger.debug("Cancelled while queued: %s -> %s", request.source.value, request.target.value)
            return Cancelled(e.reason)
        except Exception as e:
            logger.warning(
                "Translation %s -> %s failed: %s",
                request.source.value,
                request.target.value,
                e,
            )
            return Fault(detail=str(e), cause=e.__cause__ or e)
        return Translated(text)

    def _forget(self, task: asyncio.Task[str]) -> None:
        self._tasks.discard(task)
        # Mark the exception retrieved even if no caller is left to read it
        if not task.cancelled():
            task.exception()


def _log_abandoned(task: asyncio.Task[str]) -> None:
    if task.cancelled():
        return
    error = task.exception()
    if error is None:
        logger.debug("Abandoned translation finished; result discarded")
    elif isinstance(error, TranslationCancelledError):
        logger.debug("Abandoned translation skipped: %s", error)
    else:
        logger.warning("Abandoned translation failed after caller stopped waiting: %s", error)
