# SPDX-License-Identifier: Apache-2.0
"""Chat client that translates messages under a per-call deadline."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from translation_adapter.cancellation import DEADLINE_REASON, CancellationSignal
from translation_adapter.languages import LanguageCode
from translation_adapter.outcomes import (
    Cancelled,
    Fault,
    Translated,
    TranslationOutcome,
    Unsupported,
)

logger = logging.getLogger(__name__)

# Seconds a chat message may wait for its translation
DEFAULT_TIMEOUT = 2.0


class AsyncTranslator(Protocol):
    """Anything exposing the adapter's translate_async contract."""

    async def translate_async(
        self,
        text: str,
        source: LanguageCode | str,
        target: LanguageCode | str,
        cancellation: CancellationSignal | None = None,
    ) -> TranslationOutcome: ...


async def translate_with_deadline(
    translator: AsyncTranslator,
    text: str,
    source: LanguageCode | str,
    target: LanguageCode | str,
    timeout: float,
) -> TranslationOutcome:
    """Translate text, giving up once ``timeout`` seconds have passed.

    A ``Cancelled`` outcome with reason "deadline" means the deadline
    expired. The legacy call may still be finishing in the background.
    """
    with CancellationSignal.with_deadline(timeout) as deadline:
        return await translator.translate_async(text, source, target, deadline)


def describe(outcome: TranslationOutcome) -> str:
    """Render an outcome as user-facing text."""
    if isinstance(outcome, Translated):
        return f'"{outcome.text}"'
    if isinstance(outcome, Unsupported):
        return (
            f"Error: translation from {outcome.source.value} to "
            f"{outcome.target.value} is not supported."
        )
    if isinstance(outcome, Cancelled):
        if outcome.reason == DEADLINE_REASON:
            return "Error: translation timed out."
        return "Error: translation was cancelled."
    if isinstance(outcome, Fault):
        return f"Error: translation failed ({outcome.detail})."
    raise TypeError(f"Unknown translation outcome: {outcome!r}")


class ChatApplication:
    """Prints chat messages together with their translation."""

    def __init__(
        self,
        translator: AsyncTranslator,
        timeout: float = DEFAULT_TIMEOUT,
        output: Callable[[str], None] = print,
    ) -> None:
        self._translator = translator
        self._timeout = timeout
        self._output = output

    @property
    def timeout(self) -> float:
        return self._timeout

    async def show_message(
        self,
        user: str,
        text: str,
        source: LanguageCode | str,
        target: LanguageCode | str,
        timeout: float | None = None,
    ) -> TranslationOutcome:
        """Show a message and its translation.

        Args:
            user: Sender name.
            text: Message text.
            source: Language of the message.
            target: Language to translate into.
            timeout: Per-call deadline in seconds (default: client timeout).

        Returns:
            The translation outcome that was displayed.
        """
        source_code = LanguageCode.parse(source)
        target_code = LanguageCode.parse(target)
        self._output(f"\nUser '{user}' says: \"{text}\"")

        outcome = await translate_with_deadline(
            self._translator,
            text,
            source_code,
            target_code,
            self._timeout if timeout is None else timeout,
        )
        if not outcome.ok:
            logger.info("Message from %s not translated: %r", user, outcome)

        self._output(f" > Translation ({target_code.value}): {describe(outcome)}")
        return outcome
