# SPDX-License-Identifier: Apache-2.0
"""Request and outcome types for adapted translation calls.

An outcome is terminal: one variant is produced per request and never
mutated afterwards. Callers that prefer exceptions can call ``unwrap()``,
which raises the classified error for every variant except ``Translated``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NoReturn, Union

from translation_adapter.errors import (
    TranslationCancelledError,
    TranslationError,
    UnsupportedLanguagePairError,
)
from translation_adapter.languages import LanguageCode


@dataclass(frozen=True)
class TranslationRequest:
    """A single translation request."""

    text: str
    source: LanguageCode
    target: LanguageCode

    def __post_init__(self) -> None:
        if self.text is None:
            raise TypeError("text must not be None")

    @property
    def pair(self) -> tuple[LanguageCode, LanguageCode]:
        return (self.source, self.target)


@dataclass(frozen=True)
class Translated:
    """The legacy service produced a translation."""

    text: str

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> str:
        return self.text


@dataclass(frozen=True)
class Unsupported:
    """No route exists for the language pair."""

    source: LanguageCode
    target: LanguageCode

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise UnsupportedLanguagePairError(self.source, self.target)


@dataclass(frozen=True)
class Cancelled:
    """The caller stopped waiting.

    ``reason`` is "deadline" when a deadline signal fired. A legacy call
    that had already started may still be running in the background.
    """

    reason: str = "cancelled"

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise TranslationCancelledError(self.reason)


@dataclass(frozen=True)
class Fault:
    """The legacy call failed unexpectedly."""

    detail: str
    cause: BaseException | None = None

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        error = TranslationError(self.detail)
        if self.cause is not None:
            raise error from self.cause
        raise error


TranslationOutcome = Union[Translated, Unsupported, Cancelled, Fault]
