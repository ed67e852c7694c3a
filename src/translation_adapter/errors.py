# SPDX-License-Identifier: Apache-2.0
"""Exception taxonomy for the translation adapter."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from translation_adapter.languages import LanguageCode


class TranslatorError(Exception):
    """Base exception for translator module."""

    pass


class TranslationError(TranslatorError):
    """Error during translation (legacy call failure, backend error, etc.).

    This error type is potentially retryable by the caller.
    """

    pass


class ConfigurationError(TranslatorError):
    """Configuration error (unknown language code, invalid parameters, etc.).

    This error type is NOT retryable - fix the input first.
    """

    pass


class UnsupportedLanguagePairError(TranslatorError):
    """No routing entry exists for the requested language pair.

    This error type is NOT retryable.
    """

    def __init__(self, source: LanguageCode, target: LanguageCode) -> None:
        super().__init__(
            f"Unsupported language pair: {source.value} -> {target.value}"
        )
        self.source = source
        self.target = target


class TranslationCancelledError(TranslatorError):
    """The caller's cancellation signal or deadline fired."""

    def __init__(self, reason: str = "cancelled") -> None:
        super().__init__(f"Translation cancelled ({reason})")
        self.reason = reason
