# SPDX-License-Identifier: Apache-2.0
"""Closed set of language identifiers understood by the adapter."""

from __future__ import annotations

from enum import Enum

from translation_adapter.errors import ConfigurationError


class LanguageCode(str, Enum):
    """Supported language identifiers.

    Free-form strings only enter through :meth:`parse`; everything past
    that point compares enum members.
    """

    ENGLISH = "en"
    SPANISH = "es"
    FRENCH = "fr"
    GERMAN = "de"
    UKRAINIAN = "uk"

    @property
    def label(self) -> str:
        """Upper-case tag used in placeholder translations ("ES", "FR")."""
        return self.value.upper()

    @classmethod
    def parse(cls, value: LanguageCode | str) -> LanguageCode:
        """Convert an external language identifier to a LanguageCode.

        Args:
            value: A LanguageCode, or a code string such as "en" or " ES ".

        Returns:
            Matching LanguageCode.

        Raises:
            ConfigurationError: If the code is not known.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ConfigurationError(f"Unknown language code: {value!r}")
