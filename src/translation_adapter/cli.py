# SPDX-License-Identifier: Apache-2.0
"""
Translation Adapter - Demo CLI

Runs a fixed series of chat messages through the asynchronous adapter over
the blocking legacy translation service, showing successful translations,
a deadline timeout, a placeholder fallback and unsupported language pairs.

Usage:
    translate-demo [-v]

The only flag, -v, raises log verbosity; the demo itself takes no inputs.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import NoReturn

from translation_adapter.client import ChatApplication
from translation_adapter.languages import LanguageCode
from translation_adapter.translators.adapter import TranslationAdapter
from translation_adapter.translators.legacy import LegacyTranslationService

logger = logging.getLogger(__name__)

# Simulated blocking time of each legacy call
DEMO_LATENCY = 0.5

# Deadline shorter than DEMO_LATENCY, used to show a timeout
SHORT_DEADLINE = 0.1

# (user, text, source, target, deadline); None uses the client default
DEMO_MESSAGES: list[tuple[str, str, LanguageCode, LanguageCode, float | None]] = [
    ("John", "Hello", LanguageCode.ENGLISH, LanguageCode.SPANISH, None),
    ("Alice", "World", LanguageCode.ENGLISH, LanguageCode.SPANISH, None),
    ("Bob", "Hello", LanguageCode.ENGLISH, LanguageCode.FRENCH, SHORT_DEADLINE),
    ("Claire", "Bonjour-test", LanguageCode.ENGLISH, LanguageCode.FRENCH, None),
    ("Hans", "Hallo", LanguageCode.GERMAN, LanguageCode.SPANISH, None),
    ("Admin", "Test", LanguageCode.ENGLISH, LanguageCode.GERMAN, None),
]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed argument Namespace.
    """
    parser = argparse.ArgumentParser(
        prog="translate-demo",
        description="Adapter pattern demo: real-time translator over a legacy service",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


async def run() -> int:
    """Run the demonstration messages.

    Returns:
        Exit code (always 0).
    """
    print("Adapter pattern: real-time translator")

    legacy = LegacyTranslationService(latency=DEMO_LATENCY)
    async with TranslationAdapter(legacy) as adapter:
        chat = ChatApplication(adapter)
        for user, text, source, target, deadline in DEMO_MESSAGES:
            await chat.show_message(user, text, source, target, timeout=deadline)

        if adapter.pending:
            logger.debug("Waiting for %d abandoned legacy call(s)", adapter.pending)

    print(f"\nLegacy service calls: {legacy.calls}")
    return 0


def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point."""
    args = parse_args(argv)

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    exit_code = asyncio.run(run())
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
