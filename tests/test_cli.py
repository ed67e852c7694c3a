# SPDX-License-Identifier: Apache-2.0
"""Tests for the demo CLI."""

from __future__ import annotations

import logging
from collections.abc import Coroutine
from typing import Any
from unittest.mock import patch

import pytest

from translation_adapter import LanguageCode, cli


def _close_and_return_zero(coro: Coroutine[Any, Any, int]) -> int:
    coro.close()
    return 0


class TestParseArgs:
    """Tests for parse_args function."""

    def test_defaults(self) -> None:
        args = cli.parse_args([])
        assert args.verbose is False

    def test_verbose_flag(self) -> None:
        args = cli.parse_args(["-v"])
        assert args.verbose is True

    def test_no_other_flags(self) -> None:
        """Only log verbosity is configurable."""
        with pytest.raises(SystemExit):
            cli.parse_args(["--latency", "1"])

    def test_docstring_documents_flag(self) -> None:
        assert "-v" in (cli.__doc__ or "")


class TestRun:
    """Tests for the demonstration run."""

    def test_demo_deadline_shorter_than_latency(self) -> None:
        assert cli.SHORT_DEADLINE < cli.DEMO_LATENCY

    def test_demo_covers_every_outcome(self) -> None:
        deadlines = [message[4] for message in cli.DEMO_MESSAGES]
        pairs = {(message[2], message[3]) for message in cli.DEMO_MESSAGES}
        assert cli.SHORT_DEADLINE in deadlines
        assert (LanguageCode.GERMAN, LanguageCode.SPANISH) in pairs
        assert (LanguageCode.ENGLISH, LanguageCode.GERMAN) in pairs

    @pytest.mark.asyncio
    async def test_demo_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        messages = [
            ("John", "Hello", LanguageCode.ENGLISH, LanguageCode.SPANISH, None),
            ("Bob", "Hello", LanguageCode.ENGLISH, LanguageCode.FRENCH, 0.01),
            ("Claire", "Bonjour-test", LanguageCode.ENGLISH, LanguageCode.FRENCH, None),
            ("Hans", "Hallo", LanguageCode.GERMAN, LanguageCode.SPANISH, None),
            ("Admin", "Test", LanguageCode.ENGLISH, LanguageCode.GERMAN, None),
        ]
        with (
            patch.object(cli, "DEMO_LATENCY", 0.2),
            patch.object(cli, "DEMO_MESSAGES", messages),
        ):
            exit_code = await cli.run()

        out = capsys.readouterr().out
        assert exit_code == 0
        assert ' > Translation (es): "Hola"' in out
        assert "timed out" in out
        assert '"[FR: Bonjour-test]"' in out
        assert "from de to es is not supported" in out
        assert "from en to de is not supported" in out
        assert "Legacy service calls:" in out


class TestMain:
    """Tests for main entry point."""

    def test_exits_zero(self) -> None:
        with (
            patch.object(cli.asyncio, "run", side_effect=_close_and_return_zero) as mock_run,
            patch.object(logging, "basicConfig") as mock_basic_config,
        ):
            with pytest.raises(SystemExit) as exc_info:
                cli.main([])

        assert exc_info.value.code == 0
        mock_run.assert_called_once()
        assert mock_basic_config.call_args.kwargs["level"] == logging.WARNING

    def test_verbose_sets_debug(self) -> None:
        with (
            patch.object(cli.asyncio, "run", side_effect=_close_and_return_zero),
            patch.object(logging, "basicConfig") as mock_basic_config,
        ):
            with pytest.raises(SystemExit):
                cli.main(["--verbose"])

        assert mock_basic_config.call_args.kwargs["level"] == logging.DEBUG
